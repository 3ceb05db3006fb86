"""
Base class for class-based objective functions.
"""

from __future__ import annotations

import numpy as np


class Problem:
    """Base class for single-objective minimization problems.

    Subclass this when your objective needs state set up in ``__init__``
    (a dataset, a simulator handle, precomputed tables).

    **Required:** override ``evaluate``.
    **Optional:** set ``n_var`` and ``name``; ``default_bounds`` may be
    overridden to advertise a natural search box.

    Example::

        import numpy as np
        from dekit import Problem, minimize

        class Shifted(Problem):
            name = "shifted"

            def __init__(self, shift):
                self.shift = np.asarray(shift, dtype=float)
                self.n_var = self.shift.size

            def evaluate(self, x):
                return float(np.sum((x - self.shift) ** 2))

        result = minimize(Shifted([1.0, 2.0]), bounds=[(-5, 5)] * 2)
    """

    n_var: int | None = None
    name: str = "problem"

    def evaluate(self, x: np.ndarray) -> float:
        """Return the objective value of one candidate ``x`` (lower is better)."""
        raise NotImplementedError(f"{type(self).__name__} must implement evaluate(x).")

    def default_bounds(self) -> list[tuple[float, float]] | None:
        return None

    def __call__(self, x: np.ndarray) -> float:
        return self.evaluate(x)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, n_var={self.n_var!r})"


__all__ = ["Problem"]
