"""
Friendly problem builder for dekit.

Provides ``make_problem()``, the simplest way to turn a plain Python function
into a problem ready for ``minimize()``.

Example
-------
>>> from dekit import make_problem, minimize
>>> problem = make_problem(lambda x: float((x ** 2).sum()), n_var=2, name="sphere2")
>>> result = minimize(problem, bounds=[(-5, 5), (-5, 5)], n_generations=50, seed=1)
"""

from __future__ import annotations

from collections.abc import Callable

import numpy as np

from dekit.foundation.problem.base import Problem


class FunctionalProblem(Problem):
    """Problem wrapper around a user function ``fn(x) -> float``.

    Created via :func:`make_problem`.
    """

    def __init__(self, fn: Callable[[np.ndarray], object], *, n_var: int | None, name: str) -> None:
        self._fn = fn
        self.n_var = n_var
        self.name = name

    def evaluate(self, x: np.ndarray) -> float:
        return self._fn(x)  # type: ignore[return-value]


def make_problem(
    fn: Callable[[np.ndarray], object],
    *,
    n_var: int | None = None,
    name: str | None = None,
) -> FunctionalProblem:
    """Wrap ``fn`` as a :class:`Problem`.

    ``fn`` receives a read-only 1-D float array and must return one real
    number. Score conversion and NaN rejection happen at evaluation time.
    """
    if not callable(fn):
        raise TypeError(f"fn must be callable, got {type(fn).__name__}.")
    if n_var is not None and int(n_var) < 0:
        raise ValueError("n_var must be non-negative.")
    resolved_name = name or getattr(fn, "__name__", "function")
    return FunctionalProblem(fn, n_var=None if n_var is None else int(n_var), name=resolved_name)


__all__ = ["FunctionalProblem", "make_problem"]
