"""
One-call entry point for minimizing a function with Differential Evolution.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from dekit.engine.algorithm import DEConfig, DEResult, DifferentialEvolution
from dekit.foundation.problem import Problem, make_problem
from dekit.foundation.types import BoundLike


def minimize(
    problem: Problem | Callable[..., Any],
    bounds: Sequence[BoundLike] | None = None,
    *,
    pop_size: int = 20,
    F: float = 0.8,
    CR: float = 0.9,
    n_generations: int = 100,
    seed: int | None = None,
    mutation: str = "rand1",
    crossover: str = "bin",
    exclude_target: bool = True,
) -> DEResult:
    """
    Minimize ``problem`` over ``bounds``.

    ``problem`` may be a :class:`Problem` or a plain callable ``f(x) -> float``.
    When ``bounds`` is omitted the problem's ``default_bounds()`` is used.

    Example:
        >>> from dekit import minimize
        >>> res = minimize(lambda x: float((x ** 2).sum()), [(-5, 5)] * 2, seed=7)
        >>> res.best_score < 1e-3
        True
    """
    if not isinstance(problem, Problem) and not hasattr(problem, "evaluate"):
        problem = make_problem(problem)
    if bounds is None:
        default = getattr(problem, "default_bounds", None)
        bounds = default() if callable(default) else None
        if bounds is None:
            raise ValueError("bounds are required when the problem does not define default_bounds().")
    cfg = (
        DEConfig()
        .pop_size(pop_size)
        .bounds(bounds)
        .mutation(mutation, F=F)
        .crossover(crossover, CR=CR)
        .selection("greedy")
        .seed(seed)
        .exclude_target(exclude_target)
        .n_generations(n_generations)
        .fixed()
    )
    algorithm = DifferentialEvolution.from_config(cfg)
    return algorithm.run(problem, cfg.n_generations)


__all__ = ["minimize"]
