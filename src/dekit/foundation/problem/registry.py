"""
Benchmark problem registry.
"""

from __future__ import annotations

from difflib import get_close_matches

from dekit.foundation.exceptions import InvalidProblemError
from dekit.foundation.problem.base import Problem
from dekit.foundation.problem.benchmarks import AckleyProblem, RastriginProblem, RosenbrockProblem, SphereProblem
from dekit.foundation.registry import Registry

_PROBLEMS: Registry[type[Problem]] = Registry("Problems")
_PROBLEMS.register("sphere", SphereProblem)
_PROBLEMS.register("rastrigin", RastriginProblem)
_PROBLEMS.register("rosenbrock", RosenbrockProblem)
_PROBLEMS.register("ackley", AckleyProblem)


def available_problem_names() -> list[str]:
    return _PROBLEMS.list()


def get_problem(name: str, n_var: int = 2, **kwargs) -> Problem:
    """Instantiate a registered benchmark by name (case-insensitive)."""
    key = str(name).lower()
    if key not in _PROBLEMS:
        matches = get_close_matches(key, _PROBLEMS.list(), n=3, cutoff=0.6)
        raise InvalidProblemError(name, matches or None)
    return _PROBLEMS[key](n_var=n_var, **kwargs)


__all__ = ["available_problem_names", "get_problem"]
