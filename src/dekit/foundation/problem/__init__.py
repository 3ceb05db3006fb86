"""Objective-function abstractions and benchmark problems."""

from __future__ import annotations

from .base import Problem
from .benchmarks import AckleyProblem, RastriginProblem, RosenbrockProblem, SphereProblem
from .builder import FunctionalProblem, make_problem
from .registry import available_problem_names, get_problem
from .types import ProblemProtocol

__all__ = [
    "AckleyProblem",
    "FunctionalProblem",
    "Problem",
    "ProblemProtocol",
    "RastriginProblem",
    "RosenbrockProblem",
    "SphereProblem",
    "available_problem_names",
    "get_problem",
    "make_problem",
]
