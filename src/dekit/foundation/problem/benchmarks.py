# problem/benchmarks.py
"""Classic single-objective test functions. All have their minimum 0 at a known point."""

from __future__ import annotations

import numpy as np

from dekit.foundation.problem.base import Problem


class SphereProblem(Problem):
    name = "sphere"

    def __init__(self, n_var: int = 2) -> None:
        self.n_var = int(n_var)

    def evaluate(self, x: np.ndarray) -> float:
        return float(np.sum(x * x))

    def default_bounds(self) -> list[tuple[float, float]]:
        return [(-5.0, 5.0)] * self.n_var


class RastriginProblem(Problem):
    name = "rastrigin"

    def __init__(self, n_var: int = 2, A: float = 10.0) -> None:
        self.n_var = int(n_var)
        self.A = float(A)

    def evaluate(self, x: np.ndarray) -> float:
        return float(self.A * x.size + np.sum(x * x - self.A * np.cos(2.0 * np.pi * x)))

    def default_bounds(self) -> list[tuple[float, float]]:
        return [(-5.12, 5.12)] * self.n_var


class RosenbrockProblem(Problem):
    # minimum at (1, ..., 1)
    name = "rosenbrock"

    def __init__(self, n_var: int = 2) -> None:
        self.n_var = int(n_var)

    def evaluate(self, x: np.ndarray) -> float:
        return float(np.sum(100.0 * (x[1:] - x[:-1] ** 2) ** 2 + (1.0 - x[:-1]) ** 2))

    def default_bounds(self) -> list[tuple[float, float]]:
        return [(-2.048, 2.048)] * self.n_var


class AckleyProblem(Problem):
    name = "ackley"

    def __init__(self, n_var: int = 2) -> None:
        self.n_var = int(n_var)

    def evaluate(self, x: np.ndarray) -> float:
        if x.size == 0:
            return 0.0
        d = float(x.size)
        term1 = -20.0 * np.exp(-0.2 * np.sqrt(np.sum(x * x) / d))
        term2 = -np.exp(np.sum(np.cos(2.0 * np.pi * x)) / d)
        # round-off can leave a tiny negative value at the optimum
        return max(0.0, float(term1 + term2 + 20.0 + np.e))

    def default_bounds(self) -> list[tuple[float, float]]:
        return [(-32.768, 32.768)] * self.n_var


__all__ = ["AckleyProblem", "RastriginProblem", "RosenbrockProblem", "SphereProblem"]
