from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from numbers import Integral
from typing import Any, Iterable

import numpy as np

from dekit.foundation.eval import evaluate_variable
from dekit.foundation.exceptions import InvalidParameterError
from dekit.foundation.types import Bound, BoundLike, bounds_to_arrays, freeze, normalize_bounds


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


class Initializer(ABC):
    """Produces generation 0: ``(scores, X)`` with one evaluated row per individual."""

    @abstractmethod
    def initialize(self, problem: Any, population_size: int) -> tuple[np.ndarray, np.ndarray]:
        raise NotImplementedError


class UniformInitializer(Initializer):
    """
    Independent per-dimension uniform sampling inside ``[lower, upper)``.

    The seed is pinned at construction. Without an explicit seed one is drawn
    from OS entropy once, so repeated ``initialize`` calls on the same instance
    return identical populations. The effective seed is available as ``seed``.
    An empty bounds list is accepted and yields zero-dimensional vectors.
    """

    def __init__(self, bounds: Iterable[BoundLike], seed: int | None = None):
        self._bounds = normalize_bounds(bounds)
        self.lower, self.upper = bounds_to_arrays(self._bounds)
        freeze(self.lower)
        freeze(self.upper)
        # largest float below upper, or upper itself for degenerate bounds
        self._upper_open = freeze(np.where(self.upper > self.lower, np.nextafter(self.upper, self.lower), self.upper))
        if seed is None:
            seed = int(np.random.SeedSequence().entropy)
        elif isinstance(seed, bool) or not isinstance(seed, Integral) or seed < 0:
            raise InvalidParameterError("seed", seed, "a non-negative integer")
        self._seed = int(seed)
        if not self._bounds:
            _logger().debug("UniformInitializer built with empty bounds; vectors will be zero-dimensional.")
        _logger().debug("UniformInitializer seed=%d n_var=%d", self._seed, self.n_var)

    @classmethod
    def from_single_bound(cls, lower: float, upper: float, dim: int, seed: int | None = None) -> "UniformInitializer":
        """Replicate one ``(lower, upper)`` bound across ``dim`` dimensions."""
        if isinstance(dim, bool) or not isinstance(dim, Integral) or dim < 0:
            raise InvalidParameterError("dim", dim, "a non-negative integer")
        return cls([Bound(lower, upper)] * int(dim), seed=seed)

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def bounds(self) -> tuple[Bound, ...]:
        return self._bounds

    @property
    def n_var(self) -> int:
        return len(self._bounds)

    def initialize(self, problem: Any, population_size: int) -> tuple[np.ndarray, np.ndarray]:
        if isinstance(population_size, bool) or not isinstance(population_size, Integral) or population_size < 0:
            raise InvalidParameterError("population_size", population_size, "a non-negative integer")
        n = int(population_size)
        rng = np.random.default_rng(self._seed)
        X = np.empty((n, self.n_var), dtype=float)
        scores = np.empty(n, dtype=float)
        for i in range(n):
            # one draw per dimension, in dimension order
            x = np.minimum(rng.uniform(self.lower, self.upper), self._upper_open)
            X[i] = x
            scores[i] = evaluate_variable(problem, freeze(x))
        return freeze(scores), freeze(X)

    def __repr__(self) -> str:
        return f"UniformInitializer(n_var={self.n_var}, seed={self._seed})"


__all__ = ["Initializer", "UniformInitializer"]
