"""Shared utilities for real-valued DE operators."""

from __future__ import annotations

import math
from numbers import Real

import numpy as np

from dekit.foundation.exceptions import DimensionMismatchError, InvalidParameterError

ArrayLike = np.ndarray


def _check_scale(value: float, *, name: str = "F") -> float:
    """Validate a finite, non-negative scale factor."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidParameterError(name, value, "a real number")
    value = float(value)
    if not math.isfinite(value) or value < 0.0:
        raise InvalidParameterError(name, value, "a finite number >= 0")
    return value


def _check_rate(value: float, *, name: str = "CR") -> float:
    """Validate a probability in [0, 1]."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidParameterError(name, value, "a real number")
    value = float(value)
    if not 0.0 <= value <= 1.0:
        raise InvalidParameterError(name, value, "in the interval [0, 1]")
    return value


def _as_rng(rng: np.random.Generator | None) -> np.random.Generator:
    if rng is None:
        return np.random.default_rng()
    if not isinstance(rng, np.random.Generator):
        raise TypeError(f"rng must be a numpy.random.Generator, got {type(rng).__name__}.")
    return rng


class RealOperator:
    """Common validation utilities shared by all real-coded operators."""

    @staticmethod
    def _as_population(values: ArrayLike, *, name: str = "population") -> np.ndarray:
        try:
            arr = np.asarray(values, dtype=float)
        except ValueError as exc:
            raise DimensionMismatchError(f"{name} rows must all have the same dimension.") from exc
        if arr.ndim != 2:
            raise DimensionMismatchError(f"{name} must have shape (n_individuals, n_vars), got {arr.shape}.", actual=arr.shape)
        return arr

    @staticmethod
    def _as_vector(values: ArrayLike, *, name: str) -> np.ndarray:
        arr = np.asarray(values, dtype=float)
        if arr.ndim != 1:
            raise DimensionMismatchError(f"{name} must be one-dimensional, got shape {arr.shape}.", actual=arr.shape)
        return arr


__all__ = ["ArrayLike", "RealOperator", "_as_rng", "_check_rate", "_check_scale"]
