"""
Value types shared by every operator.

Variables are one-dimensional float64 arrays; operators hand them out with the
``writeable`` flag cleared. Scores are plain floats, NaN excluded.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Sequence, Tuple, Union

import numpy as np

from dekit.foundation.exceptions import BoundsError, DimensionMismatchError, EvaluationError

Variable = np.ndarray
Score = float
BoundLike = Union["Bound", Tuple[float, float], Sequence[float]]


@dataclass(frozen=True)
class Bound:
    """Closed-open sampling interval ``[lower, upper)`` for one dimension."""

    lower: float
    upper: float

    def __post_init__(self) -> None:
        lower = float(self.lower)
        upper = float(self.upper)
        if not (math.isfinite(lower) and math.isfinite(upper)):
            raise BoundsError(f"Bound values must be finite, got ({lower}, {upper}).")
        if lower > upper:
            raise BoundsError(f"Lower bound {lower} exceeds upper bound {upper}.")
        if math.isinf(upper - lower):
            raise BoundsError(f"Bound width overflows for ({lower}, {upper}).")
        object.__setattr__(self, "lower", lower)
        object.__setattr__(self, "upper", upper)

    @classmethod
    def coerce(cls, value: BoundLike) -> "Bound":
        if isinstance(value, Bound):
            return value
        try:
            lower, upper = value
        except (TypeError, ValueError) as exc:
            raise BoundsError(f"Expected a (lower, upper) pair, got {value!r}.") from exc
        return cls(lower, upper)


def normalize_bounds(bounds: Iterable[BoundLike]) -> tuple[Bound, ...]:
    """Coerce a sequence of pairs into a tuple of validated ``Bound`` objects."""
    return tuple(Bound.coerce(b) for b in bounds)


def bounds_to_arrays(bounds: Sequence[Bound]) -> tuple[np.ndarray, np.ndarray]:
    lower = np.fromiter((b.lower for b in bounds), dtype=float, count=len(bounds))
    upper = np.fromiter((b.upper for b in bounds), dtype=float, count=len(bounds))
    return lower, upper


def freeze(arr: np.ndarray) -> np.ndarray:
    """Clear the writeable flag and return the same array."""
    arr.flags.writeable = False
    return arr


def as_variable(values: Any) -> Variable:
    """Return a read-only 1-D float64 copy of ``values``."""
    arr = np.array(values, dtype=float)
    if arr.ndim != 1:
        raise DimensionMismatchError(f"A variable must be one-dimensional, got shape {arr.shape}.", actual=arr.shape)
    return freeze(arr)


def as_score(value: Any, *, solution: Any = None) -> Score:
    """
    Convert an objective value to a score.

    Raises EvaluationError for NaN and for values that are not a single real number.
    """
    arr = np.asarray(value)
    if arr.size != 1 or not np.issubdtype(arr.dtype, np.number) or np.iscomplexobj(arr):
        raise EvaluationError(f"Objective must return a single real number, got {value!r}.", solution=solution)
    score = float(arr.reshape(()))
    if math.isnan(score):
        raise EvaluationError("Objective returned NaN.", solution=solution)
    return score


def check_same_dimension(a: np.ndarray, b: np.ndarray, *, what: str = "vectors") -> None:
    if a.shape != b.shape:
        raise DimensionMismatchError(
            f"Dimension mismatch between {what}: {a.shape} vs {b.shape}.",
            expected=a.shape,
            actual=b.shape,
        )


__all__ = [
    "Bound",
    "BoundLike",
    "Score",
    "Variable",
    "as_score",
    "as_variable",
    "bounds_to_arrays",
    "check_same_dimension",
    "freeze",
    "normalize_bounds",
]
