"""DE mutation operators (mutant vector synthesis)."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from dekit.foundation.exceptions import DimensionMismatchError, PopulationSizeError, PreconditionError
from dekit.foundation.types import freeze

from .utils import ArrayLike, RealOperator, _as_rng, _check_scale


class Mutation(RealOperator, ABC):
    """Base class for DE mutation operators."""

    n_random: int = 3

    def required_population(self, *, exclude_target: bool = False) -> int:
        """Smallest population this operator accepts."""
        return self.n_random + int(exclude_target)

    @abstractmethod
    def mutate_one(
        self,
        population: ArrayLike,
        *,
        target: int | None = None,
        scores: ArrayLike | None = None,
    ) -> np.ndarray:
        raise NotImplementedError

    @staticmethod
    def _candidates(n_ind: int, exclude: set[int]) -> np.ndarray:
        all_indices = np.arange(n_ind)
        if not exclude:
            return all_indices
        return np.setdiff1d(all_indices, np.fromiter(exclude, dtype=int), assume_unique=True)

    @staticmethod
    def _check_target(target: int | None, n_ind: int) -> None:
        if target is not None and not 0 <= int(target) < n_ind:
            raise PreconditionError(f"target index {target} is out of range for a population of {n_ind}.")


class RandOneMutation(Mutation):
    """
    DE/rand/1: ``base + F * (diff1 - diff2)`` over three distinct random rows.

    Without ``target`` the draw covers the whole population, so the base may be
    the individual being replaced. Passing ``target`` excludes it.
    """

    def __init__(self, F: float = 0.8, *, rng: np.random.Generator | None = None) -> None:
        self.F = _check_scale(F)
        self.rng = _as_rng(rng)

    def draw_indices(self, n_ind: int, *, target: int | None = None) -> np.ndarray:
        """Draw (base, diff1, diff2) without replacement."""
        self._check_target(target, n_ind)
        exclude = set() if target is None else {int(target)}
        required = self.required_population(exclude_target=bool(exclude))
        if n_ind < required:
            raise PopulationSizeError("rand/1 mutation", n_ind, required)
        return self.rng.choice(self._candidates(n_ind, exclude), size=3, replace=False)

    def mutate_one(
        self,
        population: ArrayLike,
        *,
        target: int | None = None,
        scores: ArrayLike | None = None,
    ) -> np.ndarray:
        pop = self._as_population(population)
        r0, r1, r2 = self.draw_indices(pop.shape[0], target=target)
        return freeze(pop[r0] + self.F * (pop[r1] - pop[r2]))


class BestOneMutation(Mutation):
    """DE/best/1: the lowest-score row is the base; the difference pair is random."""

    def __init__(self, F: float = 0.8, *, rng: np.random.Generator | None = None) -> None:
        self.F = _check_scale(F)
        self.rng = _as_rng(rng)

    def mutate_one(
        self,
        population: ArrayLike,
        *,
        target: int | None = None,
        scores: ArrayLike | None = None,
    ) -> np.ndarray:
        pop = self._as_population(population)
        n_ind = pop.shape[0]
        if scores is None:
            raise PreconditionError("best/1 mutation requires the population scores.")
        score_arr = np.asarray(scores, dtype=float)
        if score_arr.shape != (n_ind,):
            raise DimensionMismatchError(
                f"scores must have shape ({n_ind},), got {score_arr.shape}.",
                expected=(n_ind,),
                actual=score_arr.shape,
            )
        self._check_target(target, n_ind)
        if n_ind < 3:
            raise PopulationSizeError("best/1 mutation", n_ind, 3)
        best = int(np.argmin(score_arr))
        exclude = {best} if target is None else {best, int(target)}
        candidates = self._candidates(n_ind, exclude)
        if candidates.size < 2:
            raise PopulationSizeError("best/1 mutation", n_ind, len(exclude) + 2)
        r1, r2 = self.rng.choice(candidates, size=2, replace=False)
        return freeze(pop[best] + self.F * (pop[r1] - pop[r2]))


__all__ = ["BestOneMutation", "Mutation", "RandOneMutation"]
