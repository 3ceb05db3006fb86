"""DE crossover operators (trial vector construction)."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from dekit.foundation.types import check_same_dimension, freeze

from .utils import ArrayLike, RealOperator, _as_rng, _check_rate


class Crossover(RealOperator, ABC):
    """Base class for DE crossover operators."""

    @abstractmethod
    def crossover_one(self, current: ArrayLike, mutant: ArrayLike) -> np.ndarray:
        raise NotImplementedError

    def _pair(self, current: ArrayLike, mutant: ArrayLike) -> tuple[np.ndarray, np.ndarray]:
        cur = self._as_vector(current, name="current")
        mut = self._as_vector(mutant, name="mutant")
        check_same_dimension(cur, mut, what="current and mutant")
        return cur, mut


class BinomialCrossover(Crossover):
    """
    Uniform (binomial) crossover: each gene comes from the mutant when an
    independent draw in [0, 1) is below ``CR``.

    No minimum number of mutant genes is enforced unless ``force_mutant_gene``
    is set, in which case one random position always takes the mutant gene.
    """

    def __init__(
        self,
        CR: float = 0.9,
        *,
        force_mutant_gene: bool = False,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.CR = _check_rate(CR)
        self.force_mutant_gene = bool(force_mutant_gene)
        self.rng = _as_rng(rng)

    def crossover_one(self, current: ArrayLike, mutant: ArrayLike) -> np.ndarray:
        cur, mut = self._pair(current, mutant)
        n_vars = cur.shape[0]
        mask = self.rng.random(n_vars) < self.CR
        if self.force_mutant_gene and n_vars > 0:
            mask[self.rng.integers(n_vars)] = True
        return freeze(np.where(mask, mut, cur))


class ExponentialCrossover(Crossover):
    """
    Exponential crossover: copy a contiguous (wrapping) run of mutant genes
    starting at a random position. The run always contains the start gene and
    grows while successive draws stay below ``CR``.
    """

    def __init__(self, CR: float = 0.9, *, rng: np.random.Generator | None = None) -> None:
        self.CR = _check_rate(CR)
        self.rng = _as_rng(rng)

    def crossover_one(self, current: ArrayLike, mutant: ArrayLike) -> np.ndarray:
        cur, mut = self._pair(current, mutant)
        n_vars = cur.shape[0]
        trial = cur.copy()
        if n_vars == 0:
            return freeze(trial)
        start = int(self.rng.integers(n_vars))
        length = 1
        while length < n_vars and self.rng.random() < self.CR:
            length += 1
        idx = (start + np.arange(length)) % n_vars
        trial[idx] = mut[idx]
        return freeze(trial)


__all__ = ["BinomialCrossover", "Crossover", "ExponentialCrossover"]
