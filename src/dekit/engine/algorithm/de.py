"""
Generational driver for Differential Evolution.

Individuals are represented as array rows (X, scores); row ``i`` keeps its
identity across generations. Each generation reads a frozen snapshot of the
previous one and writes the survivors into fresh arrays.
"""

from __future__ import annotations

import logging
from numbers import Integral
from typing import Any, Callable

import numpy as np

from dekit.foundation.exceptions import DimensionMismatchError, InvalidParameterError, PopulationSizeError
from dekit.foundation.types import freeze
from dekit.operators.real import Crossover, Initializer, Mutation, Selector
from dekit.operators.registry import resolve_operator

from .config import DEConfigData, bounds_of
from .result import DEResult

GenerationCallback = Callable[[int, np.ndarray, np.ndarray], None]


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


class DifferentialEvolution:
    """
    Differential Evolution built from four pluggable operators.

    The driver owns the population buffers and the generation counter; the
    operators own the statistics. Runs stop after a fixed number of generations.
    """

    def __init__(
        self,
        initializer: Initializer,
        mutation: Mutation,
        crossover: Crossover,
        selector: Selector,
        *,
        pop_size: int,
        exclude_target: bool = True,
    ) -> None:
        if isinstance(pop_size, bool) or not isinstance(pop_size, Integral) or pop_size < 1:
            raise InvalidParameterError("pop_size", pop_size, "a positive integer")
        self.initializer = initializer
        self.mutation = mutation
        self.crossover = crossover
        self.selector = selector
        self.pop_size = int(pop_size)
        self.exclude_target = bool(exclude_target)

    @classmethod
    def from_config(cls, cfg: DEConfigData) -> "DifferentialEvolution":
        """
        Build the driver and its operators from a fixed configuration.

        Mutation and crossover generators are spawned from the initializer's
        effective seed, so one seed reproduces the whole run.
        """
        init_cls = resolve_operator("initializer", "uniform")
        initializer = init_cls(bounds_of(cfg), seed=cfg.seed)
        mut_seq, cx_seq = np.random.SeedSequence(initializer.seed).spawn(2)

        mut_name, mut_params = cfg.mutation
        cx_name, cx_params = cfg.crossover
        mutation = resolve_operator("mutation", mut_name)(**mut_params, rng=np.random.default_rng(mut_seq))
        crossover = resolve_operator("crossover", cx_name)(**cx_params, rng=np.random.default_rng(cx_seq))
        selector = resolve_operator("selection", cfg.selection)()
        return cls(
            initializer,
            mutation,
            crossover,
            selector,
            pop_size=cfg.pop_size,
            exclude_target=cfg.exclude_target,
        )

    def initialize(self, problem: Any) -> tuple[np.ndarray, np.ndarray]:
        """Generation 0."""
        return self.initializer.initialize(problem, self.pop_size)

    def step(self, problem: Any, scores: np.ndarray, X: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        """
        Produce the next generation from ``(scores, X)``.

        The inputs are never modified; if an evaluation fails the exception
        propagates and the caller's arrays remain the current generation.
        """
        prev_X = np.array(X, dtype=float)
        prev_scores = np.array(scores, dtype=float)
        if prev_X.ndim != 2 or prev_scores.shape != (prev_X.shape[0],):
            raise DimensionMismatchError(
                f"scores {prev_scores.shape} and X {prev_X.shape} do not describe one population.",
                expected=(prev_X.shape[0],) if prev_X.ndim == 2 else None,
                actual=prev_scores.shape,
            )
        freeze(prev_X)
        freeze(prev_scores)

        next_X = prev_X.copy()
        next_scores = prev_scores.copy()
        for i in range(prev_X.shape[0]):
            target = i if self.exclude_target else None
            mutant = self.mutation.mutate_one(prev_X, target=target, scores=prev_scores)
            trial = self.crossover.crossover_one(prev_X[i], mutant)
            score, x = self.selector.select_one(problem, prev_scores[i], prev_X[i], trial)
            next_scores[i] = score
            next_X[i] = x
        return freeze(next_scores), freeze(next_X)

    def run(
        self,
        problem: Any,
        n_generations: int,
        *,
        callback: GenerationCallback | None = None,
    ) -> DEResult:
        """Initialize, then apply ``n_generations`` generations."""
        if isinstance(n_generations, bool) or not isinstance(n_generations, Integral) or n_generations < 0:
            raise InvalidParameterError("n_generations", n_generations, "a non-negative integer")
        required = self.mutation.required_population(exclude_target=self.exclude_target)
        if n_generations > 0 and self.pop_size < required:
            raise PopulationSizeError(type(self.mutation).__name__, self.pop_size, required)

        seed = getattr(self.initializer, "seed", None)
        _logger().info(
            "DE start: pop_size=%d generations=%d mutation=%s crossover=%s seed=%s",
            self.pop_size,
            n_generations,
            type(self.mutation).__name__,
            type(self.crossover).__name__,
            seed,
        )
        scores, X = self.initialize(problem)
        n_eval = self.pop_size
        history = [float(scores.min())]
        if callback is not None:
            callback(0, scores, X)

        for generation in range(1, int(n_generations) + 1):
            scores, X = self.step(problem, scores, X)
            n_eval += self.pop_size
            history.append(float(scores.min()))
            _logger().debug("generation %d best=%.6g evals=%d", generation, history[-1], n_eval)
            if callback is not None:
                callback(generation, scores, X)

        best = int(np.argmin(scores))
        _logger().info("DE done: best=%.6g evals=%d", scores[best], n_eval)
        return DEResult(
            X=X,
            scores=scores,
            best_x=X[best],
            best_score=float(scores[best]),
            n_generations=int(n_generations),
            n_evaluations=n_eval,
            seed=seed,
            history=history,
        )


__all__ = ["DifferentialEvolution", "GenerationCallback"]
