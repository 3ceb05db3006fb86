"""
Minimize the 2-D sphere function with DE/rand/1/bin, wiring the four operators by hand.

Run with: python examples/sphere_quickstart.py
"""

from __future__ import annotations

import logging

import numpy as np

from dekit import (
    BinomialCrossover,
    DifferentialEvolution,
    GreedySelector,
    RandOneMutation,
    UniformInitializer,
    configure_dekit_logging,
)
from dekit.foundation.problem import SphereProblem


def main() -> None:
    configure_dekit_logging(level=logging.INFO)
    rng = np.random.default_rng(2024)
    algorithm = DifferentialEvolution(
        UniformInitializer([(-5.0, 5.0), (-5.0, 5.0)], seed=2024),
        RandOneMutation(F=0.8, rng=rng),
        BinomialCrossover(CR=0.9, rng=rng),
        GreedySelector(),
        pop_size=10,
    )
    result = algorithm.run(SphereProblem(2), n_generations=200)
    print(f"best score: {result.best_score:.3e}")
    print(f"best x:     {result.best_x}")
    print(f"evaluations: {result.n_evaluations} (initializer seed {result.seed})")


if __name__ == "__main__":
    main()
