"""
Operator namespace: DE initializer, mutation, crossover and selection strategies.
"""

from __future__ import annotations

from .real import (
    BestOneMutation,
    BinomialCrossover,
    Crossover,
    ExponentialCrossover,
    GreedySelector,
    Initializer,
    Mutation,
    RandOneMutation,
    Selector,
    UniformInitializer,
)
from .registry import available_operators, register_operator, resolve_operator

__all__ = [
    "BestOneMutation",
    "BinomialCrossover",
    "Crossover",
    "ExponentialCrossover",
    "GreedySelector",
    "Initializer",
    "Mutation",
    "RandOneMutation",
    "Selector",
    "UniformInitializer",
    "available_operators",
    "register_operator",
    "resolve_operator",
]
