"""Real-valued Differential Evolution operators."""

from __future__ import annotations

from .crossover import BinomialCrossover, Crossover, ExponentialCrossover
from .initialize import Initializer, UniformInitializer
from .mutation import BestOneMutation, Mutation, RandOneMutation
from .selection import GreedySelector, Selector
from .utils import ArrayLike, RealOperator

__all__ = [
    "ArrayLike",
    "BestOneMutation",
    "BinomialCrossover",
    "Crossover",
    "ExponentialCrossover",
    "GreedySelector",
    "Initializer",
    "Mutation",
    "RandOneMutation",
    "RealOperator",
    "Selector",
    "UniformInitializer",
]
