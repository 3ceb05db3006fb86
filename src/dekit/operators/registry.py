"""
Registries for DE operators, keyed by the names used in configuration.
"""

from __future__ import annotations

from typing import Any

from dekit.foundation.exceptions import InvalidOperatorError
from dekit.foundation.registry import Registry
from dekit.operators.real import (
    BestOneMutation,
    BinomialCrossover,
    ExponentialCrossover,
    GreedySelector,
    RandOneMutation,
    UniformInitializer,
)

_REGISTRIES: dict[str, Registry[Any]] = {
    "initializer": Registry("Initializers"),
    "mutation": Registry("MutationOperators"),
    "crossover": Registry("CrossoverOperators"),
    "selection": Registry("Selectors"),
}

_REGISTRIES["initializer"].register("uniform", UniformInitializer)

_REGISTRIES["mutation"].register("rand1", RandOneMutation)
_REGISTRIES["mutation"].register("best1", BestOneMutation)

_REGISTRIES["crossover"].register("bin", BinomialCrossover)
_REGISTRIES["crossover"].register("binomial", BinomialCrossover)
_REGISTRIES["crossover"].register("exp", ExponentialCrossover)
_REGISTRIES["crossover"].register("exponential", ExponentialCrossover)

_REGISTRIES["selection"].register("greedy", GreedySelector)


def operator_registry(kind: str) -> Registry[Any]:
    """Return the registry for ``kind`` (initializer, mutation, crossover, selection)."""
    try:
        return _REGISTRIES[kind]
    except KeyError:
        raise ValueError(f"Unknown operator kind '{kind}'; expected one of {sorted(_REGISTRIES)}.") from None


def available_operators(kind: str) -> list[str]:
    return operator_registry(kind).list()


def resolve_operator(kind: str, name: str) -> Any:
    """Look up the class registered as ``name`` for ``kind``."""
    registry = operator_registry(kind)
    key = str(name).lower()
    if key not in registry:
        raise InvalidOperatorError(kind, str(name), registry.list())
    return registry[key]


def register_operator(kind: str, name: str, factory: Any, *, override: bool = False) -> Any:
    """Make a custom operator available to configuration by name."""
    return operator_registry(kind).register(name.lower(), factory, override=override)


__all__ = ["available_operators", "operator_registry", "register_operator", "resolve_operator"]
