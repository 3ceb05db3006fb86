import numpy as np
import pytest

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
from dekit.operators.registry import available_operators, operator_registry, register_operator, resolve_operator


def test_builtin_operator_names():
    assert available_operators("mutation") == ["best1", "rand1"]
    assert available_operators("crossover") == ["bin", "binomial", "exp", "exponential"]
    assert available_operators("selection") == ["greedy"]
    assert available_operators("initializer") == ["uniform"]


@pytest.mark.parametrize(
    "kind, name, expected",
    [
        ("mutation", "rand1", RandOneMutation),
        ("mutation", "BEST1", BestOneMutation),
        ("crossover", "bin", BinomialCrossover),
        ("crossover", "exponential", ExponentialCrossover),
        ("selection", "greedy", GreedySelector),
        ("initializer", "uniform", UniformInitializer),
    ],
)
def test_resolve_operator(kind, name, expected):
    assert resolve_operator(kind, name) is expected


def test_unknown_operator_lists_alternatives():
    with pytest.raises(InvalidOperatorError) as excinfo:
        resolve_operator("mutation", "current_to_best")
    assert "rand1" in str(excinfo.value)


def test_unknown_kind():
    with pytest.raises(ValueError):
        operator_registry("repair")


def test_register_custom_mutation():
    class HalfRandOne(RandOneMutation):
        def __init__(self, *, rng=None):
            super().__init__(F=0.5, rng=rng)

    register_operator("mutation", "half_rand1", HalfRandOne)
    try:
        op = resolve_operator("mutation", "half_rand1")(rng=np.random.default_rng(0))
        assert op.F == 0.5
        with pytest.raises(ValueError):
            register_operator("mutation", "half_rand1", HalfRandOne)
    finally:
        operator_registry("mutation")._items.pop("half_rand1", None)


def test_generic_registry_decorator_and_defaults():
    reg: Registry[type] = Registry("Demo")

    @reg.register("thing")
    class Thing:
        pass

    assert reg["thing"] is Thing
    assert reg.get("missing", None) is None
    assert "thing" in reg and len(reg) == 1
    assert list(reg) == ["thing"]
    with pytest.raises(KeyError):
        reg.get("missing")
    reg.register("thing", int, override=True)
    assert reg["thing"] is int
