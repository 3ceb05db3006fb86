import json

import pytest

from dekit.engine.algorithm.config import DEConfig, DEConfigData, config_from_dict
from dekit.engine.config import load_de_config
from dekit.foundation.exceptions import (
    BoundsError,
    ConfigurationError,
    InvalidOperatorError,
    InvalidParameterError,
    MissingConfigError,
)


def _basic() -> DEConfig:
    return DEConfig().pop_size(10).bounds([(-5, 5), (-5, 5)])


def test_builder_defaults():
    cfg = _basic().fixed()
    assert isinstance(cfg, DEConfigData)
    assert cfg.pop_size == 10
    assert cfg.bounds == ((-5.0, 5.0), (-5.0, 5.0))
    assert cfg.mutation == ("rand1", {"F": 0.8})
    assert cfg.crossover == ("bin", {"CR": 0.9})
    assert cfg.selection == "greedy"
    assert cfg.seed is None
    assert cfg.exclude_target is True
    assert cfg.n_generations == 100


def test_builder_full_chain_and_serialization():
    cfg = (
        DEConfig()
        .pop_size(12)
        .bound(-1.0, 1.0, 3)
        .mutation("best1", F=0.5)
        .crossover("exp", CR=0.3)
        .selection("greedy")
        .seed(7)
        .exclude_target(False)
        .n_generations(40)
        .fixed()
    )
    assert cfg.bounds == ((-1.0, 1.0),) * 3
    data = json.loads(cfg.to_json())
    assert data["mutation"] == ["best1", {"F": 0.5}]
    assert data["seed"] == 7
    assert cfg.to_dict()["exclude_target"] is False


def test_config_is_frozen():
    cfg = _basic().fixed()
    with pytest.raises(AttributeError):
        cfg.pop_size = 3  # type: ignore[misc]


def test_missing_required_fields():
    with pytest.raises(MissingConfigError):
        DEConfig().bounds([(0, 1)]).fixed()
    with pytest.raises(MissingConfigError):
        DEConfig().pop_size(5).fixed()


def test_invalid_values_raise_configuration_errors():
    with pytest.raises(InvalidParameterError):
        _basic().pop_size(0).fixed()
    with pytest.raises(InvalidParameterError):
        _basic().n_generations(-1).fixed()
    with pytest.raises(BoundsError):
        DEConfig().pop_size(5).bounds([(2, 1)]).fixed()
    with pytest.raises(InvalidOperatorError):
        _basic().mutation("rand2").fixed()
    with pytest.raises(InvalidOperatorError):
        _basic().selection("tournament").fixed()


def test_bad_operator_parameters_fail_at_fixed():
    with pytest.raises(InvalidParameterError) as excinfo:
        _basic().mutation("rand1", scale=0.8).fixed()
    assert excinfo.value.details["name"] == "mutation"
    with pytest.raises(InvalidParameterError):
        _basic().crossover("bin", CR=1.5).fixed()
    with pytest.raises(InvalidParameterError):
        _basic().mutation("rand1", F=0.5, rng=None).fixed()


@pytest.mark.parametrize("seed", [-3, 1.5, True, "7"])
def test_invalid_seed_fails_at_fixed(seed):
    with pytest.raises(InvalidParameterError):
        _basic().seed(seed).fixed()


def test_default_operator_params_are_not_shared():
    a = DEConfigData(pop_size=4, bounds=((0.0, 1.0),))
    b = DEConfigData(pop_size=4, bounds=((0.0, 1.0),))
    a.mutation[1]["F"] = 0.1
    a.crossover[1]["CR"] = 0.2
    assert b.mutation == ("rand1", {"F": 0.8})
    assert b.crossover == ("bin", {"CR": 0.9})


def test_config_from_dict_accepts_operator_spellings():
    cfg = config_from_dict(
        {
            "pop_size": 8,
            "bound": {"lower": -2, "upper": 2, "dim": 2},
            "mutation": {"method": "rand1", "F": 0.4},
            "crossover": ["bin", {"CR": 0.2}],
            "selection": "greedy",
            "seed": 3,
        }
    )
    assert cfg.bounds == ((-2.0, 2.0), (-2.0, 2.0))
    assert cfg.mutation == ("rand1", {"F": 0.4})
    assert cfg.crossover == ("bin", {"CR": 0.2})
    assert config_from_dict({"pop_size": 4, "bounds": [[0, 1]], "crossover": "exp"}).crossover == ("exp", {})


def test_config_from_dict_rejects_bad_operator_entries():
    with pytest.raises(MissingConfigError):
        config_from_dict({"pop_size": 4, "bounds": [[0, 1]], "mutation": {"F": 0.5}})
    with pytest.raises(InvalidParameterError):
        config_from_dict({"pop_size": 4, "bounds": [[0, 1]], "mutation": 5})


def test_load_json_config(tmp_path):
    path = tmp_path / "de.json"
    path.write_text(json.dumps({"pop_size": 6, "bounds": [[-1, 1]], "n_generations": 5}), encoding="utf-8")
    cfg = load_de_config(path)
    assert cfg.pop_size == 6
    assert cfg.n_generations == 5


def test_load_yaml_config_with_nested_block(tmp_path):
    pytest.importorskip("yaml")
    path = tmp_path / "de.yaml"
    path.write_text(
        "de:\n"
        "  pop_size: 10\n"
        "  bounds:\n"
        "    - [-5, 5]\n"
        "    - [-5, 5]\n"
        "  mutation: {method: rand1, F: 0.8}\n"
        "  crossover: {method: bin, CR: 0.9}\n"
        "  seed: 11\n",
        encoding="utf-8",
    )
    cfg = load_de_config(path)
    assert cfg.seed == 11
    assert cfg.mutation == ("rand1", {"F": 0.8})


def test_yaml_with_unknown_operator_parameter(tmp_path):
    pytest.importorskip("yaml")
    path = tmp_path / "de.yaml"
    path.write_text(
        "pop_size: 10\nbounds: [[-5, 5]]\nmutation: {method: rand1, scale: 0.8}\n",
        encoding="utf-8",
    )
    with pytest.raises(ConfigurationError):
        load_de_config(path)


def test_load_config_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_de_config(tmp_path / "missing.json")
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_de_config(path)
