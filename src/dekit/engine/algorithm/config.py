"""Differential Evolution configuration."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from numbers import Integral
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from dekit.foundation.exceptions import InvalidParameterError, MissingConfigError
from dekit.foundation.types import Bound, normalize_bounds
from dekit.operators.registry import resolve_operator


class _SerializableConfig:
    """Mixin to serialize dataclass configs."""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True)


def _require_fields(cfg: Dict[str, Any], fields: Tuple[str, ...], name: str) -> None:
    """Validate that required fields are present in configuration."""
    for key in fields:
        if key not in cfg:
            raise MissingConfigError(key, config_class=f"{name}Config")


def _positive_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral) or value < 1:
        raise InvalidParameterError(name, value, "a positive integer")
    return int(value)


def _check_seed(value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, Integral) or value < 0:
        raise InvalidParameterError("seed", value, "a non-negative integer or None")
    return int(value)


def _check_operator(kind: str, method: Any, params: Mapping[str, Any]) -> Tuple[str, Dict[str, Any]]:
    """Resolve ``method`` and build it once to validate ``params``."""
    name = str(method).lower()
    factory = resolve_operator(kind, name)
    params = dict(params)
    if "rng" in params:
        raise InvalidParameterError(f"{kind}.rng", params["rng"], "left unset; generators are derived from the seed")
    try:
        factory(**params)
    except TypeError as exc:
        raise InvalidParameterError(kind, params, f"keyword arguments accepted by {factory.__name__} ({exc})") from exc
    return name, params


@dataclass(frozen=True)
class DEConfigData(_SerializableConfig):
    pop_size: int
    bounds: Tuple[Tuple[float, float], ...]
    mutation: Tuple[str, Dict[str, Any]] = field(default_factory=lambda: ("rand1", {"F": 0.8}))
    crossover: Tuple[str, Dict[str, Any]] = field(default_factory=lambda: ("bin", {"CR": 0.9}))
    selection: str = "greedy"
    seed: Optional[int] = None
    exclude_target: bool = True
    n_generations: int = 100


class DEConfig:
    """Declarative configuration holder for DE settings."""

    def __init__(self) -> None:
        self._cfg: Dict[str, Any] = {}

    def pop_size(self, value: int) -> "DEConfig":
        self._cfg["pop_size"] = value
        return self

    def bounds(self, value: Sequence[Any]) -> "DEConfig":
        self._cfg["bounds"] = list(value)
        return self

    def bound(self, lower: float, upper: float, dim: int) -> "DEConfig":
        """Replicate a single ``(lower, upper)`` bound across ``dim`` dimensions."""
        self._cfg["bounds"] = [(lower, upper)] * int(dim)
        return self

    def mutation(self, method: str, **kwargs) -> "DEConfig":
        self._cfg["mutation"] = (method, kwargs)
        return self

    def crossover(self, method: str, **kwargs) -> "DEConfig":
        self._cfg["crossover"] = (method, kwargs)
        return self

    def selection(self, method: str) -> "DEConfig":
        self._cfg["selection"] = method
        return self

    def seed(self, value: int | None) -> "DEConfig":
        self._cfg["seed"] = value
        return self

    def exclude_target(self, enabled: bool = True) -> "DEConfig":
        self._cfg["exclude_target"] = bool(enabled)
        return self

    def n_generations(self, value: int) -> "DEConfig":
        self._cfg["n_generations"] = value
        return self

    def fixed(self) -> DEConfigData:
        _require_fields(self._cfg, ("pop_size", "bounds"), "DE")
        bounds = normalize_bounds(self._cfg["bounds"])
        mutation = _check_operator("mutation", *self._cfg.get("mutation", ("rand1", {"F": 0.8})))
        crossover = _check_operator("crossover", *self._cfg.get("crossover", ("bin", {"CR": 0.9})))
        selection, _ = _check_operator("selection", self._cfg.get("selection", "greedy"), {})
        n_generations = self._cfg.get("n_generations", 100)
        if isinstance(n_generations, bool) or not isinstance(n_generations, Integral) or n_generations < 0:
            raise InvalidParameterError("n_generations", n_generations, "a non-negative integer")
        return DEConfigData(
            pop_size=_positive_int("pop_size", self._cfg["pop_size"]),
            bounds=tuple((b.lower, b.upper) for b in bounds),
            mutation=mutation,
            crossover=crossover,
            selection=selection,
            seed=_check_seed(self._cfg.get("seed")),
            exclude_target=bool(self._cfg.get("exclude_target", True)),
            n_generations=int(n_generations),
        )


def _operator_entry(value: Any, key: str) -> Tuple[str, Dict[str, Any]]:
    # accepts "rand1", {"method": "rand1", "F": 0.5} or ["rand1", {"F": 0.5}]
    if isinstance(value, str):
        return value, {}
    if isinstance(value, Mapping):
        params = dict(value)
        if "method" not in params:
            raise MissingConfigError(f"{key}.method", config_class="DEConfig")
        method = params.pop("method")
        return str(method), params
    if isinstance(value, Sequence) and len(value) == 2:
        method, params = value
        return str(method), dict(params or {})
    raise InvalidParameterError(key, value, "a name, a mapping with 'method', or a [name, params] pair")


def config_from_dict(data: Mapping[str, Any]) -> DEConfigData:
    """Build a validated :class:`DEConfigData` from a plain mapping (e.g. parsed JSON/YAML)."""
    builder = DEConfig()
    if "pop_size" in data:
        builder.pop_size(data["pop_size"])
    if "bounds" in data:
        builder.bounds(data["bounds"])
    elif "bound" in data:
        single = data["bound"]
        builder.bound(single["lower"], single["upper"], single["dim"])
    if "mutation" in data:
        method, params = _operator_entry(data["mutation"], "mutation")
        builder.mutation(method, **params)
    if "crossover" in data:
        method, params = _operator_entry(data["crossover"], "crossover")
        builder.crossover(method, **params)
    if "selection" in data:
        builder.selection(data["selection"])
    if "seed" in data:
        builder.seed(data["seed"])
    if "exclude_target" in data:
        builder.exclude_target(data["exclude_target"])
    if "n_generations" in data:
        builder.n_generations(data["n_generations"])
    return builder.fixed()


def bounds_of(cfg: DEConfigData) -> Tuple[Bound, ...]:
    return normalize_bounds(cfg.bounds)


__all__ = ["DEConfig", "DEConfigData", "bounds_of", "config_from_dict"]
