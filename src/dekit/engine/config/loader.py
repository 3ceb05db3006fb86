"""
Config loading utilities for programmatic entrypoints.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from dekit.engine.algorithm.config import DEConfigData, config_from_dict
from dekit.foundation.exceptions import ConfigurationError


def load_config_mapping(path: str | Path) -> Dict[str, Any]:
    """
    Load a YAML or JSON run configuration as a plain mapping.
    """
    spec_path = Path(path).expanduser().resolve()
    if not spec_path.exists():
        raise FileNotFoundError(f"Config file '{spec_path}' does not exist.")
    suffix = spec_path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        try:
            import yaml  # type: ignore
        except ImportError as exc:  # pragma: no cover - optional dependency
            raise ImportError("YAML config requested but PyYAML is not installed. Install with 'pip install dekit[yaml]'.") from exc
        with spec_path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    else:
        with spec_path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file '{spec_path}' must contain a mapping at the top level.",
            suggestion="Use keys such as pop_size, bounds, mutation, crossover",
        )
    return data


def load_de_config(path: str | Path) -> DEConfigData:
    """Load and validate a DE configuration file."""
    data = load_config_mapping(path)
    # allow the DE block to be nested under a "de" key
    if "de" in data and isinstance(data["de"], dict):
        data = data["de"]
    return config_from_dict(data)


__all__ = ["load_config_mapping", "load_de_config"]
