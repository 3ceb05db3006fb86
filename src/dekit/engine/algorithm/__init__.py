"""Differential Evolution driver, configuration and results."""

from .config import DEConfig, DEConfigData, config_from_dict
from .de import DifferentialEvolution
from .result import DEResult

__all__ = ["DEConfig", "DEConfigData", "DEResult", "DifferentialEvolution", "config_from_dict"]
