from .optimize import minimize
from .engine.algorithm import DEConfig, DEConfigData, DEResult, DifferentialEvolution, config_from_dict
from .engine.config import load_de_config
from .foundation.exceptions import (
    BoundsError,
    ConfigurationError,
    DEKitError,
    DimensionMismatchError,
    EvaluationError,
    InvalidOperatorError,
    InvalidParameterError,
    PopulationSizeError,
    PreconditionError,
)
from .foundation.logging import configure_dekit_logging
from .foundation.problem import Problem, available_problem_names, get_problem, make_problem
from .foundation.types import Bound, as_score, as_variable
from .foundation.version import get_version
from .operators import (
    BestOneMutation,
    BinomialCrossover,
    ExponentialCrossover,
    GreedySelector,
    RandOneMutation,
    UniformInitializer,
)

__all__ = [
    "minimize",
    "DEConfig",
    "DEConfigData",
    "DEResult",
    "DifferentialEvolution",
    "config_from_dict",
    "load_de_config",
    "BoundsError",
    "ConfigurationError",
    "DEKitError",
    "DimensionMismatchError",
    "EvaluationError",
    "InvalidOperatorError",
    "InvalidParameterError",
    "PopulationSizeError",
    "PreconditionError",
    "configure_dekit_logging",
    "Problem",
    "available_problem_names",
    "get_problem",
    "make_problem",
    "Bound",
    "as_score",
    "as_variable",
    "get_version",
    "BestOneMutation",
    "BinomialCrossover",
    "ExponentialCrossover",
    "GreedySelector",
    "RandOneMutation",
    "UniformInitializer",
]


def __getattr__(name: str):
    if name == "__version__":
        return get_version()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
