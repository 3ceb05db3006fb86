"""
dekit exception hierarchy.

Provides user-friendly exceptions with helpful error messages and suggestions.
All dekit-specific exceptions inherit from DEKitError for easy catching.

Example:
    try:
        result = minimize(problem, bounds)
    except DEKitError as e:
        print(f"Optimization failed: {e}")
        print(f"Suggestion: {e.suggestion}")
"""

from __future__ import annotations

from typing import Any


class DEKitError(Exception):
    """
    Base exception for all dekit errors.

    Attributes:
        message: Human-readable error description
        suggestion: Optional suggestion for fixing the error
        details: Optional dict with additional context
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message with suggestion."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(DEKitError):
    """Raised when configuration is invalid or incomplete."""

    pass


class InvalidParameterError(ConfigurationError):
    """Raised when a numeric operator parameter is outside its valid range."""

    def __init__(self, name: str, value: Any, expected: str) -> None:
        message = f"Invalid value {value!r} for '{name}'."
        suggestion = f"'{name}' must be {expected}"
        super().__init__(message, suggestion, {"name": name, "value": value})


class BoundsError(ConfigurationError):
    """Raised when bounds are invalid or inconsistent."""

    def __init__(self, message: str) -> None:
        suggestion = "Use finite bounds with lower <= upper in every dimension"
        super().__init__(message, suggestion)


class InvalidOperatorError(ConfigurationError):
    """Raised when an unknown operator is specified."""

    def __init__(
        self,
        operator_type: str,
        operator_name: str,
        available: list[str] | None = None,
    ) -> None:
        message = f"Unknown {operator_type} operator '{operator_name}'."
        suggestion = f"Available {operator_type} operators: {', '.join(available)}" if available else None
        super().__init__(
            message,
            suggestion,
            {"operator_type": operator_type, "operator_name": operator_name},
        )


class MissingConfigError(ConfigurationError):
    """Raised when required configuration is missing."""

    def __init__(self, field: str, config_class: str | None = None) -> None:
        message = f"Missing required configuration: '{field}'."
        suggestion = f"Add '{field}' to your configuration"
        if config_class:
            suggestion += f" (see {config_class})"
        super().__init__(message, suggestion, {"field": field})


# =============================================================================
# Problem Errors
# =============================================================================


class ProblemError(DEKitError):
    """Base class for problem-related errors."""

    pass


class InvalidProblemError(ProblemError):
    """Raised when an unknown benchmark problem is requested."""

    def __init__(self, problem: str, available: list[str] | None = None) -> None:
        message = f"Unknown problem '{problem}'."
        if available:
            suggestion = f"Did you mean: {', '.join(available)}?"
        else:
            suggestion = "Use available_problem_names() to see registered problems."
        super().__init__(message, suggestion, {"problem": problem})


# =============================================================================
# Precondition Errors
# =============================================================================


class PreconditionError(DEKitError):
    """Raised when an operator is called with inputs it cannot work on."""

    pass


class PopulationSizeError(PreconditionError):
    """Raised when the population is too small for an index draw."""

    def __init__(self, operator: str, size: int, required: int) -> None:
        message = f"{operator} requires at least {required} individuals, got {size}."
        suggestion = f"Use a population of at least {required} individuals"
        super().__init__(message, suggestion, {"size": size, "required": required})


class DimensionMismatchError(PreconditionError):
    """Raised when vectors participating in one operation differ in dimension."""

    def __init__(self, message: str, expected: Any = None, actual: Any = None) -> None:
        suggestion = "All vectors of one run must share the dimension given by the bounds"
        super().__init__(message, suggestion, {"expected": expected, "actual": actual})


# =============================================================================
# Runtime Errors
# =============================================================================


class EvaluationError(DEKitError):
    """Raised when objective evaluation fails."""

    def __init__(self, message: str, solution: Any = None) -> None:
        suggestion = "Check your problem's evaluate() function for errors"
        super().__init__(message, suggestion, {"solution": solution})


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Base
    "DEKitError",
    # Configuration
    "ConfigurationError",
    "InvalidParameterError",
    "BoundsError",
    "InvalidOperatorError",
    "MissingConfigError",
    # Problem
    "ProblemError",
    "InvalidProblemError",
    # Preconditions
    "PreconditionError",
    "PopulationSizeError",
    "DimensionMismatchError",
    # Runtime
    "EvaluationError",
]
