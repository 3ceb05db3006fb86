"""Tests for the dekit exception hierarchy."""

from __future__ import annotations

import pytest


class TestDEKitError:
    """Test base DEKitError class."""

    def test_basic_error(self):
        from dekit.foundation.exceptions import DEKitError

        err = DEKitError("Something went wrong")
        assert "Something went wrong" in str(err)
        assert err.message == "Something went wrong"
        assert err.suggestion is None
        assert err.details == {}

    def test_error_with_suggestion(self):
        from dekit.foundation.exceptions import DEKitError

        err = DEKitError("Something went wrong", suggestion="Try this instead")
        assert "Suggestion: Try this instead" in str(err)
        assert err.suggestion == "Try this instead"


class TestConfigurationErrors:
    def test_invalid_parameter_error(self):
        from dekit.foundation.exceptions import ConfigurationError, InvalidParameterError

        err = InvalidParameterError("CR", 1.5, "in the interval [0, 1]")
        assert isinstance(err, ConfigurationError)
        assert "CR" in str(err)
        assert "[0, 1]" in str(err)
        assert err.details == {"name": "CR", "value": 1.5}

    def test_bounds_error_has_suggestion(self):
        from dekit.foundation.exceptions import BoundsError, ConfigurationError

        err = BoundsError("Lower bound 2.0 exceeds upper bound 1.0.")
        assert isinstance(err, ConfigurationError)
        assert "lower <= upper" in str(err)

    def test_invalid_operator_error_lists_available(self):
        from dekit.foundation.exceptions import InvalidOperatorError

        err = InvalidOperatorError("mutation", "rand2", available=["best1", "rand1"])
        assert "rand2" in str(err)
        assert "best1, rand1" in str(err)

    def test_missing_config_error(self):
        from dekit.foundation.exceptions import MissingConfigError

        err = MissingConfigError("pop_size", config_class="DEConfig")
        assert "pop_size" in str(err)
        assert "DEConfig" in str(err)


class TestPreconditionAndRuntimeErrors:
    def test_population_size_error(self):
        from dekit.foundation.exceptions import PopulationSizeError, PreconditionError

        err = PopulationSizeError("rand/1 mutation", 2, 3)
        assert isinstance(err, PreconditionError)
        assert "at least 3" in str(err)
        assert err.details == {"size": 2, "required": 3}

    def test_dimension_mismatch_error(self):
        from dekit.foundation.exceptions import DimensionMismatchError, PreconditionError

        err = DimensionMismatchError("bad shapes", expected=(2,), actual=(3,))
        assert isinstance(err, PreconditionError)
        assert err.details["expected"] == (2,)

    def test_evaluation_error_keeps_solution(self):
        from dekit.foundation.exceptions import EvaluationError

        err = EvaluationError("boom", solution=[1.0, 2.0])
        assert err.details["solution"] == [1.0, 2.0]
        assert "evaluate()" in str(err)

    def test_all_errors_catchable_by_base(self):
        from dekit.foundation import exceptions as exc_mod

        for name in exc_mod.__all__:
            assert issubclass(getattr(exc_mod, name), exc_mod.DEKitError)

    def test_raise_and_catch(self):
        from dekit.foundation.exceptions import DEKitError, PopulationSizeError

        with pytest.raises(DEKitError):
            raise PopulationSizeError("rand/1 mutation", 1, 3)
