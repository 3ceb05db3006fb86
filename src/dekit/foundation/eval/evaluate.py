"""
Single-candidate evaluation with score validation.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from dekit.foundation.exceptions import DEKitError, EvaluationError
from dekit.foundation.types import Score, as_score


def evaluate_variable(problem: Any, x: np.ndarray) -> Score:
    """
    Evaluate ``x`` on ``problem`` and return a validated score.

    Any exception raised by the objective is re-raised as EvaluationError with
    the original chained; dekit errors pass through unchanged.
    """
    evaluate = getattr(problem, "evaluate", None)
    if evaluate is None:
        evaluate = problem
    try:
        raw = evaluate(x)
    except DEKitError:
        raise
    except Exception as exc:
        raise EvaluationError(f"Objective evaluation failed: {exc}", solution=np.array(x)) from exc
    return as_score(raw, solution=x)


__all__ = ["evaluate_variable"]
