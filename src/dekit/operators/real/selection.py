"""DE survivor selection."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any

import numpy as np

from dekit.foundation.eval import evaluate_variable
from dekit.foundation.exceptions import EvaluationError
from dekit.foundation.types import Score


class Selector(ABC):
    """Decides whether a trial replaces the incumbent of its slot."""

    @abstractmethod
    def select_one(
        self,
        problem: Any,
        current_score: Score,
        current: np.ndarray,
        trial: np.ndarray,
    ) -> tuple[Score, np.ndarray]:
        raise NotImplementedError


class GreedySelector(Selector):
    """
    One-to-one greedy replacement for minimization.

    The trial wins only when strictly better; ties keep the incumbent.
    """

    def select_one(
        self,
        problem: Any,
        current_score: Score,
        current: np.ndarray,
        trial: np.ndarray,
    ) -> tuple[Score, np.ndarray]:
        current_score = float(current_score)
        if math.isnan(current_score):
            raise EvaluationError("Incumbent score is NaN.", solution=current)
        trial_score = evaluate_variable(problem, trial)
        if trial_score < current_score:
            return trial_score, trial
        return current_score, current


__all__ = ["GreedySelector", "Selector"]
