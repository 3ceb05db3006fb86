"""Result container for a Differential Evolution run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import numpy as np


@dataclass
class DEResult:
    """Final population plus run bookkeeping.

    ``history`` holds the best score of every generation, generation 0 first.
    ``seed`` is the initializer's effective seed and reproduces the run when
    fed back through the same configuration.
    """

    X: np.ndarray
    scores: np.ndarray
    best_x: np.ndarray
    best_score: float
    n_generations: int
    n_evaluations: int
    seed: Optional[int] = None
    history: List[float] = field(default_factory=list)

    def summary(self) -> Dict[str, Any]:
        return {
            "best_score": float(self.best_score),
            "best_x": [float(v) for v in self.best_x],
            "n_generations": int(self.n_generations),
            "n_evaluations": int(self.n_evaluations),
            "seed": self.seed,
        }


__all__ = ["DEResult"]
