from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class ProblemProtocol(Protocol):
    def evaluate(self, x: np.ndarray) -> Any: ...


__all__ = ["ProblemProtocol"]
