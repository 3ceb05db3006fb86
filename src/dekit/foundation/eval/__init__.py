from .evaluate import evaluate_variable

__all__ = ["evaluate_variable"]
