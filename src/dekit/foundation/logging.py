"""
Console output for dekit runs.

Library modules only create loggers under the ``dekit`` namespace. The driver
reports run start and finish at INFO and one line per generation at DEBUG.
Nothing is printed until the application configures logging, either on its
own or through :func:`configure_dekit_logging`.
"""

from __future__ import annotations

import logging

_FORMAT = "[dekit] %(message)s"


def configure_dekit_logging(*, level: int = logging.INFO) -> logging.Logger:
    """
    Send dekit progress messages to stderr.

    Use ``level=logging.DEBUG`` to see the best score of every generation.
    Calling this again, or after the application has set up its own handlers,
    leaves the existing handlers alone.
    """
    dekit_logger = logging.getLogger("dekit")
    if logging.getLogger().handlers or dekit_logger.handlers:
        return dekit_logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    dekit_logger.addHandler(handler)
    dekit_logger.setLevel(level)
    # keep generation lines out of application root handlers added later
    dekit_logger.propagate = False
    return dekit_logger


__all__ = ["configure_dekit_logging"]
