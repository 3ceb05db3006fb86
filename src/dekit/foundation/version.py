"""
Version helpers for dekit.
"""

from __future__ import annotations

from importlib import metadata as importlib_metadata

_VERSION: str | None = None


def get_version() -> str:
    global _VERSION
    if _VERSION is not None:
        return _VERSION
    try:
        _VERSION = importlib_metadata.version("dekit")
    except importlib_metadata.PackageNotFoundError:  # pragma: no cover - source checkout
        _VERSION = "0.0.0+unknown"
    return _VERSION


def __getattr__(name: str):
    if name == "__version__":
        return get_version()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["__version__", "get_version"]
