"""Shared utilities for tweenr."""

from tweenr.core.utils.logging import configure_logging, get_logger
from tweenr.core.utils.math import hermite_basis, lerp

__all__ = [
    "configure_logging",
    "get_logger",
    "hermite_basis",
    "lerp",
]
