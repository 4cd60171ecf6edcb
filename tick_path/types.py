"""Shared type aliases and exceptions for tick-path."""
from __future__ import annotations

from typing import Callable

Point = tuple[float, float]

EasingFn = Callable[[float], float]


class InvalidConfigurationError(ValueError):
    """Raised when an animator is built from unusable timing or geometry."""
