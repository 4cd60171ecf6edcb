"""tick-path - Eased waypoint path animation driven by elapsed time."""
from __future__ import annotations

from tick_path import vec
from tick_path.easing import EASINGS
from tick_path.path import PathAnimator
from tick_path.segment import SegmentAnimator
from tick_path.types import EasingFn, InvalidConfigurationError, Point

__all__ = [
    "EASINGS",
    "EasingFn",
    "InvalidConfigurationError",
    "PathAnimator",
    "Point",
    "SegmentAnimator",
    "vec",
]
