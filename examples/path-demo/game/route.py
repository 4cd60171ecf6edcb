"""The looping route both boxes follow."""
from __future__ import annotations

from tick_path import EASINGS, PathAnimator
from ui.constants import TRACK_SIZE

TOP_LEFT = (0.0, 0.0)
TOP_RIGHT = (float(TRACK_SIZE), 0.0)
BOTTOM_LEFT = (0.0, float(TRACK_SIZE))
BOTTOM_RIGHT = (float(TRACK_SIZE), float(TRACK_SIZE))

# Starts and ends at TOP_LEFT.
STOPS = [
    BOTTOM_LEFT,
    BOTTOM_RIGHT,
    TOP_RIGHT,
    BOTTOM_LEFT,
    TOP_RIGHT,
    TOP_LEFT,
    BOTTOM_RIGHT,
]


def make_animator(duration: float, easing: str) -> PathAnimator:
    return PathAnimator(TOP_LEFT, TOP_LEFT, duration, STOPS, EASINGS[easing])
