"""2D point helpers operating on tuple[float, float]."""
from __future__ import annotations

import math
from collections.abc import Sequence

from tick_path.types import InvalidConfigurationError, Point


def point(p: Sequence[float]) -> Point:
    """Capture any 2-sequence of numbers as an immutable float point."""
    if len(p) != 2:
        raise InvalidConfigurationError(f"expected a 2D point, got {p!r}")
    return (float(p[0]), float(p[1]))


def sub(a: Point, b: Point) -> Point:
    return (a[0] - b[0], a[1] - b[1])


def magnitude(v: Point) -> float:
    return math.sqrt(v[0] * v[0] + v[1] * v[1])


def distance(a: Point, b: Point) -> float:
    return magnitude(sub(a, b))


def lerp(a: Point, b: Point, t: float) -> Point:
    """Componentwise a + (b - a) * t. t is not clamped."""
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


def segment_lengths(points: Sequence[Point]) -> tuple[float, ...]:
    """Distances between consecutive points; one shorter than ``points``."""
    return tuple(distance(a, b) for a, b in zip(points, points[1:]))
