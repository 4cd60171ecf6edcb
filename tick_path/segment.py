"""SegmentAnimator - eased interpolation along a single leg."""
from __future__ import annotations

from collections.abc import Sequence

from tick_path import vec
from tick_path.easing import linear
from tick_path.types import EasingFn, InvalidConfigurationError, Point


class SegmentAnimator:
    """Moves a point from ``start`` to ``end`` over ``duration`` seconds.

    Progress accumulates as ``dt / duration`` and is never clamped. Time
    that arrives after the segment has finished is discarded.
    """

    def __init__(
        self,
        start: Sequence[float],
        end: Sequence[float],
        duration: float,
        easing: EasingFn = linear,
    ) -> None:
        if duration < 0:
            raise InvalidConfigurationError("duration must be non-negative")
        self._start = vec.point(start)
        self._end = vec.point(end)
        self._duration = float(duration)
        self._easing = easing
        # A zero-length leg has nothing to animate and completes on creation.
        self._progress = 0.0 if duration > 0 else 1.0

    @property
    def start(self) -> Point:
        return self._start

    @property
    def end(self) -> Point:
        return self._end

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def easing(self) -> EasingFn:
        return self._easing

    @property
    def progress(self) -> float:
        return self._progress

    def advance(self, dt: float) -> None:
        if dt < 0:
            raise ValueError("dt must be non-negative")
        if self.is_finished():
            return
        self._progress += dt / self._duration

    def current_position(self) -> Point:
        return vec.lerp(self._start, self._end, self._easing(self._progress))

    def is_finished(self) -> bool:
        return self._progress >= 1.0
