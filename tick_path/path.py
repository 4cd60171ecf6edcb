"""PathAnimator - drives a point through an ordered list of waypoints."""
from __future__ import annotations

from collections.abc import Sequence

from tick_path import vec
from tick_path.easing import linear
from tick_path.segment import SegmentAnimator
from tick_path.types import EasingFn, InvalidConfigurationError, Point


class PathAnimator:
    """Travels start -> stops[0] -> ... -> stops[-1] -> end in ``time`` seconds.

    Each leg is allotted a share of ``time`` proportional to its length, so
    the average speed is the same across the whole path while ``easing``
    shapes velocity inside every leg.

    ``current_stop_index`` is ``k`` while heading for ``stops[k]`` and
    ``None`` on the final leg toward ``end`` or once the path is complete.
    At most one leg transition happens per ``advance`` call; time left over
    when a leg finishes is not carried into the next one.
    """

    def __init__(
        self,
        start: Sequence[float],
        end: Sequence[float],
        time: float,
        stops: Sequence[Sequence[float]] = (),
        easing: EasingFn = linear,
    ) -> None:
        if time <= 0:
            raise InvalidConfigurationError("time must be positive")
        self._start = vec.point(start)
        self._end = vec.point(end)
        self._stops = tuple(vec.point(stop) for stop in stops)
        self._time = float(time)
        self._easing = easing

        self._distances = vec.segment_lengths((self._start, *self._stops, self._end))
        self._total_distance = sum(self._distances)

        self._current_stop_index: int | None = None
        self._segment: SegmentAnimator
        self.restart()

    @property
    def start(self) -> Point:
        return self._start

    @property
    def end(self) -> Point:
        return self._end

    @property
    def stops(self) -> tuple[Point, ...]:
        return self._stops

    @property
    def distances(self) -> tuple[float, ...]:
        return self._distances

    @property
    def total_distance(self) -> float:
        return self._total_distance

    @property
    def time(self) -> float:
        return self._time

    @property
    def easing(self) -> EasingFn:
        return self._easing

    @property
    def current_stop_index(self) -> int | None:
        return self._current_stop_index

    @property
    def segment(self) -> SegmentAnimator:
        return self._segment

    @property
    def state(self) -> str:
        """One of ``"traveling"``, ``"final"`` or ``"idle"``."""
        if self._current_stop_index is not None:
            return "traveling"
        if self._segment.is_finished():
            return "idle"
        return "final"

    def segment_durations(self) -> tuple[float, ...]:
        return tuple(self._segment_time(i) for i in range(len(self._distances)))

    def _segment_time(self, index: int) -> float:
        if self._total_distance == 0:
            return 0.0
        return self._time * (self._distances[index] / self._total_distance)

    def _make_segment(self, start: Point, end: Point, index: int) -> SegmentAnimator:
        return SegmentAnimator(start, end, self._segment_time(index), self._easing)

    def restart(self) -> None:
        if self._stops:
            self._current_stop_index = 0
            target = self._stops[0]
        else:
            self._current_stop_index = None
            target = self._end
        self._segment = self._make_segment(self._start, target, 0)

    def advance(self, dt: float) -> None:
        self._segment.advance(dt)
        if not self._segment.is_finished():
            return

        index = self._current_stop_index
        if index is None:
            # final leg done
            return

        last = len(self._stops) - 1
        if index < last:
            self._current_stop_index = index + 1
            self._segment = self._make_segment(
                self._stops[index], self._stops[index + 1], index + 1
            )
        else:
            self._current_stop_index = None
            self._segment = self._make_segment(self._stops[last], self._end, last + 1)

    def current_position(self) -> Point:
        if self.is_finished():
            return self._end
        if self._segment.is_finished():
            # zero-length leg waiting for the next advance
            return self._segment.end
        return self._segment.current_position()

    def is_finished(self) -> bool:
        return self._current_stop_index is None and self._segment.is_finished()
