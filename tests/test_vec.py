"""Tests for 2D point helpers."""
from __future__ import annotations

import math

import pytest

from tick_path import InvalidConfigurationError, vec


class TestPoint:
    def test_ints_become_floats(self) -> None:
        p = vec.point([3, 4])
        assert p == (3.0, 4.0)
        assert all(isinstance(c, float) for c in p)

    def test_returns_tuple(self) -> None:
        assert isinstance(vec.point([1.0, 2.0]), tuple)

    def test_3d_rejected(self) -> None:
        with pytest.raises(InvalidConfigurationError):
            vec.point((1.0, 2.0, 3.0))

    def test_1d_rejected(self) -> None:
        with pytest.raises(ValueError):
            vec.point((1.0,))


class TestSub:
    def test_basic(self) -> None:
        assert vec.sub((5.0, 3.0), (1.0, 2.0)) == (4.0, 1.0)


class TestMagnitude:
    def test_3_4_5(self) -> None:
        assert vec.magnitude((3.0, 4.0)) == 5.0

    def test_zero(self) -> None:
        assert vec.magnitude((0.0, 0.0)) == 0.0


class TestDistance:
    def test_same_point(self) -> None:
        assert vec.distance((1.0, 2.0), (1.0, 2.0)) == 0.0

    def test_basic(self) -> None:
        assert vec.distance((0.0, 0.0), (3.0, 4.0)) == 5.0

    def test_symmetric(self) -> None:
        assert vec.distance((1.0, 7.0), (-2.0, 3.0)) == vec.distance((-2.0, 3.0), (1.0, 7.0))


class TestLerp:
    def test_endpoints(self) -> None:
        assert vec.lerp((0.0, 10.0), (20.0, 30.0), 0.0) == (0.0, 10.0)
        assert vec.lerp((0.0, 10.0), (20.0, 30.0), 1.0) == (20.0, 30.0)

    def test_midpoint(self) -> None:
        assert vec.lerp((0.0, 0.0), (600.0, 600.0), 0.5) == (300.0, 300.0)

    def test_extrapolates_past_end(self) -> None:
        # overshooting easings rely on t > 1 not being clamped
        assert vec.lerp((0.0, 0.0), (10.0, 0.0), 1.5) == (15.0, 0.0)

    def test_extrapolates_before_start(self) -> None:
        assert vec.lerp((0.0, 0.0), (10.0, 0.0), -0.5) == (-5.0, 0.0)


class TestSegmentLengths:
    def test_square(self) -> None:
        points = [(0.0, 0.0), (0.0, 600.0), (600.0, 600.0), (600.0, 0.0)]
        assert vec.segment_lengths(points) == (600.0, 600.0, 600.0)

    def test_diagonal(self) -> None:
        (length,) = vec.segment_lengths([(0.0, 0.0), (600.0, 600.0)])
        assert math.isclose(length, 600.0 * math.sqrt(2))

    def test_single_point_has_no_segments(self) -> None:
        assert vec.segment_lengths([(1.0, 1.0)]) == ()

    def test_repeated_point_is_zero(self) -> None:
        assert vec.segment_lengths([(1.0, 1.0), (1.0, 1.0)]) == (0.0,)
