"""Easing functions for segment interpolation.

Each function maps normalized progress to shaped progress. Inputs outside
[0, 1] are passed through unclamped, and the back and elastic families
overshoot the unit range on purpose.
"""
from __future__ import annotations

import math

from tick_path.types import EasingFn

_BACK = 1.70158
_BACK_IN_OUT = _BACK * 1.525
_ELASTIC = (2 * math.pi) / 3


def linear(t: float) -> float:
    return t


def quad_in(t: float) -> float:
    return t * t


def quad_out(t: float) -> float:
    return t * (2 - t)


def quad_in_out(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


def cubic_in(t: float) -> float:
    return t * t * t


def cubic_out(t: float) -> float:
    return 1 - (1 - t) ** 3


def cubic_in_out(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    return 1 - (-2 * t + 2) ** 3 / 2


def sine_in(t: float) -> float:
    return 1 - math.cos(t * math.pi / 2)


def sine_out(t: float) -> float:
    return math.sin(t * math.pi / 2)


def sine_in_out(t: float) -> float:
    return -(math.cos(math.pi * t) - 1) / 2


def back_in(t: float) -> float:
    return (_BACK + 1) * t * t * t - _BACK * t * t


def back_out(t: float) -> float:
    u = t - 1
    return 1 + (_BACK + 1) * u * u * u + _BACK * u * u


def back_in_out(t: float) -> float:
    if t < 0.5:
        return (2 * t) ** 2 * ((_BACK_IN_OUT + 1) * 2 * t - _BACK_IN_OUT) / 2
    return ((2 * t - 2) ** 2 * ((_BACK_IN_OUT + 1) * (2 * t - 2) + _BACK_IN_OUT) + 2) / 2


def elastic_out(t: float) -> float:
    if t == 0.0 or t == 1.0:
        return t
    return 2 ** (-10 * t) * math.sin((10 * t - 0.75) * _ELASTIC) + 1


def bounce_out(t: float) -> float:
    n1 = 7.5625
    d1 = 2.75
    if t < 1 / d1:
        return n1 * t * t
    if t < 2 / d1:
        t -= 1.5 / d1
        return n1 * t * t + 0.75
    if t < 2.5 / d1:
        t -= 2.25 / d1
        return n1 * t * t + 0.9375
    t -= 2.625 / d1
    return n1 * t * t + 0.984375


EASINGS: dict[str, EasingFn] = {
    "linear": linear,
    "quad_in": quad_in,
    "quad_out": quad_out,
    "quad_in_out": quad_in_out,
    "cubic_in": cubic_in,
    "cubic_out": cubic_out,
    "cubic_in_out": cubic_in_out,
    "sine_in": sine_in,
    "sine_out": sine_out,
    "sine_in_out": sine_in_out,
    "back_in": back_in,
    "back_out": back_out,
    "back_in_out": back_in_out,
    "elastic_out": elastic_out,
    "bounce_out": bounce_out,
}
