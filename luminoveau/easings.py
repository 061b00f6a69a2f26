"""Easing functions for animating values over time.

Every function takes the same four arguments:

* ``t`` - current time, in the same unit as the duration
* ``b`` - starting value
* ``c`` - total change in value
* ``d`` - total duration
"""

from __future__ import annotations

import math

_BACK_OVERSHOOT = 1.70158
_BACK_IN_OUT_FACTOR = 1.525


def ease_linear_none(t: float, b: float, c: float, d: float) -> float:
    return c * t / d + b


def ease_linear_in(t: float, b: float, c: float, d: float) -> float:
    return c * t / d + b


def ease_linear_out(t: float, b: float, c: float, d: float) -> float:
    return c * t / d + b


def ease_linear_in_out(t: float, b: float, c: float, d: float) -> float:
    return c * t / d + b


def ease_sine_in(t: float, b: float, c: float, d: float) -> float:
    return -c * math.cos(t / d * (math.pi / 2.0)) + c + b


def ease_sine_out(t: float, b: float, c: float, d: float) -> float:
    return c * math.sin(t / d * (math.pi / 2.0)) + b


def ease_sine_in_out(t: float, b: float, c: float, d: float) -> float:
    return -c / 2.0 * (math.cos(math.pi * t / d) - 1.0) + b


def ease_circ_in(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return -c * (math.sqrt(1.0 - t * t) - 1.0) + b


def ease_circ_out(t: float, b: float, c: float, d: float) -> float:
    t = t / d - 1.0
    return c * math.sqrt(1.0 - t * t) + b


def ease_circ_in_out(t: float, b: float, c: float, d: float) -> float:
    t /= d / 2.0
    if t < 1.0:
        return -c / 2.0 * (math.sqrt(1.0 - t * t) - 1.0) + b
    t -= 2.0
    return c / 2.0 * (math.sqrt(1.0 - t * t) + 1.0) + b


def ease_cubic_in(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return c * t * t * t + b


def ease_cubic_out(t: float, b: float, c: float, d: float) -> float:
    t = t / d - 1.0
    return c * (t * t * t + 1.0) + b


def ease_cubic_in_out(t: float, b: float, c: float, d: float) -> float:
    t /= d / 2.0
    if t < 1.0:
        return c / 2.0 * t * t * t + b
    t -= 2.0
    return c / 2.0 * (t * t * t + 2.0) + b


def ease_quad_in(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return c * t * t + b


def ease_quad_out(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return -c * t * (t - 2.0) + b


def ease_quad_in_out(t: float, b: float, c: float, d: float) -> float:
    t /= d / 2.0
    if t < 1.0:
        return (c / 2.0) * (t * t) + b
    return -c / 2.0 * ((t - 1.0) * (t - 3.0) - 1.0) + b


def ease_expo_in(t: float, b: float, c: float, d: float) -> float:
    if t == 0.0:
        return b
    return c * 2.0 ** (10.0 * (t / d - 1.0)) + b


def ease_expo_out(t: float, b: float, c: float, d: float) -> float:
    if t == d:
        return b + c
    return c * (-(2.0 ** (-10.0 * t / d)) + 1.0) + b


def ease_expo_in_out(t: float, b: float, c: float, d: float) -> float:
    if t == 0.0:
        return b
    if t == d:
        return b + c
    t /= d / 2.0
    if t < 1.0:
        return c / 2.0 * 2.0 ** (10.0 * (t - 1.0)) + b
    return c / 2.0 * (-(2.0 ** (-10.0 * (t - 1.0))) + 2.0) + b


def ease_back_in(t: float, b: float, c: float, d: float) -> float:
    s = _BACK_OVERSHOOT
    t /= d
    return c * t * t * ((s + 1.0) * t - s) + b


def ease_back_out(t: float, b: float, c: float, d: float) -> float:
    s = _BACK_OVERSHOOT
    t = t / d - 1.0
    return c * (t * t * ((s + 1.0) * t + s) + 1.0) + b


def ease_back_in_out(t: float, b: float, c: float, d: float) -> float:
    s = _BACK_OVERSHOOT * _BACK_IN_OUT_FACTOR
    t /= d / 2.0
    if t < 1.0:
        return c / 2.0 * (t * t * ((s + 1.0) * t - s)) + b
    t -= 2.0
    return c / 2.0 * (t * t * ((s + 1.0) * t + s) + 2.0) + b


def ease_bounce_out(t: float, b: float, c: float, d: float) -> float:
    t /= d
    if t < 1.0 / 2.75:
        return c * (7.5625 * t * t) + b
    if t < 2.0 / 2.75:
        t -= 1.5 / 2.75
        return c * (7.5625 * t * t + 0.75) + b
    if t < 2.5 / 2.75:
        t -= 2.25 / 2.75
        return c * (7.5625 * t * t + 0.9375) + b
    t -= 2.625 / 2.75
    return c * (7.5625 * t * t + 0.984375) + b


def ease_bounce_in(t: float, b: float, c: float, d: float) -> float:
    return c - ease_bounce_out(d - t, 0.0, c, d) + b


def ease_bounce_in_out(t: float, b: float, c: float, d: float) -> float:
    if t < d / 2.0:
        return ease_bounce_in(t * 2.0, 0.0, c, d) * 0.5 + b
    return ease_bounce_out(t * 2.0 - d, 0.0, c, d) * 0.5 + c * 0.5 + b


def ease_elastic_in(t: float, b: float, c: float, d: float) -> float:
    if t == 0.0:
        return b
    t /= d
    if t == 1.0:
        return b + c
    p = d * 0.3
    s = p / 4.0
    t -= 1.0
    post_fix = c * 2.0 ** (10.0 * t)
    return -(post_fix * math.sin((t * d - s) * (2.0 * math.pi) / p)) + b


def ease_elastic_out(t: float, b: float, c: float, d: float) -> float:
    if t == 0.0:
        return b
    t /= d
    if t == 1.0:
        return b + c
    p = d * 0.3
    s = p / 4.0
    return c * 2.0 ** (-10.0 * t) * math.sin((t * d - s) * (2.0 * math.pi) / p) + c + b


def ease_elastic_in_out(t: float, b: float, c: float, d: float) -> float:
    if t == 0.0:
        return b
    t /= d / 2.0
    if t == 2.0:
        return b + c
    p = d * (0.3 * 1.5)
    s = p / 4.0
    if t < 1.0:
        t -= 1.0
        post_fix = c * 2.0 ** (10.0 * t)
        return -0.5 * (post_fix * math.sin((t * d - s) * (2.0 * math.pi) / p)) + b
    t -= 1.0
    post_fix = c * 2.0 ** (-10.0 * t)
    return post_fix * math.sin((t * d - s) * (2.0 * math.pi) / p) * 0.5 + c + b