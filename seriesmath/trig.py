"""Trigonometric functions and their inverses computed from power series."""

from __future__ import annotations

import math
from fractions import Fraction
from typing import Iterator

from seriesmath.basic import INF, NAN, PI, fmod_undefined, sqrt

_SINE_TERMS = 100
_ATAN_INNER_TERMS = 5000
_ATAN_OUTER_TERMS = 7000


def _divide(numerator: float, denominator: float) -> float:
    """IEEE division: a zero denominator gives a signed infinity or NaN."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return NAN
        return math.copysign(INF, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _reduce(x: float, period: float) -> float:
    """Remainder of ``x`` after removing whole periods, truncating toward zero.

    The subtraction is carried out exactly so that large arguments keep
    their precision; NaN is returned where the remainder is undefined.
    """
    if fmod_undefined(x, period):
        return NAN
    turns = int(x / period)
    return float(Fraction(x) - Fraction(period) * turns)


def _sine_terms(x: float) -> Iterator[float]:
    term = x
    square = x * x
    for index in range(_SINE_TERMS):
        yield term
        term = -term * square / ((2 * index + 2) * (2 * index + 3))


def sin(x: float) -> float:
    """Sine from the first hundred terms of its Taylor series.

    The argument is first reduced modulo ``2 * PI``; NaN and infinities give NaN.
    """
    x = _reduce(x, 2 * PI)
    return sum(_sine_terms(x), 0.0)


def cos(x: float) -> float:
    """Cosine as ``sin(PI / 2 - x)``, exactly -1 at ``PI`` and ``-PI``."""
    if x == PI or x == -PI:
        return -1.0
    return sin(PI / 2.0 - x)


def tan(x: float) -> float:
    """Tangent as sine over cosine after reducing the argument modulo ``PI``."""
    x = _reduce(x, PI)
    return _divide(sin(x), cos(x))


def _alternating_odd_series(ratio: float, count: int) -> Iterator[float]:
    """Terms ``(-1)**i * ratio**(2i + 1) / (2i + 1)`` for ``i`` below ``count``."""
    power = ratio
    step = -ratio * ratio
    for index in range(count):
        yield power / (2 * index + 1)
        power *= step


def atan(x: float) -> float:
    """Arctangent from its series.

    Inside (-1, 1) the Maclaurin series is summed; outside it the series in
    ``1 / x`` is subtracted from ``±PI / 2``.
    """
    if math.isnan(x):
        return x
    if x == INF:
        return PI / 2
    if x == -INF:
        return -PI / 2
    if x == 1:
        return PI / 4
    if x == -1:
        return -(PI / 4)

    if -1.0 < x < 1.0:
        return sum(_alternating_odd_series(x, _ATAN_INNER_TERMS), 0.0)

    tail = sum(_alternating_odd_series(1.0 / x, _ATAN_OUTER_TERMS), 0.0)
    return _divide(PI * sqrt(x * x), 2 * x) - tail


def asin(x: float) -> float:
    """Arcsine as ``atan(x / sqrt(1 - x**2))``; NaN outside [-1, 1]."""
    if math.isnan(x) or x > 1 or x < -1:
        return NAN
    return atan(_divide(x, sqrt(1 - x * x)))


def acos(x: float) -> float:
    """Arccosine as ``atan(sqrt(1 - x**2) / x)``, shifted by ``PI`` for negative ``x``."""
    result = atan(_divide(sqrt(1 - x * x), x))
    if x < 0:
        result = PI + result
    return result