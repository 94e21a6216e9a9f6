"""Exponential and natural logarithm computed from series."""

from __future__ import annotations

import math
import sys

from seriesmath.basic import ACCURACY, E, INF, NAN, fabs

_DBL_MAX = sys.float_info.max
_LOG_ITERATIONS = 100


def exp(x: float) -> float:
    """``e`` raised to ``x`` from its Taylor series.

    Terms are summed until one falls to ``ACCURACY`` or below; a sum that
    overflows becomes infinity. Negative arguments use the reciprocal.
    """
    if x == -INF:
        return 0.0
    if math.isnan(x):
        return NAN
    if x == INF:
        return INF

    negative = x < 0
    if negative:
        x = -x

    term = 1.0
    total = 1.0
    index = 1
    while fabs(term) > ACCURACY:
        term *= x / index
        total += term
        if total > _DBL_MAX:
            total = INF
            break
        index += 1

    if negative:
        return 0.0 if total == INF else 1.0 / total
    return total


def log(x: float) -> float:
    """Natural logarithm by Halley's iteration on ``exp``.

    The argument is first divided by ``e`` until it is below ``e``; the
    number of divisions is added to the result.
    """
    if math.isnan(x) or x < 0:
        return NAN
    if x == 0:
        return -INF
    if x == INF:
        return x

    whole_part = 0
    while x >= E:
        x /= E
        whole_part += 1

    result = 0.0
    for _ in range(_LOG_ITERATIONS):
        power = exp(result)
        updated = result + 2 * ((x - power) / (x + power))
        if updated == result:
            break
        result = updated

    return result + whole_part