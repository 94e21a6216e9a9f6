"""Elementary numeric helpers: absolute values, rounding, remainder, powers, roots."""

from __future__ import annotations

import math

PI = 3.14159265358979323846
E = 2.71828182845904523536028747
LN2 = 0.693147180559945309417232
ACCURACY = 1e-09

NAN = math.nan
INF = math.inf


def _is_special(x: float) -> bool:
    return math.isnan(x) or math.isinf(x)


def iabs(x: int) -> int:
    """Absolute value of an integer."""
    return -x if x < 0 else x


def fabs(x: float) -> float:
    """Absolute value of a floating-point number."""
    if x < 0.0:
        x = -x
    return float(x)


def floor(x: float) -> float:
    """Largest integral value not greater than ``x``; NaN and infinities pass through."""
    if _is_special(x):
        return x
    whole = int(x)
    if x < 0 and x != whole:
        whole -= 1
    return float(whole)


def ceil(x: float) -> float:
    """Ceiling computed by stepping up from the truncated magnitude.

    For negative input the result is ``1 - ceil(|x|)``, which matches the
    true ceiling for non-integral values.
    """
    if _is_special(x):
        return x
    magnitude = -x if x < 0 else x
    result = int(magnitude) - 1
    while result < magnitude:
        result += 1
    if x < 0:
        result = -result + 1
    return float(result)


def fmod_undefined(x: float, y: float) -> bool:
    """True when ``fmod(x, y)`` has no finite answer: NaN or infinite operands, or ``y == 0``."""
    return _is_special(x) or _is_special(y) or y == 0


def fmod(x: float, y: float) -> float:
    """Remainder of ``x / y`` truncated toward zero; NaN where undefined."""
    if fmod_undefined(x, y):
        return NAN
    quotient = x / y
    return float(x) - y * float(int(quotient))


def _reciprocal(value: float) -> float:
    if value == 0:
        return math.copysign(INF, value)
    return 1.0 / value


def _infinite_power(base: float) -> float:
    magnitude = fabs(base)
    if magnitude > 1:
        return INF
    if magnitude < 1:
        return 0.0
    return 1.0 if base == 1 else NAN


def power(base: float, exponent: float) -> float:
    """Raise ``base`` to ``exponent`` by repeated multiplication.

    A non-integral exponent is rounded up to the next whole number of
    multiplications; a negative exponent yields the reciprocal. An infinite
    exponent gives the limiting value of the product.
    """
    if math.isnan(base) or math.isnan(exponent):
        return NAN
    if exponent < 0:
        return _reciprocal(power(base, -exponent))
    if math.isinf(exponent):
        return _infinite_power(base)

    steps = math.ceil(exponent)
    result = 1.0
    factor = float(base)
    while steps:
        if steps & 1:
            result *= factor
        steps >>= 1
        if steps:
            factor *= factor
    return result


def factorial(x: float) -> float:
    """Product of the integers from 1 up to ``x`` (1 for ``x`` below 1 or NaN)."""
    if math.isnan(x) or x < 1:
        return 1.0
    if math.isinf(x):
        return INF
    result = 1.0
    for factor in range(1, int(x) + 1):
        result *= factor
    return result


def sqrt(x: float) -> float:
    """Square root by Newton's iteration, run until the estimate stops changing."""
    if math.isnan(x) or x < 0:
        return NAN
    if x == 0 or x == INF:
        return x

    result = 1.0
    previous = None
    while True:
        estimate = (result + x / result) / 2.0
        if estimate == result or estimate == previous:
            return result
        previous, result = result, estimate