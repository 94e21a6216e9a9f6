import math

import pytest

from seriesmath.basic import PI
from seriesmath.trig import acos, asin, atan, cos, sin, tan

TOL = 1e-6
NAN_RESULT = pytest.approx(math.nan, nan_ok=True)


def _frange(start, stop, step):
    value = start
    while value < stop:
        yield value
        value += step


# sin


@pytest.mark.parametrize("value", [0.0, 1234567.0, -3234567.0])
def test_sin_large_and_zero(value):
    assert sin(value) == pytest.approx(math.sin(value), abs=TOL)
    assert int(sin(value)) == int(math.sin(value))


def test_sin_sweep_over_period():
    for value in _frange(-PI, PI, 0.01):
        assert int(sin(value)) == int(math.sin(value))
        assert sin(value) == pytest.approx(math.sin(value), abs=TOL)


@pytest.mark.parametrize(
    "value", [-14.96, 25524525.0, 4236265.2435252455, 2.0]
)
def test_sin_values(value):
    assert sin(value) == pytest.approx(math.sin(value), abs=TOL)


def test_sin_zero_is_exact():
    assert sin(0.0) == 0.0


@pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
def test_sin_special_is_nan(value):
    assert sin(value) == NAN_RESULT


# cos


@pytest.mark.parametrize("value", [0.0, 12347.0, -34567.0])
def test_cos_values_first(value):
    assert cos(value) == pytest.approx(math.cos(value), abs=TOL)


def test_cos_sweep_over_period():
    for value in _frange(-PI, PI, 0.01):
        assert int(cos(value)) == int(math.cos(value))
        assert cos(value) == pytest.approx(math.cos(value), abs=TOL)


@pytest.mark.parametrize(
    "value",
    [
        -14.96,
        0.0,
        -math.pi / 2,
        math.pi,
        1234567.0,
        -1234567.0,
        -0.54356,
        -4236526.54356,
        34.0,
    ],
)
def test_cos_values(value):
    assert cos(value) == pytest.approx(math.cos(value), abs=TOL)


@pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
def test_cos_special_is_nan(value):
    assert cos(value) == NAN_RESULT


def test_cos_at_pi_is_exactly_minus_one():
    assert cos(PI) == -1.0
    assert cos(-PI) == -1.0


def test_pythagorean_identity():
    for value in _frange(-10.0, 10.0, 0.37):
        assert sin(value) ** 2 + cos(value) ** 2 == pytest.approx(1.0, abs=1e-9)


# tan


@pytest.mark.parametrize(
    "value", [0.23, 1234567.0, -1234567.0, 341235.25452345645, PI]
)
def test_tan_values(value):
    assert tan(value) == pytest.approx(math.tan(value), abs=TOL)


def test_tan_integer_sweep():
    for value in _frange(-1000.0, 1000.0, 20.0):
        assert tan(value) == pytest.approx(math.tan(value), abs=TOL)


def test_tan_small_sweep():
    for value in _frange(-1.0, 1.0, 0.02):
        assert tan(value) == pytest.approx(math.tan(value), abs=TOL)


def test_tan_nan_for_infinity():
    assert tan(math.inf) == NAN_RESULT


# atan


@pytest.mark.parametrize("value", [0.43, 0.12, 1.0, -1.0, 0.0])
def test_atan_values_first(value):
    assert atan(value) == pytest.approx(math.atan(value), abs=TOL)


@pytest.mark.parametrize("value", [0.332, 0.001, -0.124325345])
def test_atan_values_second(value):
    assert atan(value) == pytest.approx(math.atan(value), abs=TOL)


def test_atan_sweep():
    for value in _frange(-1.0, 1.0, 0.3):
        assert atan(value) == pytest.approx(math.atan(value), abs=TOL)


def test_atan_special():
    assert math.isnan(atan(math.nan))
    assert atan(math.inf) == pytest.approx(math.atan(math.inf), abs=TOL)
    assert atan(-math.inf) == pytest.approx(math.atan(-math.inf), abs=TOL)


@pytest.mark.parametrize("value", [1.5, -2.0, 17.25, -300.0])
def test_atan_outside_unit_interval(value):
    assert atan(value) == pytest.approx(math.atan(value), abs=TOL)


def test_atan_of_one_is_quarter_pi():
    assert atan(1.0) == PI / 4
    assert atan(-1.0) == -(PI / 4)


# asin


@pytest.mark.parametrize("value", [-math.inf, math.inf, -16.0, math.nan, 1.0001])
def test_asin_nan(value):
    assert asin(value) == NAN_RESULT


@pytest.mark.parametrize(
    "value", [0.289, 1e-09, 0.1234, 0.0, 1.0, -1.0, 0.5, -0.5, -0.4235]
)
def test_asin_values(value):
    assert asin(value) == pytest.approx(math.asin(value), abs=TOL)


# acos


@pytest.mark.parametrize("value", [0.5, 0.4523452355, -0.8543, 0.0])
def test_acos_values(value):
    assert acos(value) == pytest.approx(math.acos(value), abs=TOL)


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, 347.52, 12.0])
def test_acos_nan(value):
    assert acos(value) == NAN_RESULT


def test_asin_plus_acos_is_half_pi():
    for value in (0.1, 0.35, 0.6, 0.85):
        assert asin(value) + acos(value) == pytest.approx(PI / 2, abs=TOL)