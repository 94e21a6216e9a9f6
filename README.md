# seriesmath

Elementary mathematical functions computed from first principles: Taylor
series, Newton's iteration and Halley's method. None of the results come
from the platform's math library; the `math` module is used only to
recognise `nan` and infinities.

Where a result is undefined, the functions return `nan` instead of raising
an exception. Over the tested ranges the results agree with the `math`
module to within about 1e-6.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `seriesmath.basic`

- `iabs(x)`: absolute value of an integer.
- `fabs(x)`: absolute value of a number, returned as a float.
- `floor(x)`: largest integral value not greater than `x`, as a float. `nan`
  and infinities are returned unchanged.
- `ceil(x)`: counts up from the truncated magnitude. For negative input the
  result is `1 - ceil(|x|)`. That is the true ceiling for non-integral
  values, but for a negative whole number it is one too high (for example,
  `ceil(-3.0)` is `-2.0`). `nan` and infinities are returned unchanged.
- `fmod_undefined(x, y)`: `True` when either argument is `nan` or infinite,
  or when `y` is zero.
- `fmod(x, y)`: `x - y * trunc(x / y)`. Returns `nan` wherever
  `fmod_undefined(x, y)` is true, and that includes an infinite `y`.
- `power(base, exponent)`: power by repeated multiplication. A non-integral
  exponent is rounded up to the next whole number of multiplications, and a
  negative exponent gives the reciprocal. An infinite exponent gives the
  limit of the product: `inf`, `0.0`, `1.0`, or `nan` when `base` is `-1`.
  A `nan` argument gives `nan`.
- `factorial(x)`: product of the integers from 1 to `x`. Returns `1.0` when
  `x` is below 1 or `nan`, and `inf` when `x` is infinite.
- `sqrt(x)`: square root by Newton's iteration, run until the estimate stops
  changing. Returns `nan` for negative or `nan` input.

The module also defines the constants `PI`, `E`, `LN2`, `ACCURACY` (`1e-09`),
`NAN` and `INF`.

### `seriesmath.exponential`

- `exp(x)`: Taylor series, summed until a term falls to `ACCURACY` or below.
  A sum that passes the largest float becomes `inf`. Negative arguments use
  the reciprocal, so a large negative `x` gives `0.0`.
- `log(x)`: first divides `x` by `e` until it is below `e`, then applies
  Halley's iteration on `exp` and adds back the number of divisions.
  `log(0)` is `-inf`, negative or `nan` input gives `nan`, and `log(inf)` is
  `inf`.

### `seriesmath.trig`

- `sin(x)`: reduces the argument modulo `2 * PI`, then sums the first 100
  terms of the series. `nan` and infinities give `nan`.
- `cos(x)`: computed as `sin(PI / 2 - x)`. Returns exactly `-1.0` at `PI`
  and `-PI`.
- `tan(x)`: reduces the argument modulo `PI`, then returns `sin(x) / cos(x)`.
- `atan(x)`: on (-1, 1), the Maclaurin series. Outside that interval, the
  series in `1 / x` subtracted from `±PI / 2`. Exact at `±1` and `±inf`.
- `asin(x)`: computed as `atan(x / sqrt(1 - x**2))`. Gives `nan` outside
  [-1, 1].
- `acos(x)`: computed as `atan(sqrt(1 - x**2) / x)`, with `PI` added for
  negative `x`. Gives `nan` outside [-1, 1].

## Example

```python
from seriesmath.basic import fmod, power, sqrt
from seriesmath.exponential import exp, log
from seriesmath.trig import atan, sin

sqrt(4.0)            # 2.0
power(2.0, 3.0)      # 8.0
fmod(23.456, 4.355)  # about 1.681
exp(1.0)             # about 2.718281828
log(2.0)             # about 0.693147181
sin(2.0)             # about 0.909297427
atan(float("inf"))   # PI / 2
```

## What it does not do

This is a library of functions only. It has no command-line program. It
works on real floats, not complex numbers or decimals. It does not aim for
correctly rounded results: the answers are approximations from series and
iteration, and some are slow. `atan`, for instance, sums thousands of terms.