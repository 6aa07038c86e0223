# ScientificEngine.py
"""""
Trigonometric engine and factorial.

sin / cos take an angle in degrees. Whole-degree angles found in TRIG_TABLE are
answered with the tabulated constants; everything else is converted to radians
and approximated with a truncated Maclaurin series (SERIES_DEPTH powers).

The series is a deliberate low-order approximation: it is very close for small
angles and drifts away quickly for angles far from 0 (sin(350) is off by more
than 1), because no range reduction is done before the series.
"""""

import math
from types import MappingProxyType

from . import error as E

SERIES_DEPTH = 10

_SQRT_HALF = 0.7071067811865476
_SQRT3_HALF = 0.8660254037844386

# degrees -> (sin, cos)
TRIG_TABLE = MappingProxyType({
    0: (0.0, 1.0),
    30: (0.5, _SQRT3_HALF),
    45: (_SQRT_HALF, _SQRT_HALF),
    60: (_SQRT3_HALF, 0.5),
    90: (1.0, 0.0),
    120: (_SQRT3_HALF, -0.5),
    135: (_SQRT_HALF, -_SQRT_HALF),
    150: (0.5, -_SQRT3_HALF),
    180: (0.0, -1.0),
    210: (-0.5, -_SQRT3_HALF),
    225: (-_SQRT_HALF, -_SQRT_HALF),
    240: (-_SQRT3_HALF, -0.5),
    270: (-1.0, 0.0),
    300: (-_SQRT3_HALF, 0.5),
    315: (-_SQRT_HALF, _SQRT_HALF),
    330: (-0.5, _SQRT3_HALF),
    360: (0.0, 1.0),
})


def factorial(n):
    """Return n! for a non-negative integer n.

    The upper bound used by the '!' operation is checked by the caller;
    the series below only asks for indices up to SERIES_DEPTH - 1.
    """
    if n < 0:
        raise E.NegativeFactorial("Factorial cannot be negative")
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def lookup(degrees):
    """Return the tabulated (sin, cos) pair for a whole-degree angle, or None."""
    if not math.isfinite(degrees) or degrees != int(degrees):
        return None
    return TRIG_TABLE.get(int(degrees))


def taylor_sin(x):
    # x - x^3/3! + x^5/5! - ... (odd powers below SERIES_DEPTH)
    result = 0.0
    sign = 1
    for i in range(1, SERIES_DEPTH, 2):
        result += sign * (math.pow(x, i) / factorial(i))
        sign = -sign
    return result


def taylor_cos(x):
    # 1 - x^2/2! + x^4/4! - ... (even powers below SERIES_DEPTH)
    result = 0.0
    sign = 1
    for i in range(0, SERIES_DEPTH, 2):
        result += sign * (math.pow(x, i) / factorial(i))
        sign = -sign
    return result


def sin(degrees):
    pair = lookup(degrees)
    if pair is not None:
        return pair[0]
    return taylor_sin(math.radians(degrees))


def cos(degrees):
    pair = lookup(degrees)
    if pair is not None:
        return pair[1]
    return taylor_cos(math.radians(degrees))


def _ratio(numerator, denominator):
    # float division with IEEE semantics: x/0 -> +-inf, 0/0 -> nan
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def tan(degrees):
    return _ratio(sin(degrees), cos(degrees))


def cotg(degrees):
    return _ratio(cos(degrees), sin(degrees))
