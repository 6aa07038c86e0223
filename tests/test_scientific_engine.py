import math

import pytest

from Calculator import ScientificEngine
from Calculator import error as E


@pytest.mark.parametrize("n, expected", [(0, 1), (1, 1), (2, 2), (5, 120), (9, 362880), (10, 3628800)])
def test_factorial(n, expected):
    assert ScientificEngine.factorial(n) == expected


def test_factorial_negative():
    with pytest.raises(E.NegativeFactorial):
        ScientificEngine.factorial(-1)


def test_table_values_are_exact():
    assert ScientificEngine.sin(30) == 0.5
    assert ScientificEngine.cos(60) == 0.5
    assert ScientificEngine.cos(90) == 0.0
    assert ScientificEngine.sin(270) == -1.0
    assert ScientificEngine.sin(45) == ScientificEngine.cos(45)


def test_table_accepts_integral_floats():
    assert ScientificEngine.lookup(30.0) == (0.5, ScientificEngine.TRIG_TABLE[30][1])
    assert ScientificEngine.lookup(30.5) is None
    assert ScientificEngine.lookup(31) is None
    assert ScientificEngine.lookup(math.nan) is None


def test_table_values_match_math_module():
    for degrees, (sin_value, cos_value) in ScientificEngine.TRIG_TABLE.items():
        assert sin_value == pytest.approx(math.sin(math.radians(degrees)), abs=1e-15)
        assert cos_value == pytest.approx(math.cos(math.radians(degrees)), abs=1e-15)


def test_table_is_read_only():
    with pytest.raises(TypeError):
        ScientificEngine.TRIG_TABLE[10] = (0.0, 1.0)


@pytest.mark.parametrize("degrees", [1, 10, 20, 37.5, -15])
def test_series_close_to_zero(degrees):
    radians = math.radians(degrees)
    assert ScientificEngine.sin(degrees) == pytest.approx(math.sin(radians), abs=1e-8)
    assert ScientificEngine.cos(degrees) == pytest.approx(math.cos(radians), abs=1e-8)


def test_series_error_grows_with_angle():
    # No range reduction before the series: the truncation error explodes far from 0.
    error_small = abs(ScientificEngine.sin(10) - math.sin(math.radians(10)))
    error_medium = abs(ScientificEngine.sin(100) - math.sin(math.radians(100)))
    error_large = abs(ScientificEngine.sin(350) - math.sin(math.radians(350)))
    assert error_small < 1e-12
    assert error_small < error_medium < error_large
    assert error_large > 1


def test_taylor_sin_and_cos_take_radians():
    assert ScientificEngine.taylor_sin(0.0) == 0.0
    assert ScientificEngine.taylor_cos(0.0) == 1.0
    assert ScientificEngine.taylor_sin(0.5) == pytest.approx(math.sin(0.5), abs=1e-9)


def test_tan():
    assert ScientificEngine.tan(45) == 1.0
    assert ScientificEngine.tan(0) == 0.0
    assert ScientificEngine.tan(10) == pytest.approx(math.tan(math.radians(10)), abs=1e-9)


def test_tan_at_zero_cosine_is_infinite():
    assert ScientificEngine.tan(90) == math.inf
    assert ScientificEngine.tan(270) == -math.inf


def test_cotg():
    assert ScientificEngine.cotg(45) == 1.0
    assert ScientificEngine.cotg(90) == 0.0
    assert ScientificEngine.cotg(0) == math.inf
    assert ScientificEngine.cotg(20) == pytest.approx(1 / math.tan(math.radians(20)), rel=1e-9)
