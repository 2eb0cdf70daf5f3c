import numpy as np
import pytest

from sizehuman.errors import InvalidValueError
from sizehuman.util import as_number, exponent, maybe_integer, round_half_up

testdata = [
    [1.0, 1, int],
    [8, 8, int],
    [-2.0, -2, int],
    [0.0, 0, int],
    [1.5, 1.5, float],
    [0.125, 0.125, float],
]


@pytest.mark.parametrize("n, expected, kind", testdata)
def test_maybe_integer(n, expected, kind):
    """Whole numbers collapse to int, fractions are kept"""
    result = maybe_integer(n)
    assert result == expected
    assert type(result) is kind


testdata = [
    [0, 1000, 0],
    [0.0, 1000, 0],
    [-0.0, 1024, 0],
    [999, 1000, 0],
    [1000, 1000, 1],
    [10**6 - 1, 1000, 1],
    [10**9, 1000, 3],
    [10**15, 1000, 5],
    [1023, 1024, 0],
    [1024, 1024, 1],
    [-2048, 1024, 1],
    [2**100, 1024, 10],
    [0.5, 1000, -1],
    [1e-3, 1000, -1],
]


@pytest.mark.parametrize("n, base, expected", testdata)
def test_exponent(n, base, expected):
    """Magnitude class of a number"""
    assert exponent(n, base) == expected


testdata = [
    [np.float64(2.5), 2.5, float],
    [np.int64(3), 3, int],
    [np.float32(0.5), 0.5, float],
    [7, 7, int],
]


@pytest.mark.parametrize("n, expected, kind", testdata)
def test_as_number(n, expected, kind):
    """numpy scalars become Python numbers"""
    result = as_number(n)
    assert result == expected
    assert type(result) is kind


@pytest.mark.parametrize(
    "n", [True, "1", None, 1 + 2j, float("nan"), float("inf"), -float("inf")]
)
def test_as_number_invalid(n):
    """Non-real and non-finite quantities are rejected"""
    with pytest.raises(InvalidValueError):
        as_number(n)


testdata = [
    [2.5, 0, 3],
    [-2.5, 0, -3],
    [0.5, 0, 1],
    [1.125, 2, 1.13],
    [1.005, 2, 1.0],
    [8.192, 2, 8.19],
    [7, 2, 7],
    [-0.0, 2, 0],
    [float(2**63), 2, 2**63],
    [1e300, 2, 1e300],
    [93.13225746154785, 4, 93.1323],
]


@pytest.mark.parametrize("n, precision, expected", testdata)
def test_round_half_up(n, precision, expected):
    """Rounding of the exact value, ties away from zero"""
    result = round_half_up(n, precision)
    assert result == expected
    assert type(result) is float
