import pytest

from sizehuman import SI

testdata = [
    [1, "b", 1],
    [1, "kb", 1000],
    [1, "B", 8],
    [1, "kB", 8000],
    [1.5, "kB", 12000],
    [3, "MB", 24_000_000],
    [1, "QB", 8 * 10**30],
]


@pytest.mark.parametrize("value, unit, expected", testdata)
def test_to_bits(value, unit, expected):
    """SI value to bits"""
    result = SI.to_bits(value, unit)
    assert result == expected
    assert type(result) is int


testdata = [
    [1, "b", 0.125],
    [1, "kb", 125],
    [1, "B", 1],
    [1, "kB", 1000],
    [2, "MB", 2_000_000],
    [-1, "kB", -1000],
]


@pytest.mark.parametrize("value, unit, expected", testdata)
def test_to_bytes(value, unit, expected):
    """SI value to bytes"""
    assert SI.to_bytes(value, unit) == expected


def test_tuple():
    """(value, unit) tuple as single argument"""
    assert SI.to_bits((1, "kB")) == 8000
    assert SI.to_bytes((1, SI.units.kb)) == 125


testdata = [
    [8, {"as": "bits"}, 8, "b"],
    [8192, {"as": "bits"}, 8.19, "kb"],
    [-8192, {"as": "bits"}, -8.19, "kb"],
    [1234567, {"as": "bits", "precision": 4}, 1.2346, "Mb"],
    [1234567, {"as": "bits", "precision": 0}, 1, "Mb"],
    [8, {"as": "bytes"}, 1, "B"],
    [8192, {"as": "bytes"}, 1.02, "kB"],
    [8192, {}, 1.02, "kB"],
    [8 * 10**33, {}, 1000, "QB"],
]


@pytest.mark.parametrize("bits, options, value, unit", testdata)
def test_from_bits(bits, options, value, unit):
    """SI bits to human units"""
    assert SI.from_bits(bits, options) == (value, SI.units[unit])


testdata = [
    [8, {"as": "bits"}, 64, "b"],
    [8192, {"as": "bits"}, 65.54, "kb"],
    [1, {"as": "bytes"}, 1, "B"],
    [999, {}, 999, "B"],
    [0.5, {}, 0.5, "B"],
    [8192, {}, 8.19, "kB"],
    [1_500_000, {}, 1.5, "MB"],
    [10**12, {}, 1, "TB"],
]


@pytest.mark.parametrize("bytes, options, value, unit", testdata)
def test_from_bytes(bytes, options, value, unit):
    """SI bytes to human units"""
    assert SI.from_bytes(bytes, options) == (value, SI.units[unit])


def test_keywords():
    """Options passed as keywords"""
    assert SI.from_bits(8192, as_="bits") == (8.19, SI.units.kb)
    assert SI.from_bits(8192, **{"as": "bits"}) == (8.19, SI.units.kb)
    assert SI.from_bytes(8192, precision=3) == (8.192, SI.units.kB)


testdata = [
    [2500, {"precision": 0}, 3, "kB"],
    [-2500, {"precision": 0}, -3, "kB"],
    [1125, {}, 1.13, "kB"],
    [1500, {"precision": 0}, 2, "kB"],
    [1005, {}, 1.0, "kB"],
]


@pytest.mark.parametrize("bytes, options, value, unit", testdata)
def test_round_half_up(bytes, options, value, unit):
    """Exact ties round away from zero"""
    assert SI.from_bytes(bytes, options) == (value, SI.units[unit])
