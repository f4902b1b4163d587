import pytest

from repdigits.errors import ArithmeticOverflow, InvalidRange
from repdigits.ranges import Range, parse_ranges


def test_contains_is_inclusive():
    rng = Range(11, 22)
    assert rng.contains(11)
    assert rng.contains(22)
    assert not rng.contains(10)
    assert not rng.contains(23)


def test_range_is_immutable():
    rng = Range(1, 2)
    with pytest.raises(AttributeError):
        rng.start = 5


@pytest.mark.parametrize("start,end", [(0, 5), (-3, 5), (5, 0), (10, 9)])
def test_checked_rejects_invalid(start, end):
    with pytest.raises(InvalidRange):
        Range.checked(start, end)


def test_checked_rejects_too_wide():
    with pytest.raises(ArithmeticOverflow):
        Range.checked(1, 10**18)


def test_parse_ranges():
    ranges = parse_ranges("11-22,95-115,2121212118-2121212124\n")
    assert ranges == [Range(11, 22), Range(95, 115), Range(2121212118, 2121212124)]
    assert str(ranges[0]) == "11-22"


def test_parse_ranges_skips_blank_items():
    assert parse_ranges(" 1-2, ,3-4,") == [Range(1, 2), Range(3, 4)]


def test_parse_ranges_missing_separator():
    with pytest.raises(ValueError, match="separator"):
        parse_ranges("11-22,95")


def test_parse_ranges_bad_number():
    with pytest.raises(ValueError, match="invalid range: 1-x"):
        parse_ranges("1-x")


def test_parse_ranges_reversed_bounds():
    with pytest.raises(InvalidRange):
        parse_ranges("22-11")
