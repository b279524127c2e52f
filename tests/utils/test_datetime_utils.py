import pytest

from pagefetch.utils.datetime_utils import epoch_to_iso_z


def test_epoch_zero():
    assert epoch_to_iso_z(0) == "1970-01-01T00:00:00.000Z"


def test_integer_seconds_have_millisecond_precision():
    assert epoch_to_iso_z(1700000000) == "2023-11-14T22:13:20.000Z"


def test_fractional_seconds_kept_to_milliseconds():
    assert epoch_to_iso_z(1700000000.5) == "2023-11-14T22:13:20.500Z"


def test_numeric_string_accepted():
    assert epoch_to_iso_z("1700000000") == "2023-11-14T22:13:20.000Z"


def test_none_maps_to_epoch():
    assert epoch_to_iso_z(None) == "1970-01-01T00:00:00.000Z"


def test_blank_string_maps_to_epoch():
    assert epoch_to_iso_z("  ") == "1970-01-01T00:00:00.000Z"


def test_booleans_map_to_zero_and_one():
    assert epoch_to_iso_z(False) == "1970-01-01T00:00:00.000Z"
    assert epoch_to_iso_z(True) == "1970-01-01T00:00:01.000Z"


@pytest.mark.parametrize("value", ["not-a-date", float("nan"), float("inf"), [1], {}])
def test_invalid_values_raise(value):
    with pytest.raises(ValueError):
        epoch_to_iso_z(value)
