import pytest

from request_accessor.parsing import is_blank, try_parse_int, try_parse_literal_bool


@pytest.mark.parametrize("value, expected", [(None, True), ("", True), ("  \t", True), (" x ", False)])
def test_is_blank(value, expected):
    assert is_blank(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [("10", 10), ("-10", -10), ("+1", 1), ("007", 7), (None, None), ("", None), ("-", None), ("1e3", None), ("٣", None)],
)
def test_try_parse_int(value, expected):
    assert try_parse_int(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [("true", True), ("TrUe", True), ("false", False), ("FALSE", False), ("on", None), (" true", None), (None, None)],
)
def test_try_parse_literal_bool(value, expected):
    assert try_parse_literal_bool(value) is expected
