"""
Tests for length unit conversion.
"""

import pytest

from themestyle.errors import ContractViolation, MalformedLength, UnknownUnit
from themestyle.models import Theme, Viewport
from themestyle.units import format_number, parse_length, resolve_length_unit

THEME = Theme(rem=10)
VIEWPORT = Viewport(width=200, height=400)


def test_rem_uses_root_metric():
    assert resolve_length_unit("2rem", THEME, VIEWPORT) == 20


def test_rem_defaults_root_metric_to_8():
    assert resolve_length_unit("2rem", Theme(rem=0), VIEWPORT) == 16


def test_px_is_plain_number():
    assert resolve_length_unit("12px", THEME, VIEWPORT) == 12
    assert resolve_length_unit("-1.5px", THEME, VIEWPORT) == -1.5


def test_percentage_is_left_for_renderer():
    assert resolve_length_unit("50%", THEME, VIEWPORT) == "50%"


def test_viewport_units():
    assert resolve_length_unit("50vw", THEME, VIEWPORT) == 100
    assert resolve_length_unit("25vh", THEME, VIEWPORT) == 100


def test_zero_needs_no_unit():
    assert resolve_length_unit("0", THEME, VIEWPORT) == 0
    assert resolve_length_unit("0px", THEME, VIEWPORT) == 0
    assert resolve_length_unit("0xy", THEME, VIEWPORT) == 0


def test_passthrough_values():
    assert resolve_length_unit(None, THEME, VIEWPORT) is None
    assert resolve_length_unit("", THEME, VIEWPORT) == ""
    assert resolve_length_unit(14, THEME, VIEWPORT) == 14
    assert resolve_length_unit(2.5, THEME, VIEWPORT) == 2.5


def test_whitespace_is_trimmed():
    assert resolve_length_unit("  3rem ", THEME, VIEWPORT) == 30


def test_unknown_unit():
    with pytest.raises(UnknownUnit) as exc_info:
        resolve_length_unit("10xy", THEME, VIEWPORT)
    assert exc_info.value.unit == "xy"
    assert "10xy" in str(exc_info.value)


def test_non_numeric_string_is_unknown_unit():
    with pytest.raises(UnknownUnit):
        resolve_length_unit("auto", THEME, VIEWPORT)


def test_missing_unit():
    with pytest.raises(MalformedLength):
        resolve_length_unit("10", THEME, VIEWPORT)


def test_out_of_range_magnitude():
    with pytest.raises(MalformedLength):
        resolve_length_unit("1e400px", THEME, VIEWPORT)
    with pytest.raises(MalformedLength):
        resolve_length_unit("-1e400vw", THEME, VIEWPORT)


def test_overflowing_conversion():
    with pytest.raises(MalformedLength) as exc_info:
        resolve_length_unit("1e308rem", THEME, VIEWPORT)
    assert "out of range" in str(exc_info.value)


def test_contract_violation():
    with pytest.raises(ContractViolation):
        resolve_length_unit({"width": 1}, THEME, VIEWPORT)
    with pytest.raises(TypeError):
        resolve_length_unit([1], THEME, VIEWPORT)


def test_parse_length():
    assert parse_length("1.5rem") == (1.5, "rem")
    assert parse_length("1em") == (1.0, "em")
    assert parse_length(".5%") == (0.5, "%")
    assert parse_length("40") == (40.0, "")
    assert parse_length("px") is None


def test_format_number():
    assert format_number(30.0) == "30"
    assert format_number(2.5) == "2.5"
    assert format_number(7) == "7"
