"""
Tests for margin-aware width/height recomputation.
"""

import pytest

from themestyle.dimensions import format_value
from themestyle.errors import MalformedLength
from themestyle.models import Viewport

VIEWPORT = Viewport(width=100, height=400)


def test_margins_dominate_dimension():
    style = {"width": "10px", "marginLeft": 6, "marginRight": 6}
    assert format_value(style, VIEWPORT, "width") == "10px"


def test_margin_adjustment():
    style = {"width": "50px", "marginLeft": 10, "marginRight": 10}
    assert format_value(style, VIEWPORT, "width") == "30px"


def test_height_uses_vertical_margins_and_own_unit():
    style = {"width": "50px", "height": "50%", "marginTop": 20, "marginBottom": 20}
    assert format_value(style, VIEWPORT, "height") == "40%"


def test_numeric_dimension_defaults_to_px():
    style = {"width": 50, "marginLeft": 10, "marginRight": 10}
    assert format_value(style, VIEWPORT, "width") == "30px"


def test_missing_margin_counts_as_zero():
    style = {"width": "50px", "marginLeft": 10}
    assert format_value(style, VIEWPORT, "width") == "40px"


def test_string_margins_use_their_magnitude():
    style = {"width": "50px", "marginLeft": "5%", "marginRight": "5%"}
    assert format_value(style, VIEWPORT, "width") == "40px"


def test_absent_dimension():
    assert format_value({"marginLeft": 10}, VIEWPORT, "width") is None
    assert format_value({"width": 0}, VIEWPORT, "width") is None
    assert format_value({"width": "10px"}, VIEWPORT, "depth") is None


def test_zero_viewport_leaves_dimension_unadjusted():
    style = {"width": "50px", "marginLeft": 10, "marginRight": 10}
    assert format_value(style, Viewport(width=0, height=0), "width") == "50px"


def test_unparseable_dimension():
    with pytest.raises(MalformedLength):
        format_value({"width": "auto", "marginLeft": 1}, VIEWPORT, "width")


def test_out_of_range_dimension():
    with pytest.raises(MalformedLength):
        format_value({"width": "1e400px", "marginLeft": 1}, VIEWPORT, "width")
