"""
Margin-aware width/height recomputation.

Margins on an axis are treated as viewport-percentage quantities whatever
unit they were declared in: a width of 50px with 10 + 10 margins on a 100
wide viewport becomes 50 - 100 * 20 / 100 = 30px. Styles using this must
author horizontal and vertical margins as percentage equivalents.

License: MIT
"""

import math
from typing import Any, Dict, Optional

from themestyle.errors import MalformedLength
from themestyle.units import format_number, parse_length

_AXES = {
    "width": ("marginLeft", "marginRight"),
    "height": ("marginTop", "marginBottom"),
}


def _margin(style: Dict[str, Any], key: str) -> float:
    value = style.get(key)
    if not value:
        return 0
    if isinstance(value, (int, float)):
        return value
    parsed = parse_length(str(value))
    if parsed is None:
        raise MalformedLength(value, "is not a number")
    return parsed[0]


def format_value(style: Dict[str, Any], viewport, key: str) -> Optional[str]:
    """
    Recompute `style[key]` to leave room for the margins on its axis.

    Args:
        style: Style object holding the dimension and its margins
        viewport: Object exposing `width` and `height`
        key: "width" or "height"

    Returns:
        Adjusted dimension with its original unit ("px" when it had none),
        or None if the dimension is absent or falsy
    """
    if key not in _AXES or not style.get(key):
        return None

    declared = style[key]
    parsed = parse_length(format_number(declared) if isinstance(declared, (int, float)) else str(declared))
    if parsed is None:
        raise MalformedLength(declared, "is not a number")

    magnitude, unit = parsed
    if not math.isfinite(magnitude):
        raise MalformedLength(declared, "is out of range")
    unit = unit or "px"

    first, second = _AXES[key]
    margin_sum = _margin(style, first) + _margin(style, second)
    extent = getattr(viewport, key)

    if magnitude <= margin_sum or not extent:
        return f"{format_number(magnitude)}{unit}"

    return f"{format_number(magnitude - (100 * margin_sum) / extent)}{unit}"
