"""
Length unit conversion.

Turns "<magnitude><unit>" strings into the values a renderer consumes:
numbers for absolute and viewport-relative units, the original string for
percentages.

License: MIT
"""

import logging
import math
import re
from typing import Optional, Tuple, Union

from themestyle.config import DEFAULT_ROOT_METRIC
from themestyle.errors import ContractViolation, MalformedLength, UnknownUnit

logger = logging.getLogger(__name__)

Number = Union[int, float]
LengthValue = Union[Number, str, None]

LENGTH_PATTERN = re.compile(r"^([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)(.*)$", re.DOTALL)


def parse_length(value: str) -> Optional[Tuple[float, str]]:
    """
    Split a length string into magnitude and unit.

    Args:
        value: Length string such as "2rem", "-1.5px" or "50%"

    Returns:
        Tuple of (magnitude, unit), unit being "" when absent, or None if the
        string does not start with a number
    """
    match = LENGTH_PATTERN.match(value.strip())
    if not match:
        return None
    return float(match.group(1)), match.group(2).strip()


def format_number(value: Number) -> str:
    """Render a number the way a compiled style prints it (30.0 -> "30")."""
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def root_metric(theme) -> Number:
    """Pixel size of 1rem for `theme`, falling back to the default base."""
    return getattr(theme, "rem", None) or DEFAULT_ROOT_METRIC


def resolve_length_unit(value: LengthValue, theme, viewport) -> LengthValue:
    """
    Resolve a length string against a theme and viewport.

    Args:
        value: Raw length (string, number, or falsy)
        theme: Object exposing the root metric as `rem`
        viewport: Object exposing `width` and `height`

    Returns:
        Number for rem/px/vw/vh, the original string for percentages, the
        input itself when it is falsy or already numeric

    Raises:
        ContractViolation: If `value` is neither string nor number
        MalformedLength: If a non-zero magnitude has no unit, or the
            magnitude or result is not a finite number
        UnknownUnit: If the unit is not supported
    """
    if not value or isinstance(value, (int, float)):
        return value
    if not isinstance(value, str):
        raise ContractViolation(value)

    parsed = parse_length(value)
    if parsed is None:
        raise UnknownUnit(value.strip(), value)

    magnitude, unit = parsed
    if not math.isfinite(magnitude):
        raise MalformedLength(value, "is out of range")
    if magnitude == 0:
        return 0
    if not unit:
        raise MalformedLength(value)

    if unit == "%":
        return value
    if unit == "rem":
        result = magnitude * root_metric(theme)
    elif unit == "px":
        result = magnitude
    elif unit == "vw":
        result = magnitude * viewport.width / 100
    elif unit == "vh":
        result = magnitude * viewport.height / 100
    else:
        raise UnknownUnit(unit, value)

    if not math.isfinite(result):
        raise MalformedLength(value, "is out of range")
    return result
