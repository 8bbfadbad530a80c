"""
Style resolver.

Walks a compiled style object and turns theme placeholders, relative lengths
and margin-dependent dimensions into concrete values. The object is mutated
in place and returned for chaining.

License: MIT
"""

import logging
import math
from typing import Any, Callable, Dict, Optional

from themestyle.attributes import (
    COLOR_ATTRIBUTES,
    CURSOR_KEY,
    ELEVATION_KEY,
    LENGTH_ATTRIBUTES,
    MARGIN_KEYS,
)
from themestyle.calc import convert_value, is_expression
from themestyle.config import PLATFORM, is_web_platform
from themestyle.dimensions import format_value
from themestyle.errors import UndefinedVariable
from themestyle.models import Theme, Units, Viewport
from themestyle.registry import LENGTH_SUFFIX, VariableRegistry, default_registry
from themestyle.units import format_number, resolve_length_unit

logger = logging.getLogger(__name__)

Evaluator = Callable[[str, Any, Units], float]


def _substitute(value: Any, placeholder: Any, registry: VariableRegistry, theme: Theme, kind: str) -> Any:
    """Swap `value` for its theme value if `placeholder` is a registered one."""
    name = registry.name_for(placeholder)
    if name is None:
        return value

    resolved = theme.lookup(name)
    if resolved is None or resolved == "":
        raise UndefinedVariable(name, kind)
    return resolved


def _length_placeholder(value: Any) -> Optional[str]:
    # The parser reduced "<n>px" placeholders to the bare number n
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return f"{format_number(value)}{LENGTH_SUFFIX}"
    if isinstance(value, str):
        return f"{value}{LENGTH_SUFFIX}"
    return None


def resolve_theme_variables(
    style: Dict[str, Any],
    theme: Theme,
    viewport: Viewport,
    units: Optional[Units] = None,
    *,
    registry: Optional[VariableRegistry] = None,
    platform: Optional[str] = None,
    evaluator: Evaluator = convert_value,
) -> Dict[str, Any]:
    """
    Resolve every theme variable and length unit in a style object.

    Args:
        style: Compiled style object, mutated in place
        theme: Theme providing variable values, root metric and elevation
        viewport: Window dimensions for vw/vh and margin adjustment
        units: Unit sizes for calc()/min()/max() (derived when omitted)
        registry: Placeholder registry (the shared one when omitted)
        platform: Render target (configured platform when omitted)
        evaluator: Expression evaluator returning NaN on failure

    Returns:
        The same style object

    Raises:
        UndefinedVariable: If a placeholder's variable is missing from the theme
        UnknownUnit, MalformedLength, ContractViolation: From unit conversion
    """
    if registry is None:
        registry = default_registry
    if platform is None:
        platform = PLATFORM
    if units is None:
        units = Units.from_viewport(theme, viewport)
    keep_cursor = is_web_platform(platform)
    elevation = getattr(theme, "elevation", None)

    pending = list(style)
    index = 0
    while index < len(pending):
        key = pending[index]
        index += 1
        if key not in style:
            continue

        if key == ELEVATION_KEY and elevation:
            shadow_style = elevation(style[key]) or {}
            for shadow_key, shadow_value in shadow_style.items():
                style[shadow_key] = shadow_value
                # Merged properties are resolved later in this same pass
                if shadow_key != key and shadow_key not in pending[index:]:
                    pending.append(shadow_key)

        if key == CURSOR_KEY and not keep_cursor:
            del style[key]
            continue

        if key in COLOR_ATTRIBUTES:
            value = style[key]
            style[key] = _substitute(value, value, registry, theme, "color variable")

        if key in LENGTH_ATTRIBUTES:
            value = style[key]
            value = _substitute(value, _length_placeholder(value), registry, theme, "variable")

            if is_expression(value):
                converted = evaluator(key, value, units)
                if not math.isnan(converted):
                    value = converted

            style[key] = resolve_length_unit(value, theme, viewport)

    if all(style.get(margin) for margin in MARGIN_KEYS):
        for dimension in ("width", "height"):
            formatted = format_value(style, viewport, dimension)
            if formatted is not None:
                style[dimension] = resolve_length_unit(formatted, theme, viewport)

    logger.debug(f"Resolved {index} properties for platform '{platform}'")
    return style
