"""themestyle: resolve theme variables and relative lengths in compiled style objects."""

from themestyle.dimensions import format_value
from themestyle.errors import (
    ContractViolation,
    MalformedLength,
    StyleResolutionError,
    UndefinedVariable,
    UnknownUnit,
)
from themestyle.models import Theme, Units, Viewport
from themestyle.registry import (
    VariableRegistry,
    default_registry,
    resolve_color_variable,
    resolve_length_variable,
)
from themestyle.resolver import resolve_theme_variables
from themestyle.styles import default_theme
from themestyle.units import resolve_length_unit

__all__ = [
    "ContractViolation",
    "MalformedLength",
    "StyleResolutionError",
    "Theme",
    "UndefinedVariable",
    "UnknownUnit",
    "Units",
    "VariableRegistry",
    "Viewport",
    "default_registry",
    "default_theme",
    "format_value",
    "resolve_color_variable",
    "resolve_length_unit",
    "resolve_length_variable",
    "resolve_theme_variables",
]
