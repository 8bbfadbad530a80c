"""
Exceptions raised while resolving theme variables and length units.

Every failure aborts the current resolution pass. A style object whose
resolution raised must be treated as entirely unresolved.

License: MIT
"""

from typing import Any


class StyleResolutionError(Exception):
    """Base class for all resolution failures."""


class ContractViolation(StyleResolutionError, TypeError):
    """A value of an unsupported type was handed to the unit converter."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"expected {value!r} to be a string")


class UnknownUnit(StyleResolutionError, ValueError):
    """A length string carries a unit the converter does not know."""

    def __init__(self, unit: str, value: str):
        self.unit = unit
        self.value = value
        super().__init__(f"cannot parse length string '{value}', unknown unit '{unit}'")


class MalformedLength(StyleResolutionError, ValueError):
    """A length string has no unit, cannot be parsed, or is out of range."""

    def __init__(self, value: Any, reason: str = "contains no unit"):
        self.value = value
        super().__init__(f"length string '{value}' {reason}")


class UndefinedVariable(StyleResolutionError, LookupError):
    """A registered theme variable is missing from the theme."""

    def __init__(self, name: str, kind: str = "variable"):
        self.name = name
        self.kind = kind
        super().__init__(f"the {kind} '${name}' has not been defined in the theme.")
