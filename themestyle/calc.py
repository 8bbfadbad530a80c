"""
Evaluator for calc(), min() and max() length expressions.

Expressions are reduced to a pixel number using a Units snapshot. Any
expression that cannot be evaluated yields NaN, and the resolver then keeps
the raw value.

License: MIT
"""

import logging
import math
import re
from typing import Any, Callable, Dict, List, Tuple

from themestyle.attributes import VERTICAL_ATTRIBUTES

logger = logging.getLogger(__name__)

EXPRESSION_PREFIXES = ("calc", "max", "min")

# Unary signs, parentheses and function calls each add a level
MAX_NESTING = 100

TOKEN_PATTERN = re.compile(
    r"\s*(?:"
    r"(?P<number>(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)(?P<unit>%|[a-zA-Z]+)?"
    r"|(?P<function>calc|min|max)\s*\("
    r"|(?P<op>[-+*/(),])"
    r")"
)

_FUNCTIONS: Dict[str, Callable[[List[float]], float]] = {
    "min": min,
    "max": max,
}


class ExpressionError(ValueError):
    """Raised internally when an expression cannot be evaluated."""


def is_expression(value: Any) -> bool:
    """True for values starting with one of calc/max/min."""
    return str(value).startswith(EXPRESSION_PREFIXES)


def _unit_sizes(key: str, units) -> Dict[str, float]:
    percent_base = units.height if key in VERTICAL_ATTRIBUTES else units.width
    return {
        "px": 1,
        "rem": units.rem,
        "em": units.em,
        "vw": units.vw,
        "vh": units.vh,
        "vmin": units.vmin,
        "vmax": units.vmax,
        "%": percent_base / 100,
    }


def tokenize(text: str) -> List[Tuple[str, str, str]]:
    """Split an expression into (kind, text, unit) tokens."""
    tokens = []
    position = 0
    text = text.strip()
    while position < len(text):
        match = TOKEN_PATTERN.match(text, position)
        if not match or match.end() == position:
            raise ExpressionError(f"unexpected character at {position} in '{text}'")
        if match.group("number") is not None:
            tokens.append(("number", match.group("number"), match.group("unit") or ""))
        elif match.group("function") is not None:
            tokens.append(("function", match.group("function"), ""))
        else:
            tokens.append(("op", match.group("op"), ""))
        position = match.end()
    return tokens


class _Parser:
    """Recursive descent over the token list."""

    def __init__(self, tokens: List[Tuple[str, str, str]], sizes: Dict[str, float]):
        self.tokens = tokens
        self.sizes = sizes
        self.index = 0
        self.depth = 0

    def parse(self) -> float:
        value = self.expression()
        if self.index != len(self.tokens):
            raise ExpressionError(f"trailing token '{self.tokens[self.index][1]}'")
        return value

    def peek(self) -> Tuple[str, str, str]:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return ("end", "", "")

    def take(self, text: str) -> None:
        kind, token, _ = self.peek()
        if kind != "op" or token != text:
            raise ExpressionError(f"expected '{text}', found '{token or 'end of input'}'")
        self.index += 1

    def expression(self) -> float:
        value = self.term()
        while self.peek()[:2] in (("op", "+"), ("op", "-")):
            operator = self.peek()[1]
            self.index += 1
            right = self.term()
            value = value + right if operator == "+" else value - right
        return value

    def term(self) -> float:
        value = self.factor()
        while self.peek()[:2] in (("op", "*"), ("op", "/")):
            operator = self.peek()[1]
            self.index += 1
            right = self.factor()
            if operator == "*":
                value *= right
            elif right == 0:
                raise ExpressionError("division by zero")
            else:
                value /= right
        return value

    def factor(self) -> float:
        if self.depth >= MAX_NESTING:
            raise ExpressionError(f"nesting deeper than {MAX_NESTING} levels")
        self.depth += 1
        try:
            return self._factor()
        finally:
            self.depth -= 1

    def _factor(self) -> float:
        kind, token, unit = self.peek()

        if kind == "op" and token in "+-":
            self.index += 1
            value = self.factor()
            return -value if token == "-" else value

        if kind == "number":
            self.index += 1
            if not unit:
                return float(token)
            if unit not in self.sizes:
                raise ExpressionError(f"unknown unit '{unit}'")
            return float(token) * self.sizes[unit]

        if kind == "function":
            self.index += 1
            arguments = [self.expression()]
            while self.peek()[:2] == ("op", ","):
                self.index += 1
                arguments.append(self.expression())
            self.take(")")
            if token == "calc":
                if len(arguments) != 1:
                    raise ExpressionError("calc() takes a single expression")
                return arguments[0]
            return _FUNCTIONS[token](arguments)

        if kind == "op" and token == "(":
            self.index += 1
            value = self.expression()
            self.take(")")
            return value

        raise ExpressionError(f"unexpected token '{token or 'end of input'}'")


def convert_value(key: str, value: Any, units) -> float:
    """
    Evaluate a calc()/min()/max() length expression.

    Args:
        key: Style property the value belongs to (selects the % base)
        value: Raw expression, e.g. "calc(100% - 2rem)"
        units: Units snapshot with the pixel size of each relative unit

    Returns:
        Pixel value, or NaN if the expression cannot be evaluated
    """
    if not isinstance(value, str):
        return math.nan
    try:
        result = _Parser(tokenize(value), _unit_sizes(key, units)).parse()
    except ExpressionError as e:
        logger.debug(f"Could not evaluate {key}: '{value}': {e}")
        return math.nan
    if not math.isfinite(result):
        logger.debug(f"Expression for {key} overflowed: '{value}'")
        return math.nan
    return result
