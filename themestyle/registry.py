"""
Theme variable registry and placeholder encoders.

A strict style value parser rejects references such as `$primary`, so every
variable is swapped for a stand-in literal the parser accepts: a transparent
8-digit hex color for color variables, and a pixel literal for length
variables. The registry remembers both directions so the resolver can map a
compiled placeholder back to its variable name at render time.

Callers must use one discipline per variable name. Once a name is bound, both
encoders return the placeholder it was first given.

License: MIT
"""

import itertools
import logging
import random
import threading
from typing import Callable, Dict, Optional

logger = logging.getLogger(__name__)

VARIABLE_SIGIL = "$"
LENGTH_SUFFIX = "px"

# Upper bound for the random start of the default length token sequence
_TOKEN_OFFSET_RANGE = 10 ** 9

# Fresh tokens requested from a factory before allocation gives up
_MAX_TOKEN_ATTEMPTS = 1000


def hash_generate(seed: Optional[int] = None) -> Callable[[], str]:
    """
    Build an opaque length token generator.

    Tokens are integer pixel literals ("734519283px") so a strict parser
    reduces them to plain numbers. The sequence starts at a random offset and
    advances by one on every call, so a generator never repeats itself.

    Args:
        seed: Start of the sequence (random when omitted)

    Returns:
        Zero-argument callable producing a fresh token on each call
    """
    start = seed if seed is not None else random.randrange(10 ** 6, _TOKEN_OFFSET_RANGE)
    counter = itertools.count(start)

    def generate() -> str:
        return f"{next(counter)}{LENGTH_SUFFIX}"

    return generate


def _strip_sigil(variable_name: str) -> str:
    return variable_name[1:] if variable_name.startswith(VARIABLE_SIGIL) else variable_name


class VariableRegistry:
    """
    Bidirectional variable name <-> placeholder map.

    Allocation is guarded by a lock, so two threads resolving the same unseen
    name always observe a single placeholder.
    """

    def __init__(self, token_factory: Optional[Callable[[], str]] = None):
        self._token_factory = token_factory or hash_generate()
        self._lock = threading.Lock()
        self._placeholder_for_name: Dict[str, str] = {}
        self._name_for_placeholder: Dict[str, str] = {}
        self._color_id = 1

    def __len__(self) -> int:
        return len(self._placeholder_for_name)

    def __contains__(self, variable_name: object) -> bool:
        return variable_name in self._placeholder_for_name

    def resolve_length_placeholder(self, variable_name: str, fallback: Optional[str] = None) -> str:
        """Return the pixel-literal placeholder for a length variable."""
        placeholder = self._resolve(variable_name, self._next_length_token, "length")
        return _with_fallback(placeholder, fallback)

    def resolve_color_placeholder(self, variable_name: str, fallback: Optional[str] = None) -> str:
        """Return the transparent hex placeholder for a color variable."""
        placeholder = self._resolve(variable_name, self._next_color_token, "color")
        return _with_fallback(placeholder, fallback)

    def placeholder_for(self, variable_name: str) -> Optional[str]:
        return self._placeholder_for_name.get(variable_name)

    def name_for(self, placeholder: object) -> Optional[str]:
        """
        Reverse lookup of a compiled placeholder.

        Returns the variable name without its sigil, or None if `placeholder`
        was never handed out (including any non-string value).
        """
        if not isinstance(placeholder, str):
            return None
        return self._name_for_placeholder.get(placeholder)

    def reset(self) -> None:
        """Forget every binding and restart the color sequence."""
        with self._lock:
            self._placeholder_for_name.clear()
            self._name_for_placeholder.clear()
            self._color_id = 1
        logger.debug("Variable registry reset")

    def _resolve(self, variable_name: str, allocate: Callable[[], str], kind: str) -> str:
        if not isinstance(variable_name, str) or not variable_name:
            raise ValueError(f"variable name must be a non-empty string, got {variable_name!r}")

        existing = self._placeholder_for_name.get(variable_name)
        if existing is not None:
            return existing

        with self._lock:
            # Another thread may have bound the name while we waited
            existing = self._placeholder_for_name.get(variable_name)
            if existing is not None:
                return existing

            placeholder = allocate()
            self._placeholder_for_name[variable_name] = placeholder
            self._name_for_placeholder[placeholder] = _strip_sigil(variable_name)

        logger.debug(f"Registered {kind} variable {variable_name} as {placeholder}")
        return placeholder

    def _next_color_token(self) -> str:
        while True:
            token = f"#{self._color_id:06X}00"
            self._color_id += 1
            if token not in self._name_for_placeholder:
                return token

    def _next_length_token(self) -> str:
        for _ in range(_MAX_TOKEN_ATTEMPTS):
            token = self._token_factory()
            if token not in self._name_for_placeholder:
                return token
            logger.debug(f"Discarded length token {token}, already bound")
        raise ValueError(
            f"token factory {self._token_factory!r} returned only bound tokens "
            f"in {_MAX_TOKEN_ATTEMPTS} attempts"
        )


def _with_fallback(placeholder: str, fallback: Optional[str]) -> str:
    # The fallback value itself is not carried; the placeholder stands in twice
    if fallback:
        return f"{placeholder} {placeholder}"
    return placeholder


# Shared registry for callers that do not manage their own
default_registry = VariableRegistry()


def resolve_length_variable(variable_name: str, fallback: Optional[str] = None) -> str:
    return default_registry.resolve_length_placeholder(variable_name, fallback)


def resolve_color_variable(variable_name: str, fallback: Optional[str] = None) -> str:
    return default_registry.resolve_color_placeholder(variable_name, fallback)
