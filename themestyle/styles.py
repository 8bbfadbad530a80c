"""
Default design tokens.

This module defines the token groups (root metric, sizes, palette, shadows)
used to build the default theme when an application does not supply one.

License: MIT
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional, Tuple

from themestyle.config import DEFAULT_ROOT_METRIC
from themestyle.models import Theme


@dataclass
class RootMetrics:
    """Base pixel sizes."""
    rem: int = DEFAULT_ROOT_METRIC
    hairline: float = 0.5


@dataclass
class Sizes:
    """Named lengths, in CSS length syntax (base unit 8px = 1rem)."""
    xsmall: str = "0.25rem"
    small: str = "0.5rem"
    medium: str = "1rem"
    large: str = "2rem"
    xlarge: str = "3rem"

    # Specific use cases
    gutter: str = "2rem"
    radius: str = "0.5rem"
    radius_round: str = "100rem"
    border: str = "1px"
    font_body: str = "2rem"
    font_caption: str = "1.5rem"
    font_heading: str = "3rem"


@dataclass
class Palette:
    """Named colors as hex strings."""

    # Brand
    primary: str = "#6E6346"
    accent: str = "#2E4D37"

    # Text
    text: str = "#2B2B2B"
    text_muted: str = "#6A6A6A"

    # Surfaces
    background: str = "#FFFFFF"
    surface: str = "#F5F5F5"
    border: str = "#E5E5E5"

    # Feedback
    error: str = "#D1064F"
    warning: str = "#A26200"
    success: str = "#496D00"

    shadow: str = "#000000"


@dataclass
class Shadows:
    """Shadow parameters per elevation level (opacity, radius in px, y offset in px)."""
    levels: Dict[int, Tuple[float, float, float]] = field(default_factory=lambda: {
        0: (0.0, 0, 0),
        1: (0.18, 1, 1),
        2: (0.20, 2.5, 1),
        3: (0.22, 3, 2),
        4: (0.24, 4.5, 2),
        6: (0.27, 6, 3),
        8: (0.30, 8, 4),
        12: (0.34, 12, 6),
        16: (0.38, 16, 8),
        24: (0.44, 24, 12),
    })

    def for_level(self, level: float) -> Dict[str, Any]:
        """Shadow style for `level`, using the closest defined level below it."""
        defined = [step for step in sorted(self.levels) if step <= level]
        opacity, radius, offset = self.levels[defined[-1] if defined else 0]
        return {
            "shadowColor": palette.shadow,
            "shadowOpacity": opacity,
            "shadowRadius": f"{radius}px",
            "shadowOffset": {"width": 0, "height": offset},
        }


# Global token instances (singletons)
root_metrics = RootMetrics()
sizes = Sizes()
palette = Palette()
shadows = Shadows()


def default_theme(overrides: Optional[Dict[str, Any]] = None) -> Theme:
    """
    Build a Theme from the default tokens.

    Args:
        overrides: Optional mapping with `sizes` and/or `colors` entries merged
            over the defaults

    Returns:
        Theme with the default root metric and shadow elevation
    """
    overrides = overrides or {}
    return Theme(
        rem=overrides.get("rem", root_metrics.rem),
        sizes={**asdict(sizes), **overrides.get("sizes", {})},
        colors={**asdict(palette), **overrides.get("colors", {})},
        elevation=shadows.for_level,
    )
