"""
Pydantic models for themes, viewports and service payloads.

The Theme flattens its size and color mappings into a single lookup table
when it is constructed, so resolving a variable is one dictionary access.

License: MIT
"""

from typing import Any, Callable, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from themestyle.config import DEFAULT_ROOT_METRIC
from themestyle.units import format_number, root_metric

ElevationFunction = Callable[[float], Optional[Dict[str, Any]]]


def flatten_tokens(*mappings: Dict[str, Any]) -> Dict[str, Any]:
    """
    Flatten token mappings depth-first into one name -> value table.

    Nested sub-mappings contribute their own keys; the first occurrence of a
    name wins. Empty values are skipped so a later definition can fill them.
    """
    table: Dict[str, Any] = {}

    def visit(mapping: Dict[str, Any]) -> None:
        for name, value in mapping.items():
            if isinstance(value, dict):
                visit(value)
            elif value is not None and value != "":
                table.setdefault(name, value)

    for mapping in mappings:
        visit(mapping)
    return table


class Viewport(BaseModel):
    """Window dimensions in pixels."""
    width: float = Field(..., ge=0, description="Viewport width")
    height: float = Field(..., ge=0, description="Viewport height")


class Theme(BaseModel):
    """
    Theme consumed by the resolver.

    Treated as read-only: the lookup table is built once, so a changed theme
    must be constructed anew.
    """
    model_config = ConfigDict(frozen=True)

    rem: float = Field(default=DEFAULT_ROOT_METRIC, ge=0, description="Root metric in pixels")
    sizes: Dict[str, Any] = Field(default_factory=dict, description="Named sizes, may nest")
    colors: Dict[str, Any] = Field(default_factory=dict, description="Named colors, may nest")
    elevation: Optional[ElevationFunction] = Field(
        default=None, description="Shadow style for an elevation level"
    )

    _lookup: Dict[str, Any] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context: Any) -> None:
        self._lookup = flatten_tokens(self.sizes, self.colors)

    def lookup(self, name: str) -> Optional[Any]:
        """Value of the variable `name` (without sigil), or None."""
        return self._lookup.get(name)


class Units(BaseModel):
    """Pixel values of relative units used inside calc()/min()/max()."""
    em: float = DEFAULT_ROOT_METRIC
    rem: float = DEFAULT_ROOT_METRIC
    vw: float = 0
    vh: float = 0
    vmin: float = 0
    vmax: float = 0
    width: float = Field(default=0, description="Parent width for percentages")
    height: float = Field(default=0, description="Parent height for percentages")

    @classmethod
    def from_viewport(cls, theme: Theme, viewport: Viewport, parent: Optional[Viewport] = None) -> "Units":
        """Derive unit sizes from a theme and viewport snapshot."""
        base = root_metric(theme)
        vw = viewport.width / 100
        vh = viewport.height / 100
        container = parent or viewport
        return cls(
            em=base,
            rem=base,
            vw=vw,
            vh=vh,
            vmin=min(vw, vh),
            vmax=max(vw, vh),
            width=container.width,
            height=container.height,
        )


class ThemePayload(BaseModel):
    """Serializable theme; elevation is given as a level -> shadow table."""
    rem: float = Field(default=DEFAULT_ROOT_METRIC, ge=0, description="Root metric in pixels")
    sizes: Dict[str, Any] = Field(default_factory=dict, description="Named sizes, may nest")
    colors: Dict[str, Any] = Field(default_factory=dict, description="Named colors, may nest")
    elevation: Dict[str, Dict[str, Any]] = Field(
        default_factory=dict, description="Shadow properties keyed by elevation level"
    )

    def to_theme(self) -> Theme:
        table = {key: dict(value) for key, value in self.elevation.items()}

        def elevation(level: float) -> Optional[Dict[str, Any]]:
            # JSON object keys are strings; 2 and 2.0 both select "2"
            key = format_number(level) if isinstance(level, (int, float)) else str(level)
            shadow = table.get(key)
            return dict(shadow) if shadow is not None else None

        return Theme(
            rem=self.rem,
            sizes=self.sizes,
            colors=self.colors,
            elevation=elevation if table else None,
        )


class PlaceholderRequest(BaseModel):
    """Variables to encode before a style source is compiled."""
    variables: List[str] = Field(..., min_length=1, description="Sigil-prefixed variable names")
    kind: Literal["color", "length"] = Field(default="color", description="Encoding discipline")
    fallback: Optional[str] = Field(default=None, description="Fallback value, if any")

    @field_validator('variables')
    @classmethod
    def validate_variables(cls, v):
        """Ensure every name carries the `$` sigil."""
        for name in v:
            if not name.startswith("$") or len(name) < 2:
                raise ValueError(f"variable name '{name}' must start with '$'")
        return v


class ResolveRequest(BaseModel):
    """Compiled style object plus the context to resolve it in."""
    style: Dict[str, Any] = Field(..., description="Compiled style object")
    theme: Optional[ThemePayload] = Field(default=None, description="Theme (default theme if omitted)")
    viewport: Viewport = Field(..., description="Window dimensions")
    parent: Optional[Viewport] = Field(default=None, description="Parent box for calc() percentages")
    platform: Optional[Literal["web", "ios", "android", "native"]] = Field(
        default=None, description="Render target (configured platform if omitted)"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "style": {
                    "color": "#00000100",
                    "width": "50vw",
                    "padding": "2rem",
                    "elevation": 2,
                },
                "theme": {
                    "rem": 8,
                    "colors": {"primary": "#2E4D37"},
                    "elevation": {"2": {"shadowOpacity": 0.3, "shadowRadius": "4px"}},
                },
                "viewport": {"width": 390, "height": 844},
                "platform": "ios",
            }
        }
    )
