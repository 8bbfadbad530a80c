"""
Classification of style property names.

The resolver only touches properties listed here: colors are looked up in the
placeholder registry, lengths additionally go through the unit converter.

License: MIT
"""

from typing import FrozenSet

ELEVATION_KEY = "elevation"
CURSOR_KEY = "cursor"

MARGIN_KEYS = ("marginLeft", "marginRight", "marginTop", "marginBottom")

COLOR_ATTRIBUTES: FrozenSet[str] = frozenset({
    "color",
    "backgroundColor",
    "borderColor",
    "borderTopColor",
    "borderRightColor",
    "borderBottomColor",
    "borderLeftColor",
    "borderStartColor",
    "borderEndColor",
    "borderBlockColor",
    "borderBlockStartColor",
    "borderBlockEndColor",
    "shadowColor",
    "textShadowColor",
    "textDecorationColor",
    "tintColor",
    "overlayColor",
    "outlineColor",
    "placeholderTextColor",
    "selectionColor",
    "underlineColorAndroid",
})

LENGTH_ATTRIBUTES: FrozenSet[str] = frozenset({
    # Box
    "width",
    "height",
    "minWidth",
    "maxWidth",
    "minHeight",
    "maxHeight",
    "flexBasis",

    # Position
    "top",
    "right",
    "bottom",
    "left",
    "start",
    "end",

    # Margin
    "margin",
    "marginTop",
    "marginRight",
    "marginBottom",
    "marginLeft",
    "marginStart",
    "marginEnd",
    "marginHorizontal",
    "marginVertical",

    # Padding
    "padding",
    "paddingTop",
    "paddingRight",
    "paddingBottom",
    "paddingLeft",
    "paddingStart",
    "paddingEnd",
    "paddingHorizontal",
    "paddingVertical",

    # Border
    "borderWidth",
    "borderTopWidth",
    "borderRightWidth",
    "borderBottomWidth",
    "borderLeftWidth",
    "borderStartWidth",
    "borderEndWidth",
    "borderRadius",
    "borderTopLeftRadius",
    "borderTopRightRadius",
    "borderBottomLeftRadius",
    "borderBottomRightRadius",
    "outlineWidth",
    "outlineOffset",

    # Gaps
    "gap",
    "rowGap",
    "columnGap",

    # Text
    "fontSize",
    "lineHeight",
    "letterSpacing",

    # Shadows
    "shadowRadius",
    "textShadowRadius",
})

# Properties measured along the vertical axis; percentages inside calc()
# expressions resolve against the parent height for these.
VERTICAL_ATTRIBUTES: FrozenSet[str] = frozenset({
    "height",
    "minHeight",
    "maxHeight",
    "top",
    "bottom",
    "marginTop",
    "marginBottom",
    "marginVertical",
    "paddingTop",
    "paddingBottom",
    "paddingVertical",
})
