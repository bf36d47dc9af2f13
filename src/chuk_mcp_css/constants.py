"""
Constants and lookup tables for the style compiler.

No magic strings - every alias, scale and direction lives here.
The tables are read-only mappings built once at import time.
"""

from types import MappingProxyType
from typing import Any, Literal

# Default breakpoints when the theme supplies none
DEFAULT_BREAKPOINTS: tuple[str, ...] = tuple(f"{n}em" for n in (40, 52, 64))

# Fallback theme merged under every user theme
DEFAULT_THEME: MappingProxyType[str, Any] = MappingProxyType(
    {
        "space": (0, 4, 8, 16, 32, 64, 128, 256, 512),
        "fontSizes": (12, 14, 16, 20, 24, 32, 48, 64, 72),
    }
)

MEDIA_QUERY_TEMPLATE = "@media screen and (min-width: {size})"

# Key in a responsive mapping that carries the unconditional value
BASE_KEY = "_"

# Style key whose value is a theme path to another style description
VARIANT_KEY = "variant"

# Nested objects and variants deeper than this are rejected
MAX_NESTING_DEPTH = 32

# Shorthand property -> canonical property
ALIASES: MappingProxyType[str, str] = MappingProxyType(
    {
        "bg": "backgroundColor",
        "m": "margin",
        "mt": "marginTop",
        "mr": "marginRight",
        "mb": "marginBottom",
        "ml": "marginLeft",
        "mx": "marginX",
        "my": "marginY",
        "p": "padding",
        "pt": "paddingTop",
        "pr": "paddingRight",
        "pb": "paddingBottom",
        "pl": "paddingLeft",
        "px": "paddingX",
        "py": "paddingY",
    }
)

# Axis property -> the per-side properties it expands to
DIRECTIONS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        "marginX": ("marginLeft", "marginRight"),
        "marginY": ("marginTop", "marginBottom"),
        "paddingX": ("paddingLeft", "paddingRight"),
        "paddingY": ("paddingTop", "paddingBottom"),
    }
)

# Canonical property -> theme scale it draws values from
SCALES: MappingProxyType[str, str] = MappingProxyType(
    {
        "color": "colors",
        "backgroundColor": "colors",
        "borderColor": "colors",
        "margin": "space",
        "marginTop": "space",
        "marginRight": "space",
        "marginBottom": "space",
        "marginLeft": "space",
        "marginX": "space",
        "marginY": "space",
        "padding": "space",
        "paddingTop": "space",
        "paddingRight": "space",
        "paddingBottom": "space",
        "paddingLeft": "space",
        "paddingX": "space",
        "paddingY": "space",
        "top": "space",
        "right": "space",
        "bottom": "space",
        "left": "space",
        "gridGap": "space",
        "gridColumnGap": "space",
        "gridRowGap": "space",
        "fontFamily": "fonts",
        "fontSize": "fontSizes",
        "fontWeight": "fontWeights",
        "lineHeight": "lineHeights",
        "letterSpacing": "letterSpacings",
        "border": "borders",
        "borderTop": "borders",
        "borderRight": "borders",
        "borderBottom": "borders",
        "borderLeft": "borders",
        "borderWidth": "borderWidths",
        "borderStyle": "borderStyles",
        "borderRadius": "radii",
        "borderTopRightRadius": "radii",
        "borderTopLeftRadius": "radii",
        "borderBottomRightRadius": "radii",
        "borderBottomLeftRadius": "radii",
        "boxShadow": "shadows",
        "textShadow": "shadows",
        "zIndex": "zIndices",
        "width": "sizes",
        "minWidth": "sizes",
        "maxWidth": "sizes",
        "height": "sizes",
        "minHeight": "sizes",
        "maxHeight": "sizes",
    }
)

# Properties resolved with sign-aware scale lookup (negative margins etc.)
SIGNED_PROPERTIES: tuple[str, ...] = (
    "margin",
    "marginTop",
    "marginRight",
    "marginBottom",
    "marginLeft",
    "marginX",
    "marginY",
    "top",
    "bottom",
    "left",
    "right",
)

# Schema versions - frozen for v1
SchemaVersion = Literal["theme/v1"]


class ErrorMessages:
    """Standardized error messages."""

    NESTING_TOO_DEEP = "Style nesting exceeds the maximum depth of {max_depth}."
    THEME_NOT_FOUND = "Theme '{name}' not found."
    THEME_EXISTS = "Theme already exists in project: {name}"
    NO_PROJECT_PATH = "No project path configured"
    STYLES_NOT_OBJECT = "Styles must be a JSON object, got {kind}."
