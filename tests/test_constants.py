"""
Tests for the static lookup tables.

Tests cover:
- Exact contents of the alias, direction and scale tables
- Default theme and breakpoints
- Read-only tables
"""

import pytest

from chuk_mcp_css.constants import (
    ALIASES,
    DEFAULT_BREAKPOINTS,
    DEFAULT_THEME,
    DIRECTIONS,
    SCALES,
    SIGNED_PROPERTIES,
)


class TestTables:
    """Tests for the alias, direction, scale and default tables."""

    def test_aliases(self):
        """Every shorthand maps to its canonical property."""
        assert dict(ALIASES) == {
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

    def test_directions(self):
        """Axis properties expand to their two sides."""
        assert dict(DIRECTIONS) == {
            "marginX": ("marginLeft", "marginRight"),
            "marginY": ("marginTop", "marginBottom"),
            "paddingX": ("paddingLeft", "paddingRight"),
            "paddingY": ("paddingTop", "paddingBottom"),
        }

    def test_scales(self):
        """Every property draws from the expected theme scale."""
        assert dict(SCALES) == {
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
        assert len(SCALES) == 50

    def test_signed_properties(self):
        """Margins and positions are the sign-aware properties."""
        assert set(SIGNED_PROPERTIES) == {
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
        }

    def test_default_theme(self):
        """The default theme carries the space and font size scales."""
        assert {key: list(value) for key, value in DEFAULT_THEME.items()} == {
            "space": [0, 4, 8, 16, 32, 64, 128, 256, 512],
            "fontSizes": [12, 14, 16, 20, 24, 32, 48, 64, 72],
        }

    def test_default_breakpoints(self):
        """The default breakpoints are 40em, 52em and 64em."""
        assert DEFAULT_BREAKPOINTS == ("40em", "52em", "64em")

    @pytest.mark.parametrize("table", [ALIASES, DIRECTIONS, SCALES, DEFAULT_THEME])
    def test_mappings_read_only(self, table):
        """Table mappings reject item assignment."""
        with pytest.raises(TypeError):
            table["extra"] = "value"

    @pytest.mark.parametrize(
        "sequence",
        [SIGNED_PROPERTIES, DEFAULT_BREAKPOINTS, DEFAULT_THEME["space"], DIRECTIONS["marginX"]],
    )
    def test_sequences_read_only(self, sequence):
        """Table sequences reject item assignment."""
        with pytest.raises(TypeError):
            sequence[0] = "value"
