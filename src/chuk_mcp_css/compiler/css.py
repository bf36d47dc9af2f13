"""
Style compiler - turns themed style descriptions into plain style objects.

    css({"mx": 2, "color": "primary"})({"theme": theme})
    -> {"marginLeft": 8, "marginRight": 8, "color": "#07c"}

Per key the compiler resolves the alias, picks the property's scale,
applies the property's transform and fans axis shorthands out to
their sides. Nested objects and variants are compiled recursively.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from chuk_mcp_css.compiler.responsive import expand_responsive
from chuk_mcp_css.constants import (
    ALIASES,
    DEFAULT_THEME,
    DIRECTIONS,
    MAX_NESTING_DEPTH,
    SCALES,
    VARIANT_KEY,
    ErrorMessages,
)
from chuk_mcp_css.core.lookup import get
from chuk_mcp_css.core.scale import transform_for
from chuk_mcp_css.models.value import ValueKind, classify

logger = logging.getLogger(__name__)


class NestingDepthError(RecursionError):
    """Raised when nested styles or variants exceed the maximum depth."""

    def __init__(self, max_depth: int):
        super().__init__(ErrorMessages.NESTING_TOO_DEEP.format(max_depth=max_depth))
        self.max_depth = max_depth


def merge_theme(props: Any = None) -> dict[str, Any]:
    """
    Merge the default theme with the theme carried by props.

    props may hold the theme under a "theme" key (even an empty one)
    or be the theme itself.
    The merge is shallow: supplied top-level scales replace the defaults.
    """
    theme: Any = {}
    if isinstance(props, Mapping):
        nested = props.get("theme")
        theme = nested if isinstance(nested, Mapping) else props
    merged = dict(DEFAULT_THEME)
    if isinstance(theme, Mapping):
        merged.update(theme)
    return merged


class StyleCompiler:
    """
    Compiles style descriptions against a merged theme.

    One compiler is created per css(...)(props) call; it holds the
    theme and the depth limit for that call only.
    """

    def __init__(self, theme: dict[str, Any], max_depth: int = MAX_NESTING_DEPTH):
        """
        Initialize the compiler.

        Args:
            theme: Fully merged theme
            max_depth: Maximum nesting of objects and variants
        """
        self.theme = theme
        self.max_depth = max_depth

    def compile(self, description: Any, depth: int = 0) -> dict[str, Any]:
        """
        Compile one style description.

        Args:
            description: Style mapping, or a function of the theme returning one
            depth: Current nesting depth

        Returns:
            Flattened style object
        """
        if depth > self.max_depth:
            raise NestingDepthError(self.max_depth)

        if classify(description) == ValueKind.FUNCTION:
            description = description(self.theme)

        styles = expand_responsive(description, self.theme)
        result: dict[str, Any] = {}

        for key, raw in styles.items():
            prop = get(ALIASES, key, key)
            scale_name = get(SCALES, prop)
            scale = get(self.theme, scale_name, get(self.theme, prop, {}))
            value = raw(self.theme) if classify(raw) == ValueKind.FUNCTION else raw

            if key == VARIANT_KEY:
                variant = get(self.theme, value)
                if variant is None:
                    logger.debug("Variant %r not found in theme", value)
                result.update(self.compile(variant, depth + 1))
                continue

            if classify(value) == ValueKind.MAPPING:
                result[prop] = self.compile(value, depth + 1)
                continue

            resolved = transform_for(prop)(scale, value, value)

            sides = DIRECTIONS.get(prop)
            if sides:
                for side in sides:
                    result[side] = resolved
            else:
                result[prop] = resolved

        return result


def css(
    args: Any = None, *, max_depth: int = MAX_NESTING_DEPTH
) -> Callable[[Any], dict[str, Any]]:
    """
    Curried style compiler: css(styles)(props).

    Args:
        args: Style description, or a function taking the theme and
            returning one
        max_depth: Maximum nesting of objects and variants

    Returns:
        Function taking props (a theme, or a mapping with a "theme" key)
        and returning the compiled style object

    Raises:
        NestingDepthError: From the returned function, when the
            description nests deeper than max_depth
    """

    def compile_styles(props: Any = None) -> dict[str, Any]:
        compiler = StyleCompiler(merge_theme(props), max_depth=max_depth)
        return compiler.compile(args)

    return compile_styles
