"""
Responsive expansion - bucket breakpoint-indexed values by media query.

    responsive({"fontSize": [14, 16]})(theme)
    -> {"fontSize": 14, "@media screen and (min-width: 40em)": {"fontSize": 16}}

This is a single-level pass; nested style objects are left for the
compiler to recurse into.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from chuk_mcp_css.constants import BASE_KEY, DEFAULT_BREAKPOINTS, MEDIA_QUERY_TEMPLATE
from chuk_mcp_css.core.lookup import format_number, get
from chuk_mcp_css.core.scale import is_number
from chuk_mcp_css.models.value import ValueKind, classify


def media_query(size: Any) -> str:
    """Build the media query for a breakpoint size token."""
    token = format_number(size) if is_number(size) else size
    return MEDIA_QUERY_TEMPLATE.format(size=token)


@dataclass(frozen=True)
class MediaQueries:
    """
    Breakpoint lookup built from a theme.

    List breakpoints address media queries by position (index 0 is the
    base slot with no query) and also by their own size token. Mapping
    breakpoints address them by name.
    """

    positional: tuple[str | None, ...]
    named: Mapping[str, str]

    @classmethod
    def from_breakpoints(cls, breakpoints: Any) -> MediaQueries:
        """Create the lookup for a list or mapping of breakpoints."""
        kind = classify(breakpoints)
        if kind == ValueKind.SEQUENCE:
            queries = [media_query(size) for size in breakpoints]
            named = {_key(size): query for size, query in zip(breakpoints, queries)}
            return cls(positional=(None, *queries), named=named)
        if kind == ValueKind.MAPPING:
            named = {_key(name): media_query(size) for name, size in breakpoints.items()}
            return cls(positional=(), named=named)
        return cls(positional=(), named={})

    @property
    def is_positional(self) -> bool:
        return bool(self.positional)

    def for_index(self, index: int) -> str | None:
        """Media query for a position in a responsive list."""
        if self.is_positional:
            return self.positional[index] if index < len(self.positional) else None
        return self.named.get(str(index))

    def for_key(self, key: Any) -> str | None:
        """Media query for a key in a responsive mapping."""
        if self.is_positional:
            media = get(self.positional, key, None)
            if media is not None:
                return media
        return self.named.get(_key(key))


def _key(value: Any) -> str:
    """Normalise a breakpoint name or token to its string form."""
    if is_number(value):
        return format_number(value)
    return str(value)


def _bucket(result: dict[str, Any], media: str) -> dict[str, Any]:
    bucket = result.get(media)
    if not isinstance(bucket, dict):
        bucket = result[media] = {}
    return bucket


def expand_responsive(styles: Any, theme: Any) -> dict[str, Any]:
    """
    Expand responsive values in a style description.

    Args:
        styles: Style description (mapping); anything else expands to {}
        theme: Theme whose "breakpoints" entry defines the media queries

    Returns:
        New style mapping with responsive values split into base values
        and media query buckets
    """
    result: dict[str, Any] = {}
    if classify(styles) != ValueKind.MAPPING:
        return result

    media_queries = MediaQueries.from_breakpoints(
        get(theme, "breakpoints", DEFAULT_BREAKPOINTS)
    )

    for key, value in styles.items():
        kind = classify(value)

        if kind == ValueKind.EMPTY:
            continue

        if kind == ValueKind.SEQUENCE:
            for i, item in enumerate(value):
                if item is None:
                    continue
                media = media_queries.for_index(i)
                if not media:
                    result[key] = item
                    continue
                _bucket(result, media)[key] = item
            continue

        if kind == ValueKind.MAPPING:
            for k, item in value.items():
                if item is None or k == BASE_KEY:
                    continue
                media = media_queries.for_key(k)
                if not media:
                    # Unknown breakpoint name: the whole mapping is kept as the value
                    result[key] = value
                    continue
                _bucket(result, media)[key] = item
            base = value.get(BASE_KEY)
            if base is not None:
                result[key] = base
            continue

        result[key] = value

    return result


def responsive(styles: Any) -> Callable[[Any], dict[str, Any]]:
    """
    Curried responsive expansion: responsive(styles)(theme).

    Args:
        styles: Style description with list or mapping responsive values

    Returns:
        Function taking a theme and returning the expanded description
    """

    def expand(theme: Any = None) -> dict[str, Any]:
        return expand_responsive(styles, theme)

    return expand
