"""
Path lookup - safe nested reads with a default.

get(theme, "colors.primary") walks one dotted segment at a time and
falls back to the default instead of raising. Mapping keys behave like
object property names: 2 and "2" address the same entry.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

_MISSING: Any = object()

_INT_KEY = re.compile(r"-?(0|[1-9][0-9]*)")


def format_number(value: int | float) -> str:
    """Render a number the way it appears as a property name ("2", not "2.0")."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _as_index(segment: Any) -> int | None:
    """Interpret a segment as a list index, or None if it cannot be one."""
    if isinstance(segment, bool):
        return None
    if isinstance(segment, int):
        return segment
    if isinstance(segment, float) and segment.is_integer():
        return int(segment)
    if isinstance(segment, str) and _INT_KEY.fullmatch(segment):
        return int(segment)
    return None


def _twin_key(segment: Any) -> Any:
    """The alternate spelling of a mapping key (2 <-> "2")."""
    if isinstance(segment, bool):
        return _MISSING
    if isinstance(segment, (int, float)):
        return format_number(segment)
    if isinstance(segment, str) and _INT_KEY.fullmatch(segment):
        return int(segment)
    return _MISSING


def _step(container: Any, segment: Any) -> Any:
    """Apply a single path segment to a container."""
    if isinstance(container, Mapping):
        for candidate in (segment, _twin_key(segment)):
            if candidate is _MISSING:
                continue
            try:
                if candidate in container:
                    return container[candidate]
            except TypeError:
                # Unhashable keys never match
                return _MISSING
        return _MISSING

    if isinstance(container, Sequence) and not isinstance(container, (str, bytes)):
        index = _as_index(segment)
        if index is not None and 0 <= index < len(container):
            return container[index]
        return _MISSING

    return _MISSING


def get(obj: Any, key: Any, default: Any = None) -> Any:
    """
    Read a (possibly dotted) key from a nested container.

    Traversal stops as soon as an intermediate value is falsy, so
    get({"a": 0}, "a.b", "x") is "x". Only a genuinely missing value
    maps to the default; a stored None, 0 or False is returned as-is.

    Args:
        obj: Mapping or sequence to read from
        key: Dotted path string, or a single key/index of any type
        default: Value returned when the path does not resolve

    Returns:
        The resolved value, or default
    """
    path = key.split(".") if isinstance(key, str) else [key]
    for segment in path:
        obj = _step(obj, segment) if obj is not _MISSING and obj else _MISSING
    return default if obj is _MISSING else obj
