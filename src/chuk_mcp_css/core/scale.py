"""
Scale resolution - turn style values into theme scale entries.

Most properties are a plain lookup into their scale. Margins and
positions are sign-aware: -2 resolves to the negation of space[2].
"""

from __future__ import annotations

from collections.abc import Callable
from types import MappingProxyType
from typing import Any

from chuk_mcp_css.constants import SIGNED_PROPERTIES
from chuk_mcp_css.core.lookup import get

Transform = Callable[[Any, Any, Any], Any]


def is_number(value: Any) -> bool:
    """True for ints and floats; bools are not numbers here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def positive_or_negative(scale: Any, value: Any, default: Any = None) -> Any:
    """
    Resolve a value against a scale, keeping its sign.

    Non-negative numbers and non-numbers are a direct lookup that falls
    back to the value itself. For a negative number the absolute value
    is looked up and the result negated: numeric entries are multiplied
    by -1, string entries get a leading "-".

    Args:
        scale: Sequence or mapping of scale values
        value: Raw style value
        default: Unused, accepted so the signature matches get()

    Returns:
        The resolved value
    """
    if not is_number(value) or value >= 0:
        return get(scale, value, value)

    absolute = abs(value)
    n = get(scale, absolute, absolute)
    if isinstance(n, str):
        return "-" + n
    if is_number(n):
        return -n
    return n


# Canonical property -> custom transform; everything else uses get()
TRANSFORMS: MappingProxyType[str, Transform] = MappingProxyType(
    {prop: positive_or_negative for prop in SIGNED_PROPERTIES}
)


def transform_for(prop: str) -> Transform:
    """Get the value transform for a canonical property."""
    return TRANSFORMS.get(prop, get)
