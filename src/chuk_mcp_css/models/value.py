"""
Style value classification.

A style value is decided once into one of a small set of kinds, and
every stage of the pipeline branches on that kind instead of probing
the value's type again.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any


class ValueKind(str, Enum):
    """Shape of a style value."""

    EMPTY = "empty"  # None - skipped
    FUNCTION = "function"  # Called with the theme
    SEQUENCE = "sequence"  # Responsive list
    MAPPING = "mapping"  # Responsive map or nested style
    PRIMITIVE = "primitive"  # Number, string, bool


def classify(value: Any) -> ValueKind:
    """Classify a style value."""
    if value is None:
        return ValueKind.EMPTY
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return ValueKind.SEQUENCE
    if callable(value):
        return ValueKind.FUNCTION
    return ValueKind.PRIMITIVE
