"""
Models for the style compiler.

This module provides:
- ValueKind: Shape of a style value, decided once per value
- ThemeDocument: Named theme loaded from YAML
- ThemeMetadata: Listing summary of a theme
"""

from chuk_mcp_css.models.theme import ThemeDocument, ThemeMetadata
from chuk_mcp_css.models.value import ValueKind, classify

__all__ = [
    "ThemeDocument",
    "ThemeMetadata",
    "ValueKind",
    "classify",
]
