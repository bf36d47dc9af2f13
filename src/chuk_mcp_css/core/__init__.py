"""
Core lookup primitives.

These are the leaf utilities everything else composes on:
- get: Safe dotted-path lookup with a default
- positive_or_negative: Sign-aware scale resolution
- TRANSFORMS: Per-property value transforms
"""

from chuk_mcp_css.core.lookup import get
from chuk_mcp_css.core.scale import TRANSFORMS, is_number, positive_or_negative, transform_for

__all__ = [
    "get",
    "is_number",
    "positive_or_negative",
    "transform_for",
    "TRANSFORMS",
]
