"""
Theme-aware style object compiler.

    from chuk_mcp_css import css

    css({"mx": 2, "fontSize": [1, 2]})({"theme": theme})

Shorthand aliases are expanded, values are resolved against theme
scales, and responsive values are grouped under media queries.
"""

from chuk_mcp_css.compiler import NestingDepthError, css, responsive
from chuk_mcp_css.core import get, positive_or_negative
from chuk_mcp_css.themes import ThemeLoader

__all__ = [
    "NestingDepthError",
    "ThemeLoader",
    "css",
    "get",
    "positive_or_negative",
    "responsive",
]
