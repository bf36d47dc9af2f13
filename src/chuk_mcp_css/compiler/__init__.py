"""
Style compilation pipeline.

- responsive: Breakpoint expansion of list and mapping values
- css: Alias, scale and direction resolution over a merged theme
"""

from chuk_mcp_css.compiler.css import NestingDepthError, StyleCompiler, css, merge_theme
from chuk_mcp_css.compiler.responsive import MediaQueries, media_query, responsive

__all__ = [
    "MediaQueries",
    "NestingDepthError",
    "StyleCompiler",
    "css",
    "media_query",
    "merge_theme",
    "responsive",
]
