"""
MCP tool implementations.

- css - Style compilation, responsive expansion and theme discovery
"""

from chuk_mcp_css.tools.css import register_css_tools

__all__ = ["register_css_tools"]
