"""
Theme library - named design token registries.

Themes are plain scale mappings (space, colors, fontSizes, ...) plus
breakpoints and variant styles, shipped as YAML documents.
"""

from chuk_mcp_css.themes.loader import ThemeLoader

__all__ = ["ThemeLoader"]
