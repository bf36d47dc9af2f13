#!/usr/bin/env python3
"""
Async CSS MCP Server using chuk-mcp-server

This server provides MCP tools for compiling themed style objects.
Style descriptions use shorthand aliases, theme scale keys and
responsive values; the tools return plain, flattened style objects.

The server provides tools for:
- Compiling style descriptions against a theme
- Expanding responsive values into media query groups
- Discovering library and project themes
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_css.server import THEMES_DIR_ENV
from chuk_mcp_css.themes import ThemeLoader
from chuk_mcp_css.tools import register_css_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-css")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
THEMES_DIR = Path(os.environ.get(THEMES_DIR_ENV, BASE_PATH / "themes"))
THEMES_LIBRARY_PATH = Path(__file__).parent / "themes" / "library"

theme_loader = ThemeLoader(
    library_path=THEMES_LIBRARY_PATH,
    project_path=THEMES_DIR,
)

# Register all tools
css_tools = register_css_tools(mcp, theme_loader)

# Export tool functions for direct access
css_compile = css_tools["css_compile"]
css_responsive = css_tools["css_responsive"]
css_list_themes = css_tools["css_list_themes"]
css_describe_theme = css_tools["css_describe_theme"]
css_copy_theme_to_project = css_tools["css_copy_theme_to_project"]

logger.info("CHUK CSS MCP Server initialized")
logger.info(f"  Theme library: {THEMES_LIBRARY_PATH}")
logger.info(f"  Project themes: {THEMES_DIR}")
