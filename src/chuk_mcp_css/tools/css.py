"""
CSS tools - MCP tools for compiling themed style objects.

Tools for compiling style descriptions, expanding responsive values,
and discovering the themes they can be compiled against.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_css.compiler import css, merge_theme, responsive
from chuk_mcp_css.constants import ErrorMessages
from chuk_mcp_css.themes import ThemeLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _as_object(value: dict[str, Any] | str | None) -> dict[str, Any]:
    """Accept a JSON object either already decoded or as a string."""
    if value is None:
        return {}
    if isinstance(value, str):
        value = json.loads(value)
    if not isinstance(value, dict):
        raise ValueError(ErrorMessages.STYLES_NOT_OBJECT.format(kind=type(value).__name__))
    return value


def register_css_tools(
    mcp: ChukMCPServer,
    theme_loader: ThemeLoader,
) -> dict[str, Any]:
    """
    Register style compilation tools with the MCP server.

    Args:
        mcp: The MCP server instance
        theme_loader: The theme loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    def resolve_theme(
        theme_name: str | None, overrides: dict[str, Any] | str | None
    ) -> dict[str, Any]:
        theme: dict[str, Any] = {}
        if theme_name:
            document = theme_loader.get_theme(theme_name)
            if document is None:
                raise ValueError(ErrorMessages.THEME_NOT_FOUND.format(name=theme_name))
            theme.update(document.theme)
        theme.update(_as_object(overrides))
        return theme

    @mcp.tool  # type: ignore[arg-type]
    async def css_compile(
        styles: dict[str, Any] | str,
        theme_name: str | None = None,
        theme: dict[str, Any] | str | None = None,
    ) -> str:
        """
        Compile a style description into a plain style object.

        Aliases are expanded (mx -> marginLeft/marginRight), values are
        looked up in the theme's scales, responsive lists and maps become
        media query groups, and variants are inlined.

        Args:
            styles: Style description as a JSON object
            theme_name: Optional library or project theme to compile against
            theme: Optional theme entries merged over the named theme

        Returns:
            JSON string with the compiled style object

        Example:
            css_compile(styles={"px": 3, "color": "primary"}, theme_name="base")
        """
        try:
            description = _as_object(styles)
            compiled = css(description)(resolve_theme(theme_name, theme))
            return json.dumps({"status": "success", "styles": compiled})
        except Exception as e:
            logger.exception("Failed to compile styles")
            return json.dumps({"status": "error", "message": str(e)})

    tools["css_compile"] = css_compile

    @mcp.tool  # type: ignore[arg-type]
    async def css_responsive(
        styles: dict[str, Any] | str,
        breakpoints: list[Any] | dict[str, Any] | None = None,
    ) -> str:
        """
        Expand responsive values without resolving scales or aliases.

        Args:
            styles: Style description as a JSON object
            breakpoints: Breakpoint list or name -> size map (default 40em, 52em, 64em)

        Returns:
            JSON string with the expanded style description

        Example:
            css_responsive(styles={"width": ["100%", "50%"]}, breakpoints=["30em"])
        """
        try:
            description = _as_object(styles)
            theme = merge_theme({"breakpoints": breakpoints} if breakpoints is not None else {})
            return json.dumps({"status": "success", "styles": responsive(description)(theme)})
        except Exception as e:
            logger.exception("Failed to expand responsive styles")
            return json.dumps({"status": "error", "message": str(e)})

    tools["css_responsive"] = css_responsive

    @mcp.tool  # type: ignore[arg-type]
    async def css_list_themes() -> str:
        """
        List available themes.

        Returns all themes from the library and project with the names
        of the scales they define.

        Returns:
            JSON string with list of theme summaries

        Example:
            css_list_themes()
        """
        try:
            themes = theme_loader.list_themes()
            return json.dumps(
                {
                    "status": "success",
                    "themes": [t.model_dump() for t in themes],
                    "count": len(themes),
                }
            )
        except Exception as e:
            logger.exception("Failed to list themes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["css_list_themes"] = css_list_themes

    @mcp.tool  # type: ignore[arg-type]
    async def css_describe_theme(name: str) -> str:
        """
        Get the full contents of a theme.

        Args:
            name: Theme name

        Returns:
            JSON string with the theme's scales, breakpoints and variants

        Example:
            css_describe_theme(name="base")
        """
        try:
            document = theme_loader.get_theme(name)
            if document is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.THEME_NOT_FOUND.format(name=name)}
                )

            data = document.to_yaml_dict()
            return json.dumps(
                {
                    "status": "success",
                    "theme": {
                        "schema": data["schema"],
                        "name": data["name"],
                        "description": data["description"],
                        "scales": document.scales,
                        "breakpoints": document.breakpoints,
                        "values": data["theme"],
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to describe theme")
            return json.dumps({"status": "error", "message": str(e)})

    tools["css_describe_theme"] = css_describe_theme

    @mcp.tool  # type: ignore[arg-type]
    async def css_copy_theme_to_project(name: str) -> str:
        """
        Copy a library theme to the project for customization.

        Args:
            name: Theme name

        Returns:
            JSON string with path to copied theme

        Example:
            css_copy_theme_to_project(name="dark")
        """
        try:
            path = theme_loader.copy_to_project(name)
            if path is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.THEME_NOT_FOUND.format(name=name)}
                )

            return json.dumps(
                {
                    "status": "success",
                    "message": "Theme copied to project",
                    "path": str(path),
                    "hint": "Edit the YAML file to change scales, breakpoints or variants",
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to copy theme")
            return json.dumps({"status": "error", "message": str(e)})

    tools["css_copy_theme_to_project"] = css_copy_theme_to_project

    return tools
