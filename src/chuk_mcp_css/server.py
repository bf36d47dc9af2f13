#!/usr/bin/env python3
"""
Entry point for the CHUK CSS MCP Server.

Serves the style compiler tools over stdio or http. Project themes are
read from ./themes unless --themes-dir points elsewhere.
"""

import argparse
import asyncio
import logging
import os

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

THEMES_DIR_ENV = "CHUK_CSS_THEMES_DIR"


def build_parser() -> argparse.ArgumentParser:
    """Command line options for the server."""
    parser = argparse.ArgumentParser(
        description="CHUK CSS MCP Server - compile themed style objects"
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--themes-dir",
        default=None,
        help="Project themes directory, overriding the library (default: ./themes)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (reports variants missing from the theme)",
    )
    return parser


def main() -> None:
    """Main entry point with transport detection."""
    args = build_parser().parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.themes_dir:
        os.environ[THEMES_DIR_ENV] = args.themes_dir

    # The server reads the themes directory at import time
    from chuk_mcp_css.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK CSS MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK CSS MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
