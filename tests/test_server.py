"""
Tests for the server command line.
"""

from chuk_mcp_css.server import build_parser


class TestParser:
    """Tests for server argument parsing."""

    def test_defaults(self):
        """Defaults to stdio with the working directory's themes."""
        args = build_parser().parse_args([])
        assert args.transport == "stdio"
        assert args.port == 8000
        assert args.themes_dir is None
        assert args.debug is False

    def test_http_with_themes_dir(self):
        """Accepts http transport and a project themes directory."""
        args = build_parser().parse_args(
            ["--transport", "http", "--port", "9000", "--themes-dir", "design/themes", "--debug"]
        )
        assert args.transport == "http"
        assert args.port == 9000
        assert args.themes_dir == "design/themes"
        assert args.debug is True
