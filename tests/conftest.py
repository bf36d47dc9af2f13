"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def theme() -> dict:
    """A small theme with named colors, breakpoints and variants."""
    return {
        "colors": {"primary": "#07c", "text": "#111", "background": "#fff"},
        "space": [0, 4, 8, 16, 32],
        "radii": {"small": 2, "round": 9999},
        "buttons": {
            "primary": {"color": "background", "bg": "primary", "px": 2},
        },
    }


@pytest.fixture
def library_path() -> Path:
    """Path to the built-in theme library."""
    return Path(__file__).parent.parent / "src" / "chuk_mcp_css" / "themes" / "library"
