#!/usr/bin/env python3
"""
Example: Compiling themed styles.

This demonstrates how style descriptions written with shorthand aliases,
theme scale keys and responsive values compile to plain style objects.

Usage:
    python examples/use_css.py
"""

import json

from chuk_mcp_css import ThemeLoader, css, responsive


def main() -> None:
    """Demonstrate the style compiler."""
    print("CHUK CSS Demo")
    print("=" * 40)
    print()

    loader = ThemeLoader()

    print("Available themes:")
    for meta in loader.list_themes():
        print(f"  {meta.name}: {meta.description}")
        print(f"    Scales: {', '.join(meta.scales)}")
    print()

    document = loader.get_theme("base")
    if not document:
        print("Failed to load theme")
        return

    styles = {
        "variant": "buttons.primary",
        "fontSize": [1, 2, 3],
        "mx": -2,
        "&:hover": {"bg": "secondary"},
    }

    print("Responsive expansion only:")
    print(json.dumps(responsive(styles)(document.theme), indent=2))
    print()

    print(f"Compiled against '{document.name}':")
    print(json.dumps(css(styles)(document.theme), indent=2))


if __name__ == "__main__":
    main()
