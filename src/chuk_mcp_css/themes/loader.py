"""
Theme loader - discovers and loads YAML theme documents.

Themes can come from:
1. Built-in library (shipped with package)
2. Project themes (user's project/themes directory)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_mcp_css.constants import ErrorMessages
from chuk_mcp_css.models.theme import ThemeDocument, ThemeMetadata

logger = logging.getLogger(__name__)


class ThemeLoader:
    """
    Discovers and loads theme documents.

    Themes are loaded from YAML files in the library and project directories.
    Project themes override library themes with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the theme loader.

        Args:
            library_path: Path to built-in theme library
            project_path: Path to project themes directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, ThemeDocument] = {}

    def list_themes(self) -> list[ThemeMetadata]:
        """
        List all available themes.

        Returns themes from both library and project, with project
        themes taking precedence.
        """
        themes: dict[str, ThemeMetadata] = {}

        for directory in (self.library_path, self.project_path):
            if not directory or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                document = self._load_theme_file(path)
                if document:
                    themes[document.name] = ThemeMetadata.from_document(document)

        return sorted(themes.values(), key=lambda m: m.name)

    def get_theme(self, name: str) -> ThemeDocument | None:
        """
        Get a theme by name.

        Project themes take precedence over library themes.

        Args:
            name: Theme name

        Returns:
            ThemeDocument if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if not directory:
                continue
            theme_file = directory / f"{name}.yaml"
            if theme_file.exists():
                document = self._load_theme_file(theme_file)
                if document:
                    self._cache[name] = document
                    return document

        return None

    def copy_to_project(self, name: str) -> Path | None:
        """
        Copy a library theme to the project for customization.

        Args:
            name: Theme name

        Returns:
            Path to copied file, or None if not found
        """
        if not self.project_path:
            raise ValueError(ErrorMessages.NO_PROJECT_PATH)

        library_file = self.library_path / f"{name}.yaml"
        if not library_file.exists():
            return None

        self.project_path.mkdir(parents=True, exist_ok=True)

        dest_file = self.project_path / f"{name}.yaml"
        if dest_file.exists():
            raise ValueError(ErrorMessages.THEME_EXISTS.format(name=name))

        dest_file.write_text(library_file.read_text())

        # Invalidate cache
        self._cache.pop(name, None)

        return dest_file

    def clear_cache(self) -> None:
        """Clear the theme cache."""
        self._cache.clear()

    def _load_theme_file(self, path: Path) -> ThemeDocument | None:
        """Load a theme from a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            return self._parse_theme(data, default_name=path.stem)
        except (OSError, yaml.YAMLError, ValidationError, TypeError):
            logger.warning("Skipping unreadable theme file %s", path, exc_info=True)
            return None

    def _parse_theme(self, data: Any, default_name: str) -> ThemeDocument:
        """Parse a theme document from YAML data."""
        if not isinstance(data, dict):
            raise TypeError(f"Theme file must contain a mapping, got {type(data).__name__}")
        return ThemeDocument.model_validate(
            {
                "schema": data.get("schema", "theme/v1"),
                "name": data.get("name", default_name),
                "description": data.get("description", ""),
                "theme": data.get("theme") or {},
            }
        )
