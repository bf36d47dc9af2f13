"""
Theme models - YAML theme documents and their listing metadata.

Only the document envelope is validated. The theme body is an
arbitrary mapping of scales, breakpoints and variant styles.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_css.constants import SchemaVersion


class ThemeDocument(BaseModel):
    """A named theme as stored in a YAML file."""

    schema_version: SchemaVersion = Field("theme/v1", alias="schema")
    name: str = Field(..., description="Theme name")
    description: str = Field("", description="Theme description")
    theme: dict[str, Any] = Field(
        default_factory=dict,
        description="Scales, breakpoints and variant styles",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def scales(self) -> list[str]:
        """Names of the top-level theme entries."""
        return sorted(str(key) for key in self.theme)

    @property
    def breakpoints(self) -> Any:
        """The theme's breakpoints, or None to use the defaults."""
        return self.theme.get("breakpoints")

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        return {
            "schema": self.schema_version,
            "name": self.name,
            "description": self.description,
            "theme": self.theme,
        }


class ThemeMetadata(BaseModel):
    """Lightweight metadata for listing themes."""

    name: str
    description: str
    scales: list[str]

    model_config = {"frozen": True}

    @classmethod
    def from_document(cls, document: ThemeDocument) -> ThemeMetadata:
        """Create metadata from a theme document."""
        return cls(
            name=document.name,
            description=document.description,
            scales=document.scales,
        )
