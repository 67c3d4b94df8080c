"""Pydantic models for tagpages configuration.

Per-collection tag options accept both the snake_case field names and the
camelCase spellings (``skipMetadata``, ``pathPage``, ``perPage``) used by
existing site configurations.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from tagpages.common.text import safe_tag

logger = logging.getLogger(__name__)

# ============================================================================
# Constants
# ============================================================================

DEFAULT_HANDLE = "tags"
DEFAULT_TAG_TEMPLATE = "partials/tag.html"
DEFAULT_CONFIG_FILENAME = "tagpages.yml"


def _drop_none(data: Any) -> Any:
    """Let explicit nulls fall back to field defaults."""
    if isinstance(data, dict):
        return {key: value for key, value in data.items() if value is not None}
    return data


class CollectionTagSettings(BaseModel):
    """Tag page options for one collection."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    handle: str = Field(
        default=DEFAULT_HANDLE,
        description="Item field holding the comma-separated tag string",
    )
    skip_metadata: bool = Field(
        default=False,
        alias="skipMetadata",
        description="Keep this collection's tags out of the global tag index",
    )
    path: str | None = Field(
        default=None,
        description="Output path for a tag's first page (':tag' placeholder)",
    )
    path_page: str | None = Field(
        default=None,
        alias="pathPage",
        description="Output path for later pages (':tag' and ':num' placeholders)",
    )
    per_page: int = Field(
        default=0,
        alias="perPage",
        description="Items per page; 0 puts every item on a single page",
    )
    template: str = Field(
        default=DEFAULT_TAG_TEMPLATE,
        description="Template name attached to generated pages",
    )
    metadata: dict[str, Any] = Field(
        default_factory=dict,
        description="Extra fields merged onto every page (':tag' and ':num' placeholders)",
    )
    slugify: bool = Field(
        default=False,
        description="Use strict ASCII slugs instead of lowercase-and-hyphenate for ':tag' in paths",
    )

    @model_validator(mode="before")
    @classmethod
    def _normalize_nulls(cls, data: Any) -> Any:
        return _drop_none(data)

    def first_page_path(self, collection: str) -> str:
        """Path template for page 1 of each tag."""
        return self.path or f"{safe_tag(collection)}/tags/:tag/index.html"

    def later_page_path(self, collection: str) -> str:
        """Path template for pages 2 and up."""
        return self.path_page or f"{safe_tag(collection)}/tags/:tag/:num/index.html"


class CollectionSettings(BaseModel):
    """Which source files make up a collection and how they are ordered."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    pattern: list[str] = Field(
        default_factory=list,
        description="Glob pattern(s) matched against source paths",
    )
    sort_by: str | None = Field(
        default=None,
        alias="sort",
        description="Item field to sort the collection by",
    )
    reverse: bool = Field(default=False, description="Reverse the sort order")

    @model_validator(mode="before")
    @classmethod
    def _coerce_pattern(cls, data: Any) -> Any:
        data = _drop_none(data)
        if isinstance(data, dict) and isinstance(data.get("pattern"), str):
            data = {**data, "pattern": [data["pattern"]]}
        return data


class TagPagesConfig(BaseSettings):
    """Root configuration, loaded from ``tagpages.yml``.

    Environment variables (``TAGPAGES_DESTINATION``, ``TAGPAGES_CLEAN`` ...)
    take precedence over the file, which takes precedence over defaults.
    """

    source: str = Field(default="src", description="Source directory, relative to the site root")
    destination: str = Field(default="build", description="Output directory, relative to the site root")
    templates_dir: str = Field(default="templates", description="Jinja2 templates directory")
    clean: bool = Field(default=True, description="Empty the destination before writing")
    strict_templates: bool = Field(
        default=False,
        description="Fail the build when a template references an undefined variable",
    )
    metadata: dict[str, Any] = Field(default_factory=dict, description="Global site metadata")
    collections: dict[str, CollectionSettings] = Field(default_factory=dict)
    tags: dict[str, CollectionTagSettings] = Field(default_factory=dict)

    model_config = SettingsConfigDict(
        extra="forbid",
        env_prefix="TAGPAGES_",
        env_nested_delimiter="__",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return env_settings, init_settings

    @model_validator(mode="after")
    def _warn_unknown_tag_collections(self) -> TagPagesConfig:
        if self.collections:
            for name in self.tags:
                if name not in self.collections:
                    logger.warning("Tag options configured for undefined collection '%s'", name)
        return self


__all__ = [
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_HANDLE",
    "DEFAULT_TAG_TEMPLATE",
    "CollectionSettings",
    "CollectionTagSettings",
    "TagPagesConfig",
]
