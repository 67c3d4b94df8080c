"""Centralized exceptions for tagpages."""

from __future__ import annotations


class TagPagesError(Exception):
    """Base exception for all tagpages errors."""


class CollectionNotFoundError(TagPagesError):
    """Raised when a configured collection is missing from the build metadata."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        listing = ", ".join(available) if available else "none"
        super().__init__(f"Collection '{name}' not found. Available collections: {listing}")


class BuildError(TagPagesError):
    """Raised when a plugin aborts the build."""

    def __init__(self, plugin_name: str, reason: str) -> None:
        self.plugin_name = plugin_name
        self.reason = reason
        super().__init__(f"Plugin '{plugin_name}' failed: {reason}")


class LayoutError(TagPagesError):
    """Raised when a page cannot be rendered through its template."""

    def __init__(self, path: str, template: str, reason: str) -> None:
        self.path = path
        self.template = template
        self.reason = reason
        super().__init__(f"Failed to render '{path}' with template '{template}': {reason}")
