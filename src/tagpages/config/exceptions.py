"""Custom exceptions for configuration handling."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from tagpages.exceptions import TagPagesError


class ConfigError(TagPagesError):
    """Base exception for all configuration-related errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the configuration file cannot be found."""

    def __init__(self, search_path: Path) -> None:
        self.search_path = search_path
        super().__init__(f"Could not find tagpages.yml in or above {search_path}")


class ConfigValidationError(ConfigError):
    """Raised when the configuration file fails validation."""

    def __init__(self, errors: Sequence[dict[str, Any]] | None = None, *, source: Path | None = None) -> None:
        self.errors = list(errors or [])
        self.source = source
        location = f" in {source}" if source else ""
        super().__init__(f"Configuration validation failed{location} with {len(self.errors)} error(s).")
