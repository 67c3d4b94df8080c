"""Configuration models and loading."""

from tagpages.config.exceptions import ConfigError, ConfigNotFoundError, ConfigValidationError
from tagpages.config.loader import find_config, load_config, save_config
from tagpages.config.settings import (
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_HANDLE,
    DEFAULT_TAG_TEMPLATE,
    CollectionSettings,
    CollectionTagSettings,
    TagPagesConfig,
)

__all__ = [
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_HANDLE",
    "DEFAULT_TAG_TEMPLATE",
    "CollectionSettings",
    "CollectionTagSettings",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigValidationError",
    "TagPagesConfig",
    "find_config",
    "load_config",
    "save_config",
]
