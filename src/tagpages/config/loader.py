"""Loading and saving ``tagpages.yml``."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from tagpages.config.exceptions import ConfigNotFoundError, ConfigValidationError
from tagpages.config.settings import DEFAULT_CONFIG_FILENAME, TagPagesConfig

logger = logging.getLogger(__name__)


def find_config(start_dir: Path) -> Path | None:
    """Search ``start_dir`` and its parents for ``tagpages.yml``."""
    current = start_dir.expanduser().resolve()
    for candidate in (current, *current.parents):
        config_path = candidate / DEFAULT_CONFIG_FILENAME
        if config_path.is_file():
            return config_path
    return None


def _resolve_config_path(location: Path) -> Path:
    if location.is_dir():
        return location / DEFAULT_CONFIG_FILENAME
    return location


def load_config(location: Path, *, required: bool = False) -> TagPagesConfig:
    """Load and validate configuration.

    Args:
        location: A site root directory or the path to a config file.
        required: Raise instead of falling back to defaults when the file is missing.

    Returns:
        Validated TagPagesConfig instance

    Raises:
        ConfigNotFoundError: If ``required`` and no file exists
        ConfigValidationError: If the file is not valid YAML or fails validation

    """
    config_path = _resolve_config_path(location)

    if not config_path.exists():
        if required:
            raise ConfigNotFoundError(config_path.parent)
        logger.info("No %s found in %s, using defaults", DEFAULT_CONFIG_FILENAME, config_path.parent)
        return TagPagesConfig()

    logger.info("Loading config from %s", config_path)

    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        logger.error("Failed to parse %s: %s", config_path, e)
        raise ConfigValidationError([{"loc": (), "msg": str(e), "type": "yaml_error"}], source=config_path) from e

    if not isinstance(data, dict):
        msg = f"top-level value must be a mapping, got {type(data).__name__}"
        raise ConfigValidationError([{"loc": (), "msg": msg, "type": "mapping_type"}], source=config_path)

    try:
        return TagPagesConfig(**data)
    except ValidationError as e:
        for error in e.errors():
            loc = " -> ".join(str(part) for part in error["loc"])
            logger.error("  %s: %s", loc, error["msg"])
        raise ConfigValidationError(e.errors(), source=config_path) from e


def save_config(config: TagPagesConfig, site_root: Path) -> Path:
    """Write ``config`` to ``<site_root>/tagpages.yml`` and return the path."""
    site_root.mkdir(parents=True, exist_ok=True)
    config_path = site_root / DEFAULT_CONFIG_FILENAME

    data = config.model_dump(mode="json", by_alias=True)
    yaml_str = yaml.dump(
        data,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )

    config_path.write_text(yaml_str, encoding="utf-8")
    logger.debug("Saved config to %s", config_path)
    return config_path


__all__ = [
    "find_config",
    "load_config",
    "save_config",
]
