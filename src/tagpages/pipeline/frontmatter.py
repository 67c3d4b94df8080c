"""Helpers for parsing YAML front matter from source files."""

from __future__ import annotations

import logging
from typing import Any

import frontmatter
import yaml

logger = logging.getLogger(__name__)


def parse_frontmatter(content: str) -> tuple[dict[str, Any], str]:
    """Parse YAML front matter using python-frontmatter.

    Returns:
        Tuple of (metadata dict, body string). If parsing fails or metadata is not a
        mapping, metadata is an empty dict and the original content is returned.

    """
    try:
        parsed = frontmatter.loads(content)
    except (yaml.YAMLError, ValueError) as exc:
        logger.warning("Failed to parse front matter: %s", exc)
        return {}, content

    raw_metadata = parsed.metadata or {}
    if not isinstance(raw_metadata, dict):
        logger.warning("Front matter is not a mapping: %s", type(raw_metadata).__name__)
        return {}, content

    body = parsed.content if isinstance(parsed.content, str) else str(parsed.content)
    return dict(raw_metadata), body
