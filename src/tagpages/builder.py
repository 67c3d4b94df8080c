"""Wiring a configured site: collections, tag pages, then layouts."""

from __future__ import annotations

import logging
from pathlib import Path

from tagpages.config import TagPagesConfig, load_config
from tagpages.pipeline import Files, Site, collections, layouts
from tagpages.tags import collection_tags

logger = logging.getLogger(__name__)


def create_site(site_root: Path, config: TagPagesConfig, *, render: bool = True) -> Site:
    """Assemble the standard pipeline for ``config``.

    Layouts are only applied when ``render`` is true and the templates
    directory exists.
    """
    site = Site(
        site_root,
        source=config.source,
        destination=config.destination,
        clean=config.clean,
        metadata=dict(config.metadata),
    )
    if config.collections:
        site.use(collections(config.collections))
    site.use(collection_tags(config.tags))

    templates_dir = site.directory / config.templates_dir
    if render and templates_dir.is_dir():
        site.use(layouts(templates_dir, strict=config.strict_templates))
    elif render:
        logger.warning("Templates directory %s not found, tag pages are written unrendered", templates_dir)
    return site


def build_site(site_root: Path, config: TagPagesConfig | None = None, *, write: bool = True) -> tuple[Site, Files]:
    """Load configuration if needed, then build the site at ``site_root``."""
    if config is None:
        config = load_config(site_root)
    site = create_site(site_root, config, render=write)
    files = site.build(write=write)
    return site, files
