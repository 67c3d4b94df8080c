"""tagpages: tag listing pages for static site collections."""

from tagpages.builder import build_site, create_site
from tagpages.config import CollectionTagSettings, TagPagesConfig
from tagpages.data_primitives import Collection, Pagination
from tagpages.exceptions import BuildError, CollectionNotFoundError, LayoutError, TagPagesError
from tagpages.pipeline import Site
from tagpages.tags import CollectionTags, collection_tags

__all__ = [
    "BuildError",
    "Collection",
    "CollectionNotFoundError",
    "CollectionTagSettings",
    "CollectionTags",
    "LayoutError",
    "Pagination",
    "Site",
    "TagPagesConfig",
    "TagPagesError",
    "build_site",
    "collection_tags",
    "create_site",
]
