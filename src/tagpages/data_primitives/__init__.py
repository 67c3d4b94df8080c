"""Core data shapes shared by the plugin and the host pipeline."""

from tagpages.data_primitives.page import (
    Collection,
    FileRecord,
    Pagination,
    TagIndex,
    new_tag_page,
)

__all__ = [
    "Collection",
    "FileRecord",
    "Pagination",
    "TagIndex",
    "new_tag_page",
]
