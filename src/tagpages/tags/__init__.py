"""Tag extraction, bucketing, pagination and page generation."""

from tagpages.tags.buckets import bucket_by_tag, merge_tag_index
from tagpages.tags.extract import extract_item_tags, split_tags
from tagpages.tags.pagination import link_pages, page_count, paginate
from tagpages.tags.paths import render_metadata, render_path
from tagpages.tags.plugin import CollectionTags, collection_tags

__all__ = [
    "CollectionTags",
    "bucket_by_tag",
    "collection_tags",
    "extract_item_tags",
    "link_pages",
    "merge_tag_index",
    "page_count",
    "paginate",
    "render_metadata",
    "render_path",
    "split_tags",
]
