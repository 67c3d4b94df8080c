"""Grouping items by tag and folding buckets into the global tag index."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from tagpages.data_primitives import FileRecord, TagIndex
from tagpages.tags.extract import extract_item_tags


def bucket_by_tag(items: Iterable[FileRecord], handle: str = "tags") -> TagIndex:
    """Group items by tag, keeping collection order within each bucket.

    Tags are extracted in place on each item. An item listing the same tag
    twice lands in that bucket once.
    """
    buckets: TagIndex = {}
    for item in items:
        seen: set[str] = set()
        for tag in extract_item_tags(item, handle):
            if tag in seen:
                continue
            seen.add(tag)
            buckets.setdefault(tag, []).append(item)
    return buckets


def merge_tag_index(index: Mapping[str, list[FileRecord]], buckets: Mapping[str, list[FileRecord]]) -> TagIndex:
    """Return a new index with ``buckets`` concatenated onto ``index``.

    Neither argument is mutated; tags present in both keep every member,
    ``index`` members first.
    """
    merged: TagIndex = {tag: list(members) for tag, members in index.items()}
    for tag, members in buckets.items():
        merged[tag] = merged.get(tag, []) + list(members)
    return merged
