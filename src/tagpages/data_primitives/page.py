"""Items, collections and generated tag pages."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

# Host-owned file records and generated pages are plain mutable mappings.
FileRecord = dict[str, Any]
TagIndex = dict[str, list[FileRecord]]


class Collection(list):
    """An ordered sequence of items with its own tag buckets.

    Behaves exactly like a list so templates and plugins can iterate it, and
    additionally carries the collection name and the per-collection ``tags``
    mapping filled in by the tag plugin.
    """

    def __init__(self, items: Iterable[FileRecord] = (), *, name: str | None = None) -> None:
        super().__init__(items)
        self.name = name
        self.tags: TagIndex = {}

    def __repr__(self) -> str:
        return f"Collection(name={self.name!r}, items={len(self)}, tags={len(self.tags)})"


@dataclass(eq=False)
class Pagination:
    """Where a tag page sits within its tag's listing.

    ``start`` and ``end`` are the slice bounds into the tag's bucket; ``prev``
    and ``next`` point at the neighbouring page records once linked.
    """

    num: int
    pages: int
    tag: str
    start: int
    end: int
    files: list[FileRecord] = field(default_factory=list)
    prev: FileRecord | None = field(default=None, repr=False)
    next: FileRecord | None = field(default=None, repr=False)

    @property
    def is_first(self) -> bool:
        return self.num == 1


def new_tag_page(template: str, pagination: Pagination, metadata: dict[str, Any] | None = None) -> FileRecord:
    """Build the file record for one tag page.

    The body is left empty for a later layout step. Extra ``metadata`` is laid
    over the base fields, so it may replace any of them.
    """
    page: FileRecord = {
        "template": template,
        "contents": "",
        "tag": pagination.tag,
        "pagination": pagination,
    }
    if metadata:
        page.update(metadata)
    return page
