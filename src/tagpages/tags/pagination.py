"""Slicing tag buckets into pages and chaining the pages together."""

from __future__ import annotations

import math
from collections.abc import Sequence

from tagpages.data_primitives import FileRecord, Pagination


def page_count(total: int, per_page: int) -> int:
    """Number of pages needed for ``total`` items.

    A non-positive ``per_page`` means unbounded: everything fits on one page.
    """
    if total <= 0:
        return 0
    if per_page <= 0:
        return 1
    return math.ceil(total / per_page)


def paginate(tag: str, items: Sequence[FileRecord], per_page: int = 0) -> list[Pagination]:
    """Split a tag's items into consecutive pages, numbered from 1.

    Empty buckets produce no pages.
    """
    total = len(items)
    pages = page_count(total, per_page)
    size = per_page if per_page > 0 else total

    result: list[Pagination] = []
    for index in range(pages):
        start = index * size
        end = min(start + size, total)
        result.append(
            Pagination(
                num=index + 1,
                pages=pages,
                tag=tag,
                start=start,
                end=end,
                files=list(items[start:end]),
            )
        )
    return result


def link_pages(pages: Sequence[FileRecord]) -> None:
    """Point each page's ``prev``/``next`` at its neighbours, in order."""
    for previous, current in zip(pages, pages[1:]):
        current["pagination"].prev = previous
        previous["pagination"].next = current
