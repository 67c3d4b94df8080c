"""Placeholder substitution for tag page paths and metadata."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from tagpages.common.text import safe_tag

TAG_PLACEHOLDER = ":tag"
NUM_PLACEHOLDER = ":num"


def render_path(template: str, tag: str, num: int, *, slug: Callable[[str], str] = safe_tag) -> str:
    """Fill ``:tag`` with the path-safe tag and ``:num`` with the page number.

    >>> render_path("blog/tags/:tag/:num/index.html", "Tag One", 3)
    'blog/tags/tag-one/3/index.html'
    """
    return template.replace(TAG_PLACEHOLDER, slug(tag)).replace(NUM_PLACEHOLDER, str(num))


def render_metadata(fields: Mapping[str, Any], tag: str, num: int) -> dict[str, Any]:
    """Fill ``:tag`` and ``:num`` in every string value of ``fields``.

    Unlike paths, metadata receives the tag verbatim. Non-string values are
    copied unchanged.
    """
    rendered: dict[str, Any] = {}
    for key, value in fields.items():
        if isinstance(value, str):
            value = value.replace(TAG_PLACEHOLDER, tag).replace(NUM_PLACEHOLDER, str(num))
        rendered[key] = value
    return rendered
