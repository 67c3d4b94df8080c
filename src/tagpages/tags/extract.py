"""Tag extraction from an item's tag field."""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any

logger = logging.getLogger(__name__)

TAG_SEPARATOR = ","


def split_tags(raw: Any) -> list[str]:
    """Split a comma-separated tag string into trimmed, non-empty tokens.

    ``"a, b ,c"`` becomes ``["a", "b", "c"]``. A sequence of strings that was
    already extracted is trimmed again, which keeps repeated runs stable.
    Anything else counts as "no tags".
    """
    if not raw:
        return []
    if isinstance(raw, str):
        tokens = raw.split(TAG_SEPARATOR)
    elif isinstance(raw, (list, tuple)):
        tokens = [token for token in raw if isinstance(token, str)]
    else:
        logger.debug("Ignoring tag field of unsupported type %s", type(raw).__name__)
        return []
    return [token.strip() for token in tokens if token.strip()]


def extract_item_tags(item: MutableMapping[str, Any], handle: str = "tags") -> list[str]:
    """Extract an item's tags and store the list back on the item.

    Items without the ``handle`` field are left untouched.
    """
    if handle not in item:
        return []
    tags = split_tags(item[handle])
    item[handle] = tags
    return tags
