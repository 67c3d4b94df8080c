"""The collection tags plugin.

For every configured collection the plugin extracts each item's tags, groups
items into per-tag buckets, and emits one or more listing pages per tag into
the build's file set. Buckets from all collections not marked
``skip_metadata`` are folded into a global index published as
``metadata["tags"]``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, MutableMapping
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from tagpages.common.text import safe_tag, slugify
from tagpages.config.exceptions import ConfigValidationError
from tagpages.config.settings import CollectionTagSettings
from tagpages.data_primitives import Collection, FileRecord, TagIndex, new_tag_page
from tagpages.exceptions import CollectionNotFoundError
from tagpages.tags.buckets import bucket_by_tag, merge_tag_index
from tagpages.tags.pagination import link_pages, paginate
from tagpages.tags.paths import render_metadata, render_path

if TYPE_CHECKING:
    from tagpages.pipeline.site import Done, Site

logger = logging.getLogger(__name__)

TagOptions = Mapping[str, CollectionTagSettings | Mapping[str, Any] | None]


def _coerce_options(options: TagOptions | None) -> dict[str, CollectionTagSettings]:
    settings: dict[str, CollectionTagSettings] = {}
    errors: list[dict[str, Any]] = []
    for name, value in (options or {}).items():
        if isinstance(value, CollectionTagSettings):
            settings[name] = value
            continue
        try:
            settings[name] = CollectionTagSettings.model_validate(value or {})
        except ValidationError as e:
            errors.extend({**error, "loc": (name, *error["loc"])} for error in e.errors())
    if errors:
        raise ConfigValidationError(errors)
    return settings


class CollectionTags:
    """Plugin generating tag listing pages for configured collections."""

    name = "collection_tags"

    def __init__(self, options: TagOptions | None = None) -> None:
        self.options = _coerce_options(options)

    def __call__(self, files: dict[str, FileRecord], site: Site, done: Done) -> None:
        try:
            self.run(files, site.metadata())
        except Exception as exc:  # handed to the host, which aborts the build
            logger.debug("Tag generation failed: %s", exc)
            done(exc)
            return
        done(None)

    def run(self, files: MutableMapping[str, FileRecord], metadata: MutableMapping[str, Any]) -> TagIndex:
        """Generate tag pages into ``files`` and publish the tag index.

        Returns:
            The global tag index, also stored as ``metadata["tags"]``

        Raises:
            CollectionNotFoundError: If a configured collection does not exist

        """
        index: TagIndex = {}
        metadata["tags"] = index

        for name, settings in self.options.items():
            collection = self._collection(metadata, name)
            buckets = bucket_by_tag(collection, settings.handle)
            collection.tags = buckets

            if settings.skip_metadata:
                logger.debug("Collection '%s' kept out of the global tag index", name)
            else:
                index = merge_tag_index(index, buckets)

            count = self._emit_pages(files, name, settings, buckets)
            logger.info("Generated %d tag page(s) for %d tag(s) in '%s'", count, len(buckets), name)

        metadata["tags"] = index
        return index

    @staticmethod
    def _collection(metadata: MutableMapping[str, Any], name: str) -> Collection:
        collections = metadata.get("collections") or {}
        if name not in collections:
            raise CollectionNotFoundError(name, list(collections))
        collection = collections[name]
        if not isinstance(collection, Collection):
            collection = Collection(collection, name=name)
            collections[name] = collection
        return collection

    def _emit_pages(
        self,
        files: MutableMapping[str, FileRecord],
        collection: str,
        settings: CollectionTagSettings,
        buckets: TagIndex,
    ) -> int:
        first_path = settings.first_page_path(collection)
        later_path = settings.later_page_path(collection)
        slug: Callable[[str], str] = slugify if settings.slugify else safe_tag

        count = 0
        for tag, items in buckets.items():
            pages: list[FileRecord] = []
            for pagination in paginate(tag, items, settings.per_page):
                template = first_path if pagination.is_first else later_path
                path = render_path(template, tag, pagination.num, slug=slug)
                page = new_tag_page(
                    settings.template,
                    pagination,
                    render_metadata(settings.metadata, tag, pagination.num),
                )
                if path in files:
                    logger.debug("Tag page for '%s' overwrites existing file %s", tag, path)
                files[path] = page
                pages.append(page)
            link_pages(pages)
            count += len(pages)
        return count


def collection_tags(options: TagOptions | None = None) -> CollectionTags:
    """Build the tag plugin from per-collection options."""
    return CollectionTags(options)
