"""Collections plugin: groups source files into named, ordered collections."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from fnmatch import fnmatchcase
from typing import TYPE_CHECKING, Any

from tagpages.config.settings import CollectionSettings
from tagpages.data_primitives import Collection, FileRecord

if TYPE_CHECKING:
    from tagpages.pipeline.site import Done, Files, Site

logger = logging.getLogger(__name__)


def _declared_collections(record: FileRecord) -> list[str]:
    declared = record.get("collection")
    if isinstance(declared, str):
        return [declared]
    if isinstance(declared, list):
        return [name for name in declared if isinstance(name, str)]
    return []


def _sorted(items: list[FileRecord], field: str, *, reverse: bool) -> list[FileRecord]:
    """Sort by ``field``; items without it keep their relative order at the end."""
    present = [record for record in items if record.get(field) is not None]
    missing = [record for record in items if record.get(field) is None]
    present.sort(key=lambda record: record[field], reverse=reverse)
    return present + missing


class Collections:
    """Plugin filling ``metadata["collections"]``.

    A file joins a collection when its path matches one of the collection's
    patterns or when its ``collection`` front matter names it.
    """

    name = "collections"

    def __init__(self, definitions: Mapping[str, CollectionSettings | Mapping[str, Any]]) -> None:
        self.definitions = {
            name: value if isinstance(value, CollectionSettings) else CollectionSettings.model_validate(value)
            for name, value in definitions.items()
        }

    def __call__(self, files: Files, site: Site, done: Done) -> None:
        collections = site.metadata().setdefault("collections", {})
        collections.update(self.group(files))
        done(None)

    def group(self, files: Mapping[str, FileRecord]) -> dict[str, Collection]:
        grouped = {name: Collection(name=name) for name in self.definitions}

        for path, record in files.items():
            declared = _declared_collections(record)
            for name, settings in self.definitions.items():
                if name in declared or any(fnmatchcase(path, pattern) for pattern in settings.pattern):
                    grouped[name].append(record)

        for name, settings in self.definitions.items():
            collection = grouped[name]
            if settings.sort_by:
                try:
                    collection[:] = _sorted(collection, settings.sort_by, reverse=settings.reverse)
                except TypeError:
                    logger.warning("Cannot sort collection '%s' by mixed-type field '%s'", name, settings.sort_by)
            elif settings.reverse:
                collection.reverse()
            logger.debug("Collection '%s' has %d item(s)", name, len(collection))

        return grouped


def collections(definitions: Mapping[str, CollectionSettings | Mapping[str, Any]]) -> Collections:
    """Build the collections plugin."""
    return Collections(definitions)
