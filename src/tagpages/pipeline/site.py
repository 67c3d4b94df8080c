"""A minimal synchronous build pipeline hosting tagpages plugins.

A :class:`Site` reads every file under its source directory into a mapping of
relative path to file record, hands that mapping to each plugin in turn and
writes the result to the destination directory. Plugins receive the file
mapping, the site (for :meth:`Site.metadata`) and a completion callback,
which they must call exactly once, passing an exception to abort the build.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from pathlib import Path
from typing import Any, Protocol

from tagpages.data_primitives import FileRecord
from tagpages.exceptions import BuildError
from tagpages.pipeline.frontmatter import parse_frontmatter

logger = logging.getLogger(__name__)

Files = dict[str, FileRecord]
Done = Callable[[BaseException | None], None]


class Plugin(Protocol):
    def __call__(self, files: Files, site: Site, done: Done) -> None: ...


def plugin_name(plugin: Plugin) -> str:
    """Human-readable plugin name for log and error messages."""
    return getattr(plugin, "name", None) or getattr(plugin, "__name__", None) or type(plugin).__name__


class _Completion:
    """Records how a plugin signalled completion."""

    def __init__(self) -> None:
        self.called = False
        self.error: BaseException | None = None

    def __call__(self, error: BaseException | None = None) -> None:
        if self.called:
            logger.warning("Plugin signalled completion more than once")
            return
        self.called = True
        self.error = error


class Site:
    """Source-to-destination build driven by a list of plugins."""

    def __init__(
        self,
        directory: Path,
        *,
        source: str | Path = "src",
        destination: str | Path = "build",
        clean: bool = True,
        metadata: dict[str, Any] | None = None,
    ) -> None:
        self.directory = Path(directory).expanduser().resolve()
        self.source = self._resolve(source)
        self.destination = self._resolve(destination)
        self.clean = clean
        self.plugins: list[Plugin] = []
        self._metadata: dict[str, Any] = {"collections": {}}
        if metadata:
            self._metadata.update(metadata)

    def _resolve(self, path: str | Path) -> Path:
        path = Path(path)
        return path if path.is_absolute() else self.directory / path

    def use(self, plugin: Plugin) -> Site:
        """Append a plugin to the pipeline."""
        self.plugins.append(plugin)
        return self

    def metadata(self, update: dict[str, Any] | None = None) -> dict[str, Any]:
        """Return the shared build metadata, optionally merging ``update`` into it."""
        if update:
            self._metadata.update(update)
        return self._metadata

    def read(self) -> Files:
        """Read every file below the source directory.

        Text files have their front matter parsed into the record; the body
        goes to ``contents``. Files that are not UTF-8 are kept as bytes.
        """
        if not self.source.is_dir():
            msg = f"source directory does not exist: {self.source}"
            raise BuildError("read", msg)

        files: Files = {}
        for path in sorted(p for p in self.source.rglob("*") if p.is_file()):
            key = path.relative_to(self.source).as_posix()
            raw = path.read_bytes()
            try:
                text = raw.decode("utf-8")
            except UnicodeDecodeError:
                record: FileRecord = {"contents": raw}
            else:
                metadata, body = parse_frontmatter(text)
                record = {**metadata, "contents": body}
            record["stats"] = path.stat()
            record["path"] = key
            files[key] = record

        logger.debug("Read %d file(s) from %s", len(files), self.source)
        return files

    def process(self, files: Files) -> Files:
        """Run every plugin over ``files`` in registration order."""
        for plugin in self.plugins:
            name = plugin_name(plugin)
            done = _Completion()
            logger.debug("Running plugin %s", name)
            plugin(files, self, done)
            if done.error is not None:
                raise BuildError(name, str(done.error)) from done.error
            if not done.called:
                raise BuildError(name, "plugin did not signal completion")
        return files

    def write(self, files: Files) -> None:
        """Write every record's ``contents`` below the destination directory.

        Every output path must resolve inside the destination; a key that is
        absolute or climbs out with ``..`` aborts the write before anything is
        cleaned or written.
        """
        root = self.destination.resolve()
        targets: dict[str, Path] = {}
        for key in files:
            target = (root / key).resolve()
            if not target.is_relative_to(root):
                msg = f"output path {key!r} resolves outside {root}"
                raise BuildError("write", msg)
            targets[key] = target

        if self.clean and self.destination.exists():
            if self.destination == self.source or self.destination in self.source.parents:
                msg = f"refusing to clean {self.destination}, it contains the source directory"
                raise BuildError("write", msg)
            shutil.rmtree(self.destination)
        self.destination.mkdir(parents=True, exist_ok=True)

        for key, record in files.items():
            target = targets[key]
            target.parent.mkdir(parents=True, exist_ok=True)
            contents = record.get("contents", "")
            if isinstance(contents, bytes):
                target.write_bytes(contents)
            else:
                target.write_text(str(contents), encoding="utf-8")

        logger.info("Wrote %d file(s) to %s", len(files), self.destination)

    def build(self, *, write: bool = True) -> Files:
        """Read, process and (unless ``write`` is false) write the site."""
        files = self.process(self.read())
        if write:
            self.write(files)
        return files
