"""Layouts plugin: renders files through their Jinja2 template."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Undefined, select_autoescape

from tagpages.exceptions import LayoutError

if TYPE_CHECKING:
    from tagpages.pipeline.site import Done, Files, Site

logger = logging.getLogger(__name__)


class Layouts:
    """Render every file that names a ``template``.

    The template sees the site metadata overlaid with the file record, so a
    tag page can loop over ``pagination.files`` and follow ``pagination.next``.
    Post bodies are inserted unescaped via ``{{ contents | safe }}``.
    Any failure while loading or rendering a template is reported as a
    :class:`LayoutError` through ``done``.
    """

    name = "layouts"

    def __init__(self, directory: Path, *, strict: bool = False) -> None:
        self.directory = Path(directory)
        self._env = Environment(
            loader=FileSystemLoader(str(self.directory)),
            autoescape=select_autoescape(),
            undefined=StrictUndefined if strict else Undefined,
        )

    def __call__(self, files: Files, site: Site, done: Done) -> None:
        metadata = site.metadata()
        rendered = 0
        for path, record in files.items():
            template_name = record.get("template")
            if not template_name:
                continue
            try:
                template = self._env.get_template(template_name)
                record["contents"] = template.render({**metadata, **record})
            except Exception as e:
                done(LayoutError(path, template_name, str(e)))
                return
            rendered += 1
        logger.info("Rendered %d file(s) through templates in %s", rendered, self.directory)
        done(None)


def layouts(directory: Path, *, strict: bool = False) -> Layouts:
    """Build the layouts plugin for a templates directory."""
    return Layouts(directory, strict=strict)
