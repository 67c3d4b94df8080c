"""Centralized logging configuration for tagpages."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Final, cast

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["console", "configure_logging"]

_LOG_LEVEL_ENV: Final[str] = "TAGPAGES_LOG_LEVEL"
_DEFAULT_LEVEL_NAME: Final[str] = "INFO"

console = Console()

if TYPE_CHECKING:

    class _ManagedRichHandler(RichHandler):
        _tagpages_managed: bool
else:
    _ManagedRichHandler = RichHandler


def _resolve_level(debug: bool) -> int:
    """Return the logging level, honouring the environment override."""
    if debug:
        return logging.DEBUG
    level_name = os.getenv(_LOG_LEVEL_ENV, _DEFAULT_LEVEL_NAME).upper()
    level = getattr(logging, level_name, logging.INFO)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(*, debug: bool = False) -> None:
    """Configure logging once with a Rich handler.

    Calling it again reuses the handler installed by the first call, so the
    CLI can invoke it per command without duplicating output.
    """
    root_logger = logging.getLogger()
    level = _resolve_level(debug)

    managed_handler: _ManagedRichHandler | None = None
    for handler in root_logger.handlers:
        if isinstance(handler, RichHandler) and getattr(handler, "_tagpages_managed", False):
            managed_handler = cast(_ManagedRichHandler, handler)
            break

    if managed_handler is None:
        root_logger.handlers.clear()
        handler = _ManagedRichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            markup=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        handler._tagpages_managed = True
        root_logger.addHandler(handler)

    root_logger.setLevel(level)
    logging.captureWarnings(True)
