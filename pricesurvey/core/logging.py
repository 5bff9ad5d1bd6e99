"""Logging setup shared by the pipeline and the CLI."""
from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_LEVEL = "INFO"


def _requested_level(level: str | None) -> str:
    return (level or os.getenv("LOG_LEVEL") or DEFAULT_LEVEL).strip().upper()


def resolve_level(level: str | None = None) -> str:
    """Return an upper-case level name from ``level`` or ``LOG_LEVEL``.

    Names the logging module does not know resolve to ``INFO``.
    """

    requested = _requested_level(level)
    if isinstance(logging.getLevelName(requested), int):
        return requested
    return DEFAULT_LEVEL


def configure_logging(level: str | None = None) -> None:
    """Install the root handler with the package log format."""

    resolved = resolve_level(level)
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    requested = _requested_level(level)
    if requested != resolved:
        logging.getLogger(__name__).warning("Unknown log level %r, using %s", requested, resolved)
