"""Logging configuration helpers for the ``prep`` command line."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def _normalise_level(level: str | int | None) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        value = level.strip().upper()
        if value.isdigit():
            return int(value)
        mapped = logging.getLevelNamesMapping().get(value)
        if mapped is not None:
            return mapped
    return logging.WARNING


def configure_logging(level: str | int | None = None) -> int:
    """Configure root logging to stream to stderr at ``level``.

    Existing root handlers are replaced so repeated CLI invocations in one
    process (tests, notebooks) do not duplicate output. Unknown level names
    fall back to ``WARNING``. Returns the numeric level applied.
    """
    log_level = _normalise_level(level)
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    logging.basicConfig(level=log_level, format=LOG_FORMAT)
    logging.getLogger(__name__).debug(
        "Logging initialised at %s", logging.getLevelName(log_level)
    )
    return log_level


__all__ = ["LOG_FORMAT", "configure_logging"]
