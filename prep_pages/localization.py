"""Message catalogs standing in for the host's localization service.

The composer only ever sees opaque keys such as ``prep.steps.strong-start.title``
and asks a :class:`LocalizationProvider` to turn them into display text. The
bundled provider, :class:`Catalog`, reads a nested YAML file and flattens it
into dotted keys. Missing keys localize to themselves, matching what the host
application does.

Example
-------
>>> from prep_pages.localization import Catalog
>>> catalog = Catalog({"prep": {"prompts": {"heading": "Prompts"}}})
>>> catalog.localize("prep.prompts.heading")
'Prompts'
>>> catalog.localize("prep.unknown")
'prep.unknown'
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = logging.getLogger(__name__)

DEFAULT_CATALOG = Path(__file__).resolve().parent / "locales" / "en.yaml"


class LocalizationProvider(typ.Protocol):
    """Anything that can turn an opaque message key into display text."""

    def localize(self, key: str) -> str:
        """Return the display text for ``key``."""
        ...


def _flatten(
    payload: cabc.Mapping[typ.Any, typ.Any], prefix: str = ""
) -> dict[str, str]:
    """Flatten nested mappings into ``{"a.b.c": "text"}`` entries."""
    flat: dict[str, str] = {}
    for raw_key, value in payload.items():
        key = f"{prefix}{raw_key}"
        if isinstance(value, dict):
            flat.update(_flatten(value, f"{key}."))
        elif value is not None:
            flat[key] = str(value)
    return flat


class Catalog:
    """In-memory message catalog keyed by dotted paths."""

    def __init__(self, messages: cabc.Mapping[str, typ.Any]) -> None:
        self._messages = _flatten(messages)

    def __contains__(self, key: object) -> bool:
        return key in self._messages

    def __len__(self) -> int:
        return len(self._messages)

    def localize(self, key: str) -> str:
        """Return the message for ``key``, or the key itself when missing."""
        try:
            return self._messages[key]
        except KeyError:
            logger.debug("No message for localization key %r", key)
            return key


def load_catalog(path: Path | None = None) -> Catalog:
    """Load a YAML message catalog, defaulting to the bundled English one.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    TypeError
        If the YAML document is not a mapping.
    """
    source = path or DEFAULT_CATALOG
    if not source.exists():
        msg = f"Message catalog '{source}' not found."
        raise FileNotFoundError(msg)
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with source.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = f"Message catalog '{source}' must be a mapping."
        raise TypeError(msg)
    return Catalog(loaded)


__all__ = ["DEFAULT_CATALOG", "Catalog", "LocalizationProvider", "load_catalog"]
