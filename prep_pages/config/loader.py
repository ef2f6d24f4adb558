"""Load prep configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import _as_bool, _optional_str, _positive_int, _required_str
from .models import PrepConfig


def load_prep_config(path: Path | None) -> PrepConfig:
    """Load the YAML configuration describing how sessions are generated.

    Parameters
    ----------
    path : Path or None
        Filesystem path to the YAML configuration file (for example,
        ``prep.yaml``). ``None`` returns the built-in defaults.

    Returns
    -------
    PrepConfig
        Parsed configuration with defaults applied for missing keys. A
        relative ``locale`` path is resolved against the file's directory.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure (or its ``defaults`` block) is not a
        mapping.
    PrepConfigError
        If a value is present but invalid (blank prefix, non-positive counts,
        non-boolean flags).
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from prep_pages.config import load_prep_config
    >>> load_prep_config(None).journal_prefix
    'Session'
    """
    if path is None:
        return PrepConfig()
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    defaults = raw.get("defaults", {}) or {}
    if not isinstance(defaults, dict):
        msg = "'defaults' must be a mapping."
        raise TypeError(msg)

    base = PrepConfig()
    locale = _optional_str(defaults.get("locale"))
    locale_path = Path(locale) if locale else None
    if locale_path is not None and not locale_path.is_absolute():
        locale_path = path.parent / locale_path
    output_dir = _optional_str(defaults.get("output_dir"))

    return PrepConfig(
        separate_pages=_as_bool(
            "separate_pages", defaults.get("separate_pages"), base.separate_pages
        ),
        folder_name=_required_str(
            "folder_name", defaults.get("folder_name"), base.folder_name
        ),
        journal_prefix=_required_str(
            "journal_prefix", defaults.get("journal_prefix"), base.journal_prefix
        ),
        include_date=_as_bool(
            "include_date", defaults.get("include_date"), base.include_date
        ),
        copy_previous=_as_bool(
            "copy_previous", defaults.get("copy_previous"), base.copy_previous
        ),
        table_rows=_positive_int(
            "table_rows", defaults.get("table_rows"), base.table_rows
        ),
        scene_cards=_positive_int(
            "scene_cards", defaults.get("scene_cards"), base.scene_cards
        ),
        location_cards=_positive_int(
            "location_cards", defaults.get("location_cards"), base.location_cards
        ),
        locale=locale_path,
        output_dir=Path(output_dir) if output_dir else base.output_dir,
    )


__all__ = ["load_prep_config"]
