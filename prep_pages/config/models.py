"""Typed dataclasses describing session prep configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path


class PrepConfigError(ValueError):
    """Raised when the prep configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class PrepConfig:
    """Settings that shape one session's generated journal.

    Attributes
    ----------
    separate_pages : bool
        Write one page per prep step; when False all steps share a single
        combined page split by ``<h2>`` headings.
    folder_name : str
        Journal folder the generated session is filed under.
    journal_prefix : str
        Leading word of every session journal name (``"Session 4 - ..."``).
    include_date : bool
        Append the ISO generation date to the journal name.
    copy_previous : bool
        Carry content forward from the previous session's journal.
    table_rows : int
        Empty rows in the character and NPC tables.
    scene_cards : int
        Blank scene cards on the outline page.
    location_cards : int
        Blank location cards on the fantastic locations page.
    locale : Path | None
        Optional YAML message catalog replacing the bundled English one.
    output_dir : Path
        Directory that ``prep session`` writes pages into.
    """

    separate_pages: bool = True
    folder_name: str = "Lazy GM Prep"
    journal_prefix: str = "Session"
    include_date: bool = True
    copy_previous: bool = True
    table_rows: int = 5
    scene_cards: int = 3
    location_cards: int = 3
    locale: Path | None = None
    output_dir: Path = Path("prep")


__all__ = ["PrepConfig", "PrepConfigError"]
