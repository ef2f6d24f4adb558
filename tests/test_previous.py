"""Unit tests for locating and loading previous-session content."""

from __future__ import annotations

import json
import typing as typ

import pytest

from prep_pages.previous import (
    JournalContentProvider,
    JournalSnapshot,
    PageSnapshot,
    find_previous_session,
    load_journals,
    next_sequence_number,
    previous_section_html,
    session_number,
)
from prep_pages.steps import get_step

if typ.TYPE_CHECKING:
    from pathlib import Path

    from prep_pages.localization import Catalog

JOURNALS = [
    JournalSnapshot("Session 2 - 2026-01-08"),
    JournalSnapshot("Session 10 - 2026-03-19"),
    JournalSnapshot("Session 9"),
    JournalSnapshot("Campaign 42"),
]


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Session 4 - 2026-02-12", 4),
        ("Session 12", 12),
        ("Session", 0),
        ("", 0),
        ("Session4", 0),
    ],
)
def test_session_number(name: str, expected: int) -> None:
    assert session_number(name) == expected


def test_next_sequence_number_is_highest_plus_one() -> None:
    assert next_sequence_number(JOURNALS, "Session") == 11


def test_next_sequence_number_starts_at_zero() -> None:
    assert next_sequence_number([], "Session") == 0
    assert next_sequence_number([JournalSnapshot("Campaign 1")], "Session") == 0


def test_find_previous_session_picks_highest_number() -> None:
    found = find_previous_session(JOURNALS, "Session")
    assert found is not None
    assert found.name == "Session 10 - 2026-03-19", "numeric, not lexical, order"
    assert find_previous_session(JOURNALS, "Night") is None


def test_separate_page_is_preferred() -> None:
    journal = JournalSnapshot(
        "Session 1",
        (
            PageSnapshot("Session Prep", "<h2>Other Notes</h2><p>combined</p>"),
            PageSnapshot("Other Notes", "<p>separate</p>"),
        ),
    )
    html = previous_section_html(journal, "Other Notes", "Session Prep")
    assert html == "<p>separate</p>"


def test_empty_separate_page_falls_back_to_combined_section() -> None:
    journal = JournalSnapshot(
        "Session 1",
        (
            PageSnapshot("Other Notes", ""),
            PageSnapshot("Session Prep", "<h2>Other Notes</h2><p>combined</p>"),
        ),
    )
    html = previous_section_html(journal, "Other Notes", "Session Prep")
    assert html == "<p>combined</p>"


def test_first_text_page_is_used_when_combined_name_differs() -> None:
    journal = JournalSnapshot(
        "Session 1",
        (
            PageSnapshot("Map", None, type="image"),
            PageSnapshot("Renamed", "<h2>Other Notes</h2><p>found</p>"),
        ),
    )
    assert previous_section_html(journal, "Other Notes", "Session Prep") == (
        "<p>found</p>"
    )


def test_missing_journal_or_section_returns_none() -> None:
    assert previous_section_html(None, "Other Notes", "Session Prep") is None
    journal = JournalSnapshot("Session 1", (PageSnapshot("Session Prep", "<p/>"),))
    assert previous_section_html(journal, "Other Notes", "Session Prep") is None


def test_provider_uses_localized_titles(catalog: Catalog) -> None:
    journal = JournalSnapshot(
        "Session 3",
        (PageSnapshot("2. Create a Strong Start", "<p>Ambush</p>"),),
    )
    provider = JournalContentProvider(journal, catalog)
    assert provider.fetch(get_step("strong-start")) == "<p>Ambush</p>"
    assert provider.fetch(get_step("other-notes")) is None
    assert JournalContentProvider(None, catalog).fetch(get_step("other-notes")) is None


_HTML = "<p>a</p>"
_JOURNAL = {"name": "Session 1", "pages": [{"name": "A", "content": _HTML}]}


@pytest.mark.parametrize(
    "payload",
    [
        [_JOURNAL],
        {"journals": [_JOURNAL]},
        {"name": "Session 1", "pages": [{"name": "A", "text": {"content": _HTML}}]},
    ],
)
def test_load_journals_accepts_export_shapes(tmp_path: Path, payload: object) -> None:
    path = tmp_path / "journals.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    journals = load_journals(path)
    assert journals == [
        JournalSnapshot("Session 1", (PageSnapshot("A", "<p>a</p>", "text"),))
    ]


def test_load_journals_skips_malformed_entries(tmp_path: Path) -> None:
    path = tmp_path / "journals.json"
    payload = [
        "not a journal",
        {"name": "Session 2", "pages": ["bad", {"name": "B", "type": "image"}]},
    ]
    path.write_text(json.dumps(payload), encoding="utf-8")
    assert load_journals(path) == [
        JournalSnapshot("Session 2", (PageSnapshot("B", None, "image"),))
    ]


def test_load_journals_errors(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="not found"):
        load_journals(tmp_path / "absent.json")
    path = tmp_path / "scalar.json"
    path.write_text("42", encoding="utf-8")
    with pytest.raises(TypeError, match="list of journals"):
        load_journals(path)
