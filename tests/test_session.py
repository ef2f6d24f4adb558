"""Unit tests for :class:`prep_pages.session.SessionPrepGenerator`."""

from __future__ import annotations

import datetime as dt
import json
import typing as typ

import pytest
from bs4 import BeautifulSoup

from prep_pages.config import PrepConfig
from prep_pages.previous import JournalContentProvider, load_journals
from prep_pages.sections import extract_section, list_section_titles
from prep_pages.session import SessionPrepGenerator
from prep_pages.steps import STEP_ORDER

if typ.TYPE_CHECKING:
    from pathlib import Path

    from prep_pages.composer import PageDefinition
    from prep_pages.localization import Catalog


class _StaticProvider:
    """Previous-content provider backed by a ``{step key: html}`` mapping."""

    def __init__(self, content: dict[str, str]) -> None:
        self.content = content
        self.requested: list[str] = []

    def fetch(self, definition: PageDefinition) -> str | None:
        self.requested.append(definition.key)
        return self.content.get(definition.key)


def _markup(html: str) -> str:
    """Return ``html`` as BeautifulSoup serializes it, ignoring outer whitespace."""
    return BeautifulSoup(html.strip(), "html.parser").decode_contents()


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def test_journal_name_includes_iso_date(catalog: Catalog) -> None:
    generator = SessionPrepGenerator(PrepConfig(), catalog)
    assert generator.journal_name(4, dt.date(2026, 2, 12)) == "Session 4 - 2026-02-12"


def test_journal_name_without_date(catalog: Catalog) -> None:
    config = PrepConfig(include_date=False, journal_prefix="Night")
    generator = SessionPrepGenerator(config, catalog)
    assert generator.journal_name(0) == "Night 0"


def test_separate_layout_has_one_page_per_step(catalog: Catalog) -> None:
    pages = SessionPrepGenerator(PrepConfig(), catalog).build_pages()
    assert [page.key for page in pages] == [step.key for step in STEP_ORDER]
    assert pages[0].name == "1. Review the Characters"
    assert pages[-1].name == "Other Notes"


def test_combined_layout_splits_back_into_steps(catalog: Catalog) -> None:
    config = PrepConfig(separate_pages=False)
    generator = SessionPrepGenerator(config, catalog)
    separate = generator.compose_steps()
    (combined,) = generator.build_pages()
    assert combined.key == "combined"
    assert combined.name == "Session Prep"
    assert list_section_titles(combined.content) == [page.name for page in separate]
    for page in separate:
        section = extract_section(combined.content, page.name)
        assert section is not None, f"missing section {page.name!r}"
        assert _markup(section) == _markup(page.content), (
            f"section {page.name!r} should hold the step's content"
        )


def test_previous_content_is_carried(catalog: Catalog) -> None:
    provider = _StaticProvider({"other-notes": "<p>Remember the ferry</p>"})
    generator = SessionPrepGenerator(PrepConfig(), catalog, provider)
    pages = {page.key: page for page in generator.build_pages()}
    assert pages["other-notes"].content == "<p>Remember the ferry</p>"
    assert provider.requested == [step.key for step in STEP_ORDER]


def test_copy_previous_disabled_skips_provider(catalog: Catalog) -> None:
    provider = _StaticProvider({"other-notes": "<p>Remember the ferry</p>"})
    config = PrepConfig(copy_previous=False)
    pages = SessionPrepGenerator(config, catalog, provider).build_pages()
    assert provider.requested == []
    assert "Remember the ferry" not in pages[-1].content


def test_run_writes_pages_and_journal_export(tmp_path: Path, catalog: Catalog) -> None:
    generator = SessionPrepGenerator(PrepConfig(), catalog)
    written = generator.run(tmp_path / "out", journal_name="Session 0")
    assert [path.name for path in written] == [
        f"prep-{step.key}.html" for step in STEP_ORDER
    ]
    soup = BeautifulSoup(written[3].read_text(encoding="utf-8"), "html.parser")
    assert len(soup.select("ul.lgmp-checklist > li")) == 10

    export = json.loads((tmp_path / "out" / "journal.json").read_text("utf-8"))
    assert export["name"] == "Session 0"
    assert export["folder"] == "Lazy GM Prep"
    assert len(export["pages"]) == len(STEP_ORDER)


def test_run_defaults_to_configured_output_dir(
    tmp_path: Path, catalog: Catalog
) -> None:
    config = PrepConfig(separate_pages=False, output_dir=tmp_path / "prep")
    written = SessionPrepGenerator(config, catalog).run()
    assert written == [tmp_path / "prep" / "prep-combined.html"]


@pytest.mark.parametrize("separate_pages", [True, False])
def test_export_feeds_the_next_session(
    tmp_path: Path, catalog: Catalog, separate_pages: bool
) -> None:
    config = PrepConfig(separate_pages=separate_pages, include_date=False)
    first = SessionPrepGenerator(config, catalog)
    first.run(tmp_path, journal_name=first.journal_name(0))
    (journal,) = load_journals(tmp_path / "journal.json")
    assert journal.name == "Session 0"

    provider = JournalContentProvider(journal, catalog)
    second = {
        page.key: _soup(page.content)
        for page in SessionPrepGenerator(config, catalog, provider).compose_steps()
    }
    clues = [li.get_text() for li in second["secrets-clues"].select("ul > li")]
    assert clues[-10:] == ["☐ Clue"] * 10
    assert len(second["secrets-clues"].select("ul.lgmp-checklist")) == 1
    assert len(second["secrets-clues"].select("div.lgmp-step-desc")) == 1, (
        "the carried preamble must not be duplicated"
    )
    assert second["strong-start"].select("section.lgmp-previous-notes") == [], (
        "an untouched strong start has nothing worth carrying"
    )
    assert len(second["other-notes"].select("p.lgmp-notes-hint")) == 1
