"""Tests for the ``prep`` CLI commands.

The command functions are called directly, as the Cyclopts app would after
parsing, and their stdout is captured with ``capsys``.
"""

from __future__ import annotations

import json
import logging
import typing as typ

import pytest
from bs4 import BeautifulSoup

from prep_pages import cli
from prep_pages.logging_setup import configure_logging

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from pytest_mock import MockerFixture


def test_compose_prints_fresh_page(capsys: pytest.CaptureFixture[str]) -> None:
    cli.compose("secrets-clues")
    soup = BeautifulSoup(capsys.readouterr().out, "html.parser")
    assert len(soup.select("ul.lgmp-checklist > li")) == 10


def test_compose_reads_previous_file(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    previous = tmp_path / "secrets.html"
    previous.write_text(
        '<ul class="lgmp-checklist"><li>[x] Solved</li><li>[ ] Open lead</li></ul>',
        encoding="utf-8",
    )
    cli.compose("secrets-clues", previous=previous)
    out = capsys.readouterr().out
    assert "☐ Open lead" in out
    assert "Solved" not in out


def test_compose_rejects_unknown_step() -> None:
    with pytest.raises(KeyError, match="Unknown step"):
        cli.compose("dungeon-map")


def test_session_writes_first_session(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.chdir(tmp_path)
    config = tmp_path / "prep.yaml"
    config.write_text(
        "defaults:\n  include_date: false\n  separate_pages: false\n",
        encoding="utf-8",
    )
    cli.session(config=config, output_dir=tmp_path / "out")
    out = capsys.readouterr().out.splitlines()
    assert out == ["wrote out/prep-combined.html", "journal Session 0"]


def test_session_numbers_after_previous_journal(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config = tmp_path / "prep.yaml"
    config.write_text("defaults:\n  include_date: false\n", encoding="utf-8")
    journals = tmp_path / "journals.json"
    journals.write_text(
        json.dumps(
            [
                {
                    "name": "Session 3",
                    "pages": [{"name": "Other Notes", "content": "<p>Ferry</p>"}],
                }
            ]
        ),
        encoding="utf-8",
    )
    out_dir = tmp_path / "out"
    cli.session(journals=journals, config=config, output_dir=out_dir)
    assert capsys.readouterr().out.splitlines()[-1] == "journal Session 4"
    notes = (out_dir / "prep-other-notes.html").read_text(encoding="utf-8")
    assert notes == "<p>Ferry</p>"


def test_section_prints_matching_section(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    page = tmp_path / "combined.html"
    page.write_text("<h2>A</h2><p>a</p><h2>B</h2><p>b</p>", encoding="utf-8")
    cli.section(page, "A")
    assert capsys.readouterr().out == "<p>a</p>\n"


def test_section_exits_when_heading_missing(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    page = tmp_path / "combined.html"
    page.write_text("<h2>A</h2><p>a</p>", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        cli.section(page, "Z")
    assert excinfo.value.code == 1
    assert capsys.readouterr().out == "section 'Z' not found\navailable: A\n"


def test_main_configures_logging_from_environment(
    monkeypatch: pytest.MonkeyPatch, mocker: MockerFixture
) -> None:
    monkeypatch.setenv("PREP_LOG_LEVEL", "debug")
    configure = mocker.patch.object(cli, "configure_logging")
    app = mocker.patch.object(cli, "app")
    cli.main()
    configure.assert_called_once_with("debug")
    app.assert_called_once_with()


@pytest.fixture
def root_logger() -> cabc.Iterator[logging.Logger]:
    """Yield the root logger and restore its handlers and level afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        ("debug", logging.DEBUG),
        (" Info ", logging.INFO),
        ("10", logging.DEBUG),
        (logging.ERROR, logging.ERROR),
        ("chatty", logging.WARNING),
        (None, logging.WARNING),
    ],
)
def test_configure_logging_levels(
    root_logger: logging.Logger, level: str | int | None, expected: int
) -> None:
    configure_logging("info")
    assert configure_logging(level) == expected
    assert root_logger.level == expected
    assert len(root_logger.handlers) == 1, "handlers must not pile up"


def test_section_missing_on_page_without_headings(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    page = tmp_path / "combined.html"
    page.write_text("<p>loose text</p>", encoding="utf-8")
    with pytest.raises(SystemExit):
        cli.section(page, "Z")
    assert capsys.readouterr().out == "section 'Z' not found\n"
