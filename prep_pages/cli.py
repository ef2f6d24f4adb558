"""Cyclopts CLI entrypoint for composing session prep pages.

The ``prep`` console script defined here composes a single step's page from a
previous page's HTML, generates a whole session from a journal export, and
pulls one section out of a combined page. Typical usage runs ``prep session``
after each game night so the next session's pages start from whatever was
left unresolved.

Examples
--------
Generate the next session from an exported journal folder:

>>> from prep_pages.cli import app
>>> app(["session", "--journals", "journals.json"])  # doctest: +SKIP

Recompose the Secrets & Clues page from last week's copy:

>>> app(
...     ["compose", "secrets-clues", "--previous", "secrets.html"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import os
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .composer import CarryForwardComposer
from .config import load_prep_config
from .localization import load_catalog
from .logging_setup import configure_logging
from .previous import (
    JournalContentProvider,
    find_previous_session,
    load_journals,
    next_sequence_number,
)
from .sections import extract_section, list_section_titles
from .session import SessionPrepGenerator
from .steps import get_step

app = App(name="prep", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Compose one prep step's page, carrying previous content forward.")
def compose(
    step: typ.Annotated[str, Parameter(help="Step key, e.g. 'secrets-clues'")],
    *,
    previous: typ.Annotated[
        Path | None,
        Parameter(help="HTML file holding the step's previous content"),
    ] = None,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to prep config", env_var="INPUT_CONFIG")
    ] = None,
) -> None:
    """Print the composed HTML for a single step.

    Parameters
    ----------
    step : str
        Registered step key (see :data:`prep_pages.steps.STEP_ORDER`).
    previous : Path or None, optional
        File with the previous session's HTML for this step; when ``None`` the
        page is generated from scratch.
    config : Path or None, optional
        Path to the ``prep.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).

    Raises
    ------
    KeyError
        If ``step`` is not a registered step key.
    FileNotFoundError
        If ``previous`` or ``config`` point at missing files.
    """
    prep_config = load_prep_config(config)
    definition = get_step(step)
    previous_html = previous.read_text(encoding="utf-8") if previous else None
    composer = CarryForwardComposer(load_catalog(prep_config.locale), prep_config)
    print(composer.compose(definition, previous_html))


@app.command(help="Generate the next session's prep pages from a journal export.")
def session(
    *,
    journals: typ.Annotated[
        Path | None,
        Parameter(help="JSON export of existing journals", env_var="INPUT_JOURNALS"),
    ] = None,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to prep config", env_var="INPUT_CONFIG")
    ] = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
) -> None:
    """Compose every step for the next session and write the pages.

    Parameters
    ----------
    journals : Path or None, optional
        Journal export to search for the previous session. When ``None`` the
        session is treated as the first one (number 0, nothing carried).
    config : Path or None, optional
        Path to the ``prep.yaml`` configuration file.
    output_dir : Path or None, optional
        Override for the configured output directory.

    Returns
    -------
    None
        Writes HTML pages plus ``journal.json`` and prints each written path.
    """
    prep_config = load_prep_config(config)
    catalog = load_catalog(prep_config.locale)
    existing = load_journals(journals) if journals else []
    previous_journal = find_previous_session(existing, prep_config.journal_prefix)
    provider = JournalContentProvider(previous_journal, catalog)
    generator = SessionPrepGenerator(prep_config, catalog, provider)
    number = next_sequence_number(existing, prep_config.journal_prefix)
    journal_name = generator.journal_name(number)
    written = generator.run(output_dir, journal_name=journal_name)
    for path in written:
        print(f"wrote {_format_path(path)}")
    print(f"journal {journal_name}")


@app.command(help="Print one heading's section from a combined prep page.")
def section(
    page: typ.Annotated[Path, Parameter(help="HTML file of the combined page")],
    heading: typ.Annotated[str, Parameter(help="Exact <h2> heading text")],
) -> None:
    """Print the HTML between ``heading`` and the next ``<h2>`` in ``page``.

    Raises
    ------
    SystemExit
        With status 1 when no ``<h2>`` matches ``heading``; the headings
        that do exist are listed first.
    """
    page_html = page.read_text(encoding="utf-8")
    extracted = extract_section(page_html, heading)
    if extracted is None:
        print(f"section {heading!r} not found")
        if titles := list_section_titles(page_html):
            print("available: " + ", ".join(titles))
        raise SystemExit(1)
    print(extracted)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``prep`` console command.

    The ``PREP_LOG_LEVEL`` environment variable selects the log level
    (``WARNING`` by default).
    """
    configure_logging(os.getenv("PREP_LOG_LEVEL"))
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
