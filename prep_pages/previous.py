"""Locate the previous session's content for each prep step.

The host journal store is represented by plain snapshots
(:class:`JournalSnapshot` holding :class:`PageSnapshot` entries), typically
loaded from a JSON export with :func:`load_journals`. Lookups follow the two
layouts a session can be written in: one page per step, or a single combined
page split by ``<h2>`` headings.

Example
-------
>>> from prep_pages.previous import JournalSnapshot, find_previous_session
>>> journals = [JournalSnapshot("Session 2"), JournalSnapshot("Session 10")]
>>> find_previous_session(journals, "Session").name
'Session 10'
"""

from __future__ import annotations

import dataclasses as dc
import json
import logging
import re
import typing as typ

from prep_pages.sections import extract_section

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from prep_pages.composer.models import PageDefinition
    from prep_pages.localization import LocalizationProvider

logger = logging.getLogger(__name__)

SESSION_NUMBER_PATTERN = re.compile(r"\b(\d+)\b")
COMBINED_PAGE_KEY = "prep.module.name"


@dc.dataclass(frozen=True, slots=True)
class PageSnapshot:
    """One journal page as exported from the host."""

    name: str
    content: str | None = None
    type: str = "text"


@dc.dataclass(frozen=True, slots=True)
class JournalSnapshot:
    """One journal entry and its pages."""

    name: str
    pages: tuple[PageSnapshot, ...] = ()

    def find_page(self, name: str) -> PageSnapshot | None:
        """Return the first page called exactly ``name``."""
        return next((page for page in self.pages if page.name == name), None)


class PreviousContentProvider(typ.Protocol):
    """Supplies a step's previous-session HTML, or ``None`` when absent."""

    def fetch(self, definition: PageDefinition) -> str | None:
        """Return the previous content for ``definition``."""
        ...


def session_number(name: str) -> int:
    """Return the first standalone integer in ``name``, or 0 when absent."""
    match = SESSION_NUMBER_PATTERN.search(name or "")
    return int(match.group(1)) if match else 0


def _session_journals(
    journals: cabc.Iterable[JournalSnapshot], prefix: str
) -> list[JournalSnapshot]:
    return [journal for journal in journals if (journal.name or "").startswith(prefix)]


def next_sequence_number(journals: cabc.Iterable[JournalSnapshot], prefix: str) -> int:
    """Return the number for the next session journal.

    ``0`` when no journal starts with ``prefix``; otherwise one more than the
    highest session number found.
    """
    existing = _session_journals(journals, prefix)
    if not existing:
        return 0
    return max(session_number(journal.name) for journal in existing) + 1


def find_previous_session(
    journals: cabc.Iterable[JournalSnapshot], prefix: str
) -> JournalSnapshot | None:
    """Return the highest-numbered journal whose name starts with ``prefix``."""
    existing = _session_journals(journals, prefix)
    if not existing:
        return None
    return max(existing, key=lambda journal: session_number(journal.name))


def previous_section_html(
    journal: JournalSnapshot | None, title: str, combined_name: str
) -> str | None:
    """Return the previous content for the step titled ``title``.

    Parameters
    ----------
    journal : JournalSnapshot or None
        The previous session's journal.
    title : str
        Localized step title; matches a separate page name or a combined-page
        ``<h2>`` heading.
    combined_name : str
        Localized name of the combined page.

    Returns
    -------
    str or None
        The separate page's content when one exists with content, else the
        matching section of the combined page, else ``None``.
    """
    if journal is None:
        return None
    separate = journal.find_page(title)
    if separate is not None and separate.content:
        return separate.content
    host = next(
        (
            page
            for page in journal.pages
            if page.name == combined_name and page.content
        ),
        None,
    ) or next(
        (page for page in journal.pages if page.type == "text" and page.content),
        None,
    )
    if host is None:
        return None
    return extract_section(host.content, title)


class JournalContentProvider:
    """:class:`PreviousContentProvider` backed by a journal snapshot."""

    def __init__(
        self, journal: JournalSnapshot | None, localizer: LocalizationProvider
    ) -> None:
        self.journal = journal
        self.localizer = localizer

    def fetch(self, definition: PageDefinition) -> str | None:
        """Return the previous content for ``definition``'s step."""
        title = self.localizer.localize(definition.title_key)
        combined_name = self.localizer.localize(COMBINED_PAGE_KEY)
        content = previous_section_html(self.journal, title, combined_name)
        if content is None and self.journal is not None:
            logger.debug("No previous content for %r in %s", title, self.journal.name)
        return content


def _page_from_payload(payload: typ.Mapping[str, typ.Any]) -> PageSnapshot:
    text = payload.get("text")
    content = payload.get("content")
    if content is None and isinstance(text, dict):
        content = text.get("content")
    return PageSnapshot(
        name=str(payload.get("name") or ""),
        content=None if content is None else str(content),
        type=str(payload.get("type") or "text"),
    )


def load_journals(path: Path) -> list[JournalSnapshot]:
    """Load journal snapshots from a JSON export.

    The export is a list of journals, an object with a ``journals`` list, or
    a single journal object (as written by
    :meth:`prep_pages.session.SessionPrepGenerator.run`). Each journal holds
    ``name`` and ``pages``. Page content may be given as
    ``content`` or in the host's nested ``text.content`` form.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    TypeError
        If the document does not hold a list of journal objects.
    json.JSONDecodeError
        If the file is not valid JSON.
    """
    if not path.exists():
        msg = f"Journal export '{path}' not found."
        raise FileNotFoundError(msg)
    payload = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(payload, dict):
        payload = payload["journals"] if "journals" in payload else [payload]
    if not isinstance(payload, list):
        msg = "Journal export must contain a list of journals."
        raise TypeError(msg)
    journals: list[JournalSnapshot] = []
    for entry in payload:
        if not isinstance(entry, dict):
            continue
        pages = tuple(
            _page_from_payload(page)
            for page in entry.get("pages") or []
            if isinstance(page, dict)
        )
        journals.append(JournalSnapshot(name=str(entry.get("name") or ""), pages=pages))
    return journals


__all__ = [
    "COMBINED_PAGE_KEY",
    "JournalContentProvider",
    "JournalSnapshot",
    "PageSnapshot",
    "PreviousContentProvider",
    "find_previous_session",
    "load_journals",
    "next_sequence_number",
    "previous_section_html",
    "session_number",
]
