"""High-level orchestration for generating a session prep journal.

:class:`SessionPrepGenerator` walks the step registry, asks a
:class:`~prep_pages.previous.PreviousContentProvider` for each step's prior
content (unless carry-forward is disabled), composes every page, and either
returns one page per step or folds them into a single combined page split by
``<h2>`` headings. :meth:`SessionPrepGenerator.run` writes the result to disk.

Example
-------
>>> from pathlib import Path
>>> from prep_pages.config import PrepConfig
>>> from prep_pages.localization import load_catalog
>>> from prep_pages.session import SessionPrepGenerator
>>> generator = SessionPrepGenerator(PrepConfig(), load_catalog())
>>> [page.key for page in generator.build_pages()][-1]
'other-notes'
>>> generator.run(Path("prep"))  # doctest: +SKIP
[PosixPath('prep/prep-review-characters.html'), ...]
"""

from __future__ import annotations

import datetime as dt
import json
import logging
import re
import typing as typ
from html import escape

from prep_pages._constants import JOURNAL_EXPORT_FILENAME, PAGE_FILENAME_TEMPLATE
from prep_pages.composer import CarryForwardComposer, ComposedPage
from prep_pages.previous import COMBINED_PAGE_KEY
from prep_pages.steps import STEP_ORDER

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from prep_pages.composer.models import PageDefinition
    from prep_pages.config import PrepConfig
    from prep_pages.localization import LocalizationProvider
    from prep_pages.previous import PreviousContentProvider

logger = logging.getLogger(__name__)

COMBINED_PAGE_SLUG = "combined"


class SessionPrepGenerator:
    """Compose every prep step for the next session."""

    def __init__(
        self,
        config: PrepConfig,
        localizer: LocalizationProvider,
        previous: PreviousContentProvider | None = None,
        *,
        steps: cabc.Sequence[PageDefinition] = STEP_ORDER,
    ) -> None:
        """Initialize the generator.

        Parameters
        ----------
        config : PrepConfig
            Layout and carry-forward settings for this session.
        localizer : LocalizationProvider
            Resolves step titles and scaffolding text.
        previous : PreviousContentProvider, optional
            Source of last session's content; ``None`` means this is the first
            session.
        steps : Sequence[PageDefinition], optional
            Steps to compose, in display order. Defaults to the full registry.
        """
        self.config = config
        self.localizer = localizer
        self.previous = previous
        self.steps = tuple(steps)
        self.composer = CarryForwardComposer(localizer, config)

    def journal_name(self, number: int, date: dt.date | None = None) -> str:
        """Return ``"<prefix> <number> - <YYYY-MM-DD>"`` for a new journal.

        The date suffix is omitted when ``include_date`` is disabled.
        """
        name = f"{self.config.journal_prefix} {number}"
        if not self.config.include_date:
            return name
        stamp = (date or dt.datetime.now(dt.UTC).date()).isoformat()
        return f"{name} - {stamp}"

    def _previous_for(self, definition: PageDefinition) -> str | None:
        if self.previous is None or not self.config.copy_previous:
            return None
        return self.previous.fetch(definition)

    def compose_steps(self) -> list[ComposedPage]:
        """Compose one page per step, in registry order."""
        pages: list[ComposedPage] = []
        for definition in self.steps:
            page = self.composer.compose_page(
                definition, self._previous_for(definition)
            )
            logger.debug("Composed %s (%d chars)", definition.key, len(page.content))
            pages.append(page)
        return pages

    def build_pages(self) -> list[ComposedPage]:
        """Return the session's pages in the configured layout.

        With ``separate_pages`` every step is its own page. Otherwise a single
        page named after the module holds ``<h2>title</h2>`` followed by each
        step's content, which :func:`prep_pages.sections.extract_section` can
        split again next session.
        """
        pages = self.compose_steps()
        if self.config.separate_pages:
            return pages
        content = "".join(
            f"<h2>{escape(page.name, quote=False)}</h2>\n{page.content}\n"
            for page in pages
        )
        return [
            ComposedPage(
                key=COMBINED_PAGE_SLUG,
                name=self.localizer.localize(COMBINED_PAGE_KEY),
                content=content,
            )
        ]

    def run(
        self, output_dir: Path | None = None, *, journal_name: str | None = None
    ) -> list[Path]:
        """Write every page as ``prep-<key>.html`` and return the paths.

        Parameters
        ----------
        output_dir : Path, optional
            Destination directory; defaults to the configured ``output_dir``.
        journal_name : str, optional
            Name recorded in ``journal.json``; defaults to
            ``journal_name(0)``.

        Returns
        -------
        list[Path]
            Paths to the written HTML pages, in layout order.

        Notes
        -----
        Side effects include creating the output directory, overwriting
        existing page files, and writing ``journal.json``, an export in the
        format :func:`prep_pages.previous.load_journals` reads, so the next
        session can carry content forward from this one.
        """
        out_dir = output_dir or self.config.output_dir
        out_dir.mkdir(parents=True, exist_ok=True)
        pages = self.build_pages()
        written: list[Path] = []
        for page in pages:
            filename = PAGE_FILENAME_TEMPLATE.format(slug=_slugify(page.key))
            path = out_dir / filename
            path.write_text(page.content, encoding="utf-8")
            written.append(path)
        self._write_export(out_dir, journal_name or self.journal_name(0), pages)
        logger.info("Wrote %d prep page(s) to %s", len(written), out_dir)
        return written

    def _write_export(
        self, out_dir: Path, journal_name: str, pages: list[ComposedPage]
    ) -> None:
        """Persist the journal export that records this session's pages."""
        payload = {
            "name": journal_name,
            "folder": self.config.folder_name,
            "pages": [
                {"name": page.name, "type": "text", "content": page.content}
                for page in pages
            ],
        }
        path = out_dir / JOURNAL_EXPORT_FILENAME
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def _slugify(value: str) -> str:
    """Convert a string into a lowercase hyphen-separated slug."""
    return re.sub(r"[^a-z0-9]+", "-", value.lower()).strip("-") or "page"


__all__ = ["COMBINED_PAGE_SLUG", "SessionPrepGenerator"]
