"""Compose the next session's page HTML from its definition and prior content.

:class:`CarryForwardComposer` applies the decision returned by
:func:`~prep_pages.composer.policy.decide` and renders whatever scaffolding the
decision calls for. It is synchronous, keeps no state between calls, and
never raises on malformed previous content: the worst case is that the page
falls back to fresh scaffolding.

Example
-------
>>> from prep_pages.composer import CarryForwardComposer
>>> from prep_pages.localization import load_catalog
>>> from prep_pages.steps import get_step
>>> composer = CarryForwardComposer(load_catalog())
>>> html = composer.compose(get_step("secrets-clues"), None)
>>> html.count("<li>☐ Clue</li>")
10
"""

from __future__ import annotations

import logging
import typing as typ

from prep_pages._constants import DEFAULT_CHECKLIST_TARGET, DEFAULT_FILLER_LABEL
from prep_pages.checklist import render_checklist, top_up
from prep_pages.composer.models import ComposedPage, PageDefinition, PageKind
from prep_pages.composer.policy import (
    Regenerate,
    UncheckedSubset,
    Verbatim,
    decide,
)
from prep_pages.composer.scaffolding import ScaffoldRenderer, strip_scaffolding

if typ.TYPE_CHECKING:
    from prep_pages.config import PrepConfig
    from prep_pages.localization import LocalizationProvider

logger = logging.getLogger(__name__)


class CarryForwardComposer:
    """Turn ``(definition, previous HTML)`` into the new page's HTML."""

    def __init__(
        self,
        localizer: LocalizationProvider,
        config: PrepConfig | None = None,
        *,
        renderer: ScaffoldRenderer | None = None,
    ) -> None:
        self.localizer = localizer
        self.renderer = renderer or ScaffoldRenderer(localizer, config)

    def compose(self, definition: PageDefinition, previous_html: str | None) -> str:
        """Return the final HTML for ``definition``.

        Parameters
        ----------
        definition : PageDefinition
            Which step is being generated and how its content carries over.
        previous_html : str or None
            The step's content from the previous session, or ``None`` when
            there was no previous session or carry-forward is disabled.

        Returns
        -------
        str
            HTML to store as the new page's content.
        """
        decision = decide(
            definition.kind, previous_html, pad_to=DEFAULT_CHECKLIST_TARGET
        )
        match decision:
            case Verbatim(html=html):
                logger.debug("Reusing previous content for %s", definition.key)
                return html
            case UncheckedSubset():
                return self._rebuild_checklist(definition, decision)
            case Regenerate(previous_notes=previous_notes):
                return self._scaffold(definition, previous_notes)
        msg = f"Unhandled carry-forward decision {decision!r}."
        raise TypeError(msg)

    def compose_page(
        self, definition: PageDefinition, previous_html: str | None
    ) -> ComposedPage:
        """Return the composed content together with its localized name."""
        return ComposedPage(
            key=definition.key,
            name=self.localizer.localize(definition.title_key),
            content=self.compose(definition, previous_html),
        )

    def _preamble(self, definition: PageDefinition) -> str:
        """Return description + prompts + notes, the checklist page header."""
        return (
            self.renderer.description(definition.desc_key)
            + self.renderer.prompts(
                definition.prompt_keys, definition.prompts_heading_key
            )
            + self.renderer.notes()
        )

    def _rebuild_checklist(
        self, definition: PageDefinition, decision: UncheckedSubset
    ) -> str:
        texts = top_up(decision.items, decision.pad_to, DEFAULT_FILLER_LABEL)
        logger.debug(
            "Carrying %d unchecked entries forward for %s",
            len(decision.items),
            definition.key,
        )
        checklist = render_checklist(texts)
        body = decision.body.strip()
        if body:
            return f"{body}\n{checklist}"
        return self._preamble(definition) + checklist

    def _scaffold(self, definition: PageDefinition, previous_notes: str | None) -> str:
        renderer = self.renderer
        match definition.kind:
            case PageKind.NOTES:
                return renderer.description(definition.desc_key) + renderer.notes()
            case PageKind.CHECKLIST:
                empty = top_up([], DEFAULT_CHECKLIST_TARGET, DEFAULT_FILLER_LABEL)
                return self._preamble(definition) + render_checklist(empty)
            case PageKind.TEMPLATE:
                html = renderer.description(definition.desc_key)
                html += renderer.prompts(
                    definition.prompt_keys, definition.prompts_heading_key
                )
                html += "".join(renderer.block(name) for name in definition.blocks)
                return html
            case PageKind.STRONG_START:
                html = self._preamble(definition) + renderer.d20_table()
                reference = html + renderer.previous_notes("")
                carried = (
                    strip_scaffolding(previous_notes, reference)
                    if previous_notes
                    else ""
                )
                if carried:
                    html += renderer.previous_notes(carried)
                return html
        msg = f"Unknown page kind {definition.kind!r}."
        raise TypeError(msg)


__all__ = ["CarryForwardComposer"]
