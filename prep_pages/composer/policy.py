"""Decide what happens to a page's previous-session content.

Each :class:`~prep_pages.composer.models.PageKind` maps to one fixed rule:

========================  ==============================================
Kind                      Previous content present
========================  ==============================================
``NOTES``, ``TEMPLATE``   reuse verbatim when non-blank
``CHECKLIST``             keep only unchecked entries, topped up
``STRONG_START``          regenerate, previous kept under a subheading
========================  ==============================================

Blank or absent previous content always means :class:`Regenerate`.

Example
-------
>>> from prep_pages.composer.models import PageKind
>>> from prep_pages.composer.policy import decide
>>> decide(PageKind.NOTES, "<p>kept</p>")
Verbatim(html='<p>kept</p>')
>>> decide(PageKind.TEMPLATE, "   ")
Regenerate(previous_notes=None)
"""

from __future__ import annotations

import dataclasses as dc

from prep_pages._constants import DEFAULT_CHECKLIST_TARGET
from prep_pages.checklist import extract_checklist
from prep_pages.composer.models import PageKind
from prep_pages.markers import normalize_markers


@dc.dataclass(frozen=True, slots=True)
class Verbatim:
    """Reuse the previous content exactly as stored."""

    html: str


@dc.dataclass(frozen=True, slots=True)
class UncheckedSubset:
    """Rebuild the checklist from the entries nobody ticked.

    Attributes
    ----------
    body : str
        Previous content with its checklist removed.
    items : tuple[str, ...]
        Texts of the unchecked entries, in display order.
    pad_to : int
        Exact number of entries the rebuilt checklist must hold.
    """

    body: str
    items: tuple[str, ...]
    pad_to: int


@dc.dataclass(frozen=True, slots=True)
class Regenerate:
    """Build the page from scratch, optionally keeping earlier notes."""

    previous_notes: str | None = None


CarryForwardDecision = Verbatim | UncheckedSubset | Regenerate


def _has_content(html: str | None) -> bool:
    return bool(html and html.strip())


def decide(
    kind: PageKind,
    previous_html: str | None,
    *,
    pad_to: int = DEFAULT_CHECKLIST_TARGET,
) -> CarryForwardDecision:
    """Return the carry-forward decision for a page of ``kind``.

    Parameters
    ----------
    kind : PageKind
        Policy family of the page being generated.
    previous_html : str or None
        The page's content from the previous session, if any.
    pad_to : int, optional
        Checklist length for ``CHECKLIST`` pages. Defaults to ``10``.

    Raises
    ------
    TypeError
        If ``kind`` is not a known :class:`PageKind`.
    """
    match kind:
        case PageKind.NOTES | PageKind.TEMPLATE:
            if _has_content(previous_html):
                return Verbatim(_as_text(previous_html))
            return Regenerate()
        case PageKind.CHECKLIST:
            if not previous_html:
                return Regenerate()
            extracted = extract_checklist(normalize_markers(previous_html))
            return UncheckedSubset(
                body=extracted.body_without_checklist,
                items=tuple(extracted.unchecked_texts),
                pad_to=pad_to,
            )
        case PageKind.STRONG_START:
            if _has_content(previous_html):
                return Regenerate(previous_notes=_as_text(previous_html))
            return Regenerate()
        case _:
            msg = f"Unknown page kind {kind!r}."
            raise TypeError(msg)


def _as_text(value: str | None) -> str:
    """Return ``value`` as a string (``None`` becomes empty)."""
    return "" if value is None else str(value)


__all__ = [
    "CarryForwardDecision",
    "Regenerate",
    "UncheckedSubset",
    "Verbatim",
    "decide",
]
