"""Extract, filter, and re-render the Secrets & Clues checklist.

The checklist is a ``<ul class="lgmp-checklist">`` whose entries start with a
``☑`` or ``☐`` glyph. When the class is missing the first ``<ul>`` in the page
is treated as the checklist instead; that heuristic can pick up an unrelated
user list, and is kept because earlier pages were written without the class.

Example
-------
>>> from prep_pages.checklist import extract_checklist, top_up
>>> result = extract_checklist(
...     '<p>Intro</p><ul class="lgmp-checklist">'
...     '<li>☑ Found</li><li>☐ Heir</li></ul>'
... )
>>> [(item.text, item.checked) for item in result.items]
[('Found', True), ('Heir', False)]
>>> result.body_without_checklist
'<p>Intro</p>'
>>> top_up(["Heir"], 3)
['Heir', 'Clue', 'Clue']
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from html import escape

from ._constants import (
    CHECKED_GLYPH,
    CHECKLIST_CLASS,
    DEFAULT_CHECKLIST_TARGET,
    DEFAULT_FILLER_LABEL,
    UNCHECKED_GLYPH,
)
from .fragment import HtmlFragment
from .markers import split_marker

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from bs4.element import Tag


@dc.dataclass(frozen=True, slots=True)
class ChecklistItem:
    """One checklist entry.

    Attributes
    ----------
    text : str
        Plain text of the entry with markup and marker removed.
    checked : bool
        Whether the entry was ticked in the previous session.
    """

    text: str
    checked: bool


@dc.dataclass(frozen=True, slots=True)
class ExtractionResult:
    """Split of a page into its checklist entries and everything else.

    Attributes
    ----------
    body_without_checklist : str
        The input fragment with the located list removed (or the input itself
        when no list was found).
    items : tuple[ChecklistItem, ...]
        Non-blank entries in document (display) order.
    """

    body_without_checklist: str
    items: tuple[ChecklistItem, ...] = ()

    @property
    def unchecked_texts(self) -> list[str]:
        """Return the texts of entries that were not ticked."""
        return [item.text for item in self.items if not item.checked]


def _locate_checklist(fragment: HtmlFragment) -> Tag | None:
    found = fragment.select_first(f"ul.{CHECKLIST_CLASS}")
    if found is None:
        found = fragment.select_first("ul")
    return found


def _parse_item(fragment: HtmlFragment, node: Tag) -> ChecklistItem | None:
    marker, text = split_marker(fragment.text_of(node))
    if not text:
        return None
    return ChecklistItem(text=text, checked=marker == CHECKED_GLYPH)


def extract_checklist(html: str | None) -> ExtractionResult:
    """Pull the checklist out of a (normalized) Secrets & Clues page.

    Parameters
    ----------
    html : str or None
        HTML fragment, normally already passed through
        :func:`prep_pages.markers.normalize_markers`.

    Returns
    -------
    ExtractionResult
        The remaining body and the parsed entries. When the page holds no list
        the original ``html`` is returned untouched with no items.
    """
    source = "" if html is None else str(html)
    fragment = HtmlFragment.parse(source)
    checklist = _locate_checklist(fragment)
    if checklist is None:
        return ExtractionResult(body_without_checklist=source)

    items: list[ChecklistItem] = []
    for node in fragment.children(checklist, "li"):
        item = _parse_item(fragment, node)
        if item is not None:
            items.append(item)
    fragment.remove(checklist)
    return ExtractionResult(
        body_without_checklist=fragment.serialize(), items=tuple(items)
    )


def top_up(
    texts: cabc.Iterable[str],
    target: int = DEFAULT_CHECKLIST_TARGET,
    label: str = DEFAULT_FILLER_LABEL,
) -> list[str]:
    """Pad ``texts`` with ``label`` up to ``target`` entries, then truncate.

    Real entries always come first; filler only occupies the slots they leave
    empty, and truncation only bites when the real entries alone exceed
    ``target``.

    Raises
    ------
    ValueError
        If ``target`` is negative.
    """
    if target < 0:
        msg = f"Checklist target must be non-negative, got {target}."
        raise ValueError(msg)
    padded = list(texts)
    padded.extend([label] * max(0, target - len(padded)))
    return padded[:target]


def render_checklist(texts: cabc.Iterable[str]) -> str:
    """Render ``texts`` as a fresh, fully unchecked checklist."""
    entries = "\n".join(f"<li>{UNCHECKED_GLYPH} {escape(text)}</li>" for text in texts)
    return f'\n<ul class="{CHECKLIST_CLASS}">\n{entries}\n</ul>\n'


__all__ = [
    "ChecklistItem",
    "ExtractionResult",
    "extract_checklist",
    "render_checklist",
    "top_up",
]
