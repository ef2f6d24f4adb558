"""Read one step's content back out of a combined prep page.

When a session is generated with ``separate_pages`` disabled, every step is
written into a single page as an ``<h2>`` heading followed by its body. The
next session needs those bodies back individually, so this module slices the
combined page on its second-level headings.

Example
-------
>>> from prep_pages.sections import extract_section
>>> page = "<h2>Intro</h2><p>a</p><h2>Strong Start</h2><p>b</p><h2>Outline</h2>"
>>> extract_section(page, "Strong Start")
'<p>b</p>'
>>> extract_section(page, "strong start") is None
True
"""

from __future__ import annotations

import logging

from bs4.element import Tag

from ._constants import SECTION_HEADING_TAG
from .fragment import HtmlFragment, serialize_nodes

logger = logging.getLogger(__name__)


def _is_section_heading(node: object) -> bool:
    return isinstance(node, Tag) and node.name == SECTION_HEADING_TAG


def list_section_titles(page_html: str | None) -> list[str]:
    """Return the trimmed text of every ``<h2>`` in document order."""
    fragment = HtmlFragment.parse(page_html)
    return [
        fragment.text_of(node).strip()
        for node in fragment.find_all(SECTION_HEADING_TAG)
    ]


def extract_section(page_html: str | None, heading_text: str) -> str | None:
    """Return the HTML between ``heading_text``'s ``<h2>`` and the next one.

    Parameters
    ----------
    page_html : str or None
        Full content of a previous combined page.
    heading_text : str
        Exact heading text to look for; compared after trimming both sides and
        case-sensitively.

    Returns
    -------
    str or None
        Serialized sibling nodes after the first matching heading, up to but
        excluding the next ``<h2>`` sibling. ``None`` when no heading matches
        or the page could not be processed.
    """
    wanted = (heading_text or "").strip()
    try:
        fragment = HtmlFragment.parse(page_html)
        target = next(
            (
                node
                for node in fragment.find_all(SECTION_HEADING_TAG)
                if fragment.text_of(node).strip() == wanted
            ),
            None,
        )
        if target is None:
            return None
        collected = []
        for sibling in fragment.following_siblings(target):
            if _is_section_heading(sibling):
                break
            collected.append(sibling)
        return serialize_nodes(collected)
    except Exception:  # noqa: BLE001 - previous content is untrusted input
        logger.debug("Section %r could not be extracted", wanted, exc_info=True)
        return None


__all__ = ["extract_section", "list_section_titles"]
