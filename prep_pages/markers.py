r"""Canonicalize checklist markers in user-edited journal HTML.

Previous-session pages mix several ways of recording a ticked clue: rendered
checkbox inputs, Markdown-style bracket notation, and the two glyphs this
package emits. :func:`normalize_markers` folds all of them into ``☑`` and
``☐`` so the checklist extractor only has one alphabet to recognize.

Example
-------
>>> from prep_pages.markers import normalize_markers, split_marker
>>> normalize_markers("[x] Solved  ")
'☑ Solved  '
>>> split_marker("  [ ] Open ")
('☐', 'Open')
"""

from __future__ import annotations

import re

from ._constants import CHECKED_GLYPH, UNCHECKED_GLYPH

CHECKED_INPUT_PATTERN = re.compile(
    r"<input\b(?=[^>]*\btype\s*=\s*['\"]?checkbox\b)"
    r"(?=[^>]*\schecked(?:[\s=/>]|$))[^>]*>",
    re.IGNORECASE,
)
CHECKBOX_INPUT_PATTERN = re.compile(
    r"<input\b(?=[^>]*\btype\s*=\s*['\"]?checkbox\b)[^>]*>", re.IGNORECASE
)
BRACKET_UNCHECKED_PATTERN = re.compile(r"\[\s*\]")
BRACKET_CHECKED_PATTERN = re.compile(r"\[\s*[xX]\s*\]")
LABEL_TAG_PATTERN = re.compile(r"</?label\b[^>]*>", re.IGNORECASE)

_LEADING_MARKERS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(rf"^{CHECKED_GLYPH}\s*"), CHECKED_GLYPH),
    (re.compile(rf"^{UNCHECKED_GLYPH}\s*"), UNCHECKED_GLYPH),
    (re.compile(r"^\[\s*[xX]\s*\]\s*"), CHECKED_GLYPH),
    (re.compile(r"^\[\s*\]\s*"), UNCHECKED_GLYPH),
)


def _normalize_once(text: str) -> str:
    """Apply one replacement pass; checkbox inputs go before bracket notation."""
    text = CHECKED_INPUT_PATTERN.sub(CHECKED_GLYPH, text)
    text = CHECKBOX_INPUT_PATTERN.sub(UNCHECKED_GLYPH, text)
    text = BRACKET_UNCHECKED_PATTERN.sub(UNCHECKED_GLYPH, text)
    text = BRACKET_CHECKED_PATTERN.sub(CHECKED_GLYPH, text)
    return LABEL_TAG_PATTERN.sub("", text)


def normalize_markers(html: str | None) -> str:
    """Return ``html`` with every recognized checkbox marker replaced by a glyph.

    Parameters
    ----------
    html : str or None
        Arbitrary HTML fragment. ``None`` is treated as an empty string.

    Returns
    -------
    str
        The fragment with checked markers replaced by ``☑``, unchecked markers
        by ``☐``, and ``<label>`` wrappers removed. Unrecognized or malformed
        markup is passed through untouched.

    Notes
    -----
    Every replacement shortens the text, so passes are repeated until nothing
    changes; stripping a label can expose a bracket pair that a single pass
    would have missed.
    """
    text = "" if html is None else str(html)
    while True:
        updated = _normalize_once(text)
        if updated == text:
            return text
        text = updated


def split_marker(line: str | None) -> tuple[str, str]:
    """Split a leading checklist marker from ``line``.

    Returns
    -------
    tuple[str, str]
        ``(marker, text)`` where ``marker`` is ``"☑"``, ``"☐"``, or ``""`` when
        the line carries no recognized marker, and ``text`` is the trimmed
        remainder.
    """
    trimmed = (line or "").strip()
    for pattern, glyph in _LEADING_MARKERS:
        match = pattern.match(trimmed)
        if match:
            return glyph, trimmed[match.end() :].strip()
    return "", trimmed


__all__ = ["normalize_markers", "split_marker"]
