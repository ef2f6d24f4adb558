"""Common literal values used across prep_pages.

The checklist glyphs form a closed alphabet: the marker normalizer only ever
emits these two code points and the checklist extractor only recognizes them
(plus bracket notation), so carried-forward pages round-trip cleanly.

Examples
--------
>>> from prep_pages import _constants
>>> _constants.CHECKED_GLYPH, _constants.UNCHECKED_GLYPH
('☑', '☐')
>>> _constants.PAGE_FILENAME_TEMPLATE.format(slug="strong-start")
'prep-strong-start.html'
"""

CHECKED_GLYPH = "☑"
UNCHECKED_GLYPH = "☐"

CHECKLIST_CLASS = "lgmp-checklist"
DEFAULT_CHECKLIST_TARGET = 10
DEFAULT_FILLER_LABEL = "Clue"

SECTION_HEADING_TAG = "h2"
PAGE_FILENAME_TEMPLATE = "prep-{slug}.html"
JOURNAL_EXPORT_FILENAME = "journal.json"
