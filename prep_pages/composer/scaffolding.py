"""Render the default HTML scaffolding for freshly generated prep pages.

Scaffolding is everything the composer writes when it has nothing (or nothing
worth keeping) from the previous session: the step description, the
collapsible prompts block, the notes hint, tables, and template cards. All of
it comes from the Jinja templates in ``prep_pages/templates``; localized
strings may use inline Markdown, rendered with ``markdown``.
"""

from __future__ import annotations

import re
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markdown import markdown

from prep_pages.config import PrepConfig
from prep_pages.fragment import HtmlFragment

if typ.TYPE_CHECKING:
    from bs4.element import Tag

    from prep_pages.localization import LocalizationProvider

D20_SIDES = 20
PARAGRAPH_WRAPPER = re.compile(r"^<p>(.*)</p>$", re.DOTALL)
BLOCK_TEMPLATES: dict[str, str] = {
    "character_table": "character_table.jinja",
    "scene_cards": "scene_cards.jinja",
    "location_cards": "location_cards.jinja",
    "npc_table": "npc_table.jinja",
    "monster_quote": "monster_quote.jinja",
    "notes": "notes.jinja",
}
SCAFFOLD_SELECTORS = (
    "div.lgmp-step-desc",
    "hr.lgmp-divider",
    "details.lgmp-prompts",
    "p.lgmp-notes-hint",
    "h3.lgmp-d20-heading",
    "table.lgmp-d20",
)
PREVIOUS_NOTES_HEADING = "section.lgmp-previous-notes > h3"


def _render_markdown(text: str) -> str:
    normalized = (text or "").strip()
    if not normalized:
        return ""
    return markdown(normalized, output_format="html")


def _render_inline_markdown(text: str) -> str:
    """Render ``text`` as Markdown without the wrapping paragraph."""
    html = _render_markdown(text)
    match = PARAGRAPH_WRAPPER.match(html)
    return match.group(1) if match else html


class ScaffoldRenderer:
    """Render scaffolding snippets with localized text."""

    def __init__(
        self,
        localizer: LocalizationProvider,
        config: PrepConfig | None = None,
        *,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the renderer.

        Parameters
        ----------
        localizer : LocalizationProvider
            Resolves the opaque message keys used by page definitions and
            templates.
        config : PrepConfig, optional
            Supplies table row and card counts; defaults to ``PrepConfig()``.
        templates_dir : Path, optional
            Directory containing the Jinja templates. Defaults to the
            ``prep_pages/templates`` directory when ``None``.
        """
        self.localizer = localizer
        self.config = config or PrepConfig()
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["md"] = _render_markdown
        self.env.filters["md_inline"] = _render_inline_markdown
        self.env.globals["t"] = self.localizer.localize

    def _render(self, template_name: str, **context: typ.Any) -> str:
        context.setdefault("table_rows", self.config.table_rows)
        context.setdefault("rows", self.config.table_rows)
        context.setdefault("scene_cards", self.config.scene_cards)
        context.setdefault("location_cards", self.config.location_cards)
        return self.env.get_template(template_name).render(**context)

    def description(self, desc_key: str) -> str:
        """Return the step description followed by a divider."""
        return self._render(
            "description.jinja", description=self.localizer.localize(desc_key)
        )

    def prompts(
        self,
        prompt_keys: typ.Sequence[str],
        heading_key: str = "prep.prompts.heading",
    ) -> str:
        """Return the collapsible prompts block, or ``""`` with no prompts."""
        if not prompt_keys:
            return ""
        return self._render(
            "prompts.jinja",
            heading=self.localizer.localize(heading_key),
            prompts=[self.localizer.localize(key) for key in prompt_keys],
        )

    def notes(self) -> str:
        """Return the "add your notes here" placeholder paragraph."""
        return self._render("notes.jinja")

    def d20_table(self) -> str:
        """Return the Strong Start d20 table with twenty empty openings."""
        return self._render("d20_table.jinja", sides=D20_SIDES)

    def block(self, name: str) -> str:
        """Render the template block registered under ``name``.

        Raises
        ------
        KeyError
            If ``name`` is not a known block.
        """
        try:
            template_name = BLOCK_TEMPLATES[name]
        except KeyError as exc:
            available = ", ".join(sorted(BLOCK_TEMPLATES))
            msg = f"Unknown template block '{name}'. Known blocks: {available}"
            raise KeyError(msg) from exc
        return self._render(template_name)

    def previous_notes(self, previous_html: str) -> str:
        """Wrap carried-over Strong Start content under a subheading."""
        return self._render("previous_notes.jinja", previous_html=previous_html)


def _text_key(node: Tag) -> str:
    """Return ``node``'s text with whitespace runs collapsed."""
    return " ".join(node.get_text().split())


def strip_scaffolding(html: str | None, reference_html: str) -> str:
    """Remove unedited scaffolding from a previous Strong Start page.

    A scaffolding node (description, divider, prompts, notes hint, d20
    heading and table) is dropped only when its text matches the same node in
    ``reference_html``, the freshly rendered page. Anything the GM typed into
    one of those nodes keeps it, so no user text is lost. An earlier
    "Previous Notes" section is unwrapped so notes accumulate under a single
    subheading instead of nesting deeper every session; its heading goes only
    when it still reads as rendered.

    Parameters
    ----------
    html : str or None
        The previous page content.
    reference_html : str
        Scaffolding rendered for the new page, including an empty previous
        notes section.

    Returns
    -------
    str
        The previous content without unedited scaffolding, trimmed.
    """
    reference = HtmlFragment.parse(reference_html)
    fragment = HtmlFragment.parse(html)
    for selector in SCAFFOLD_SELECTORS:
        rendered = {_text_key(node) for node in reference.root.select(selector)}
        for node in fragment.root.select(selector):
            if _text_key(node) in rendered:
                fragment.remove(node)
    headings = {
        _text_key(node) for node in reference.root.select(PREVIOUS_NOTES_HEADING)
    }
    for section in fragment.root.select("section.lgmp-previous-notes"):
        heading = section.find("h3", recursive=False)
        if heading is not None and _text_key(heading) in headings:
            fragment.remove(heading)
        section.unwrap()
    return fragment.serialize().strip()


__all__ = ["BLOCK_TEMPLATES", "D20_SIDES", "ScaffoldRenderer", "strip_scaffolding"]
