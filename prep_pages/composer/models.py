"""Shared dataclasses used by the carry-forward composer."""

from __future__ import annotations

import dataclasses as dc
import enum


class PageKind(enum.StrEnum):
    """Carry-forward behaviour families, one per row of the policy table."""

    NOTES = "notes"
    CHECKLIST = "checklist"
    TEMPLATE = "template"
    STRONG_START = "strong_start"


@dc.dataclass(frozen=True, slots=True)
class PageDefinition:
    """Static description of one prep step's page.

    Attributes
    ----------
    key : str
        Stable step identifier (``"secrets-clues"``).
    title_key : str
        Localization key for the page title; never interpreted, only looked up.
    desc_key : str
        Localization key for the one-line step description.
    kind : PageKind
        Which carry-forward policy applies.
    prompt_keys : tuple[str, ...]
        Localization keys for the collapsible prompts block; empty means the
        page has no prompts.
    prompts_heading_key : str
        Localization key for the prompts block summary label.
    blocks : tuple[str, ...]
        Template block names rendered after the prompts on ``TEMPLATE`` pages.
    """

    key: str
    title_key: str
    desc_key: str
    kind: PageKind
    prompt_keys: tuple[str, ...] = ()
    prompts_heading_key: str = "prep.prompts.heading"
    blocks: tuple[str, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class ComposedPage:
    """A generated page ready to hand to the journal store.

    Attributes
    ----------
    key : str
        Step identifier the page was composed for.
    name : str
        Localized display name.
    content : str
        Final HTML content.
    """

    key: str
    name: str
    content: str


__all__ = ["ComposedPage", "PageDefinition", "PageKind"]
