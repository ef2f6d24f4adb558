"""Registry of the session prep steps in display order.

Every generated session journal holds one page (or one combined-page section)
per step. The registry ties each step key to its localization keys, its
carry-forward policy, and the template blocks rendered on a fresh page.

Example
-------
>>> from prep_pages.steps import STEP_ORDER, get_step
>>> [step.key for step in STEP_ORDER][:2]
['review-characters', 'strong-start']
>>> get_step("secrets-clues").kind.value
'checklist'
"""

from __future__ import annotations

from prep_pages.composer.models import PageDefinition, PageKind


def _step(
    key: str,
    kind: PageKind,
    *,
    prompts: tuple[str, ...] = (),
    prompts_heading_key: str = "prep.prompts.heading",
    blocks: tuple[str, ...] = (),
) -> PageDefinition:
    return PageDefinition(
        key=key,
        title_key=f"prep.steps.{key}.title",
        desc_key=f"prep.steps.{key}.description",
        kind=kind,
        prompt_keys=prompts,
        prompts_heading_key=prompts_heading_key,
        blocks=blocks,
    )


STEP_ORDER: tuple[PageDefinition, ...] = (
    _step(
        "review-characters",
        PageKind.TEMPLATE,
        prompts=(
            "prep.characters.prompts.spotlight",
            "prep.characters.prompts.unresolved",
            "prep.characters.prompts.bonds",
            "prep.characters.prompts.reward",
        ),
        blocks=("character_table", "notes"),
    ),
    _step(
        "strong-start",
        PageKind.STRONG_START,
        prompts=tuple(f"prep.strong-start.prompts.{n}" for n in range(1, 5)),
    ),
    _step(
        "outline-scenes",
        PageKind.TEMPLATE,
        prompts=tuple(f"prep.outline-scenes.prompts.{n}" for n in range(1, 5)),
        blocks=("scene_cards",),
    ),
    _step(
        "secrets-clues",
        PageKind.CHECKLIST,
        prompts=(
            "prep.secrets-clues.prompts.rumor",
            "prep.secrets-clues.prompts.secretPast",
            "prep.secrets-clues.prompts.artifact",
            "prep.secrets-clues.prompts.mystery",
        ),
        prompts_heading_key="prep.secrets-clues.prompts.heading",
    ),
    _step(
        "fantastic-locations",
        PageKind.TEMPLATE,
        prompts=tuple(f"prep.locations.prompts.{n}" for n in range(1, 5)),
        blocks=("location_cards",),
    ),
    _step(
        "important-npcs",
        PageKind.TEMPLATE,
        prompts=(
            "prep.npcs.prompts.connection",
            "prep.npcs.prompts.goal",
            "prep.npcs.prompts.trait",
            "prep.npcs.prompts.surprise",
        ),
        blocks=("npc_table",),
    ),
    _step(
        "choose-monsters",
        PageKind.TEMPLATE,
        prompts=tuple(f"prep.monsters.prompts.{n}" for n in range(1, 5)),
        blocks=("monster_quote",),
    ),
    _step("magic-item-rewards", PageKind.NOTES),
    _step("other-notes", PageKind.NOTES),
)

STEPS: dict[str, PageDefinition] = {step.key: step for step in STEP_ORDER}


def get_step(key: str) -> PageDefinition:
    """Return the step registered under ``key``.

    Raises
    ------
    KeyError
        If ``key`` is not a registered step.
    """
    try:
        return STEPS[key]
    except KeyError as exc:
        available = ", ".join(STEPS)
        msg = f"Unknown step '{key}'. Known steps: {available}"
        raise KeyError(msg) from exc


__all__ = ["STEPS", "STEP_ORDER", "get_step"]
