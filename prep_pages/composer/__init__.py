"""Carry-forward policy, scaffolding, and page composition."""

from .composer import CarryForwardComposer
from .models import ComposedPage, PageDefinition, PageKind
from .policy import CarryForwardDecision, Regenerate, UncheckedSubset, Verbatim, decide
from .scaffolding import ScaffoldRenderer, strip_scaffolding

__all__ = [
    "CarryForwardComposer",
    "CarryForwardDecision",
    "ComposedPage",
    "PageDefinition",
    "PageKind",
    "Regenerate",
    "ScaffoldRenderer",
    "UncheckedSubset",
    "Verbatim",
    "decide",
    "strip_scaffolding",
]
