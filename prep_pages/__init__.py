"""Carry session-prep journal content forward between tabletop sessions.

The package composes the next session's prep pages from the previous
session's HTML: unchecked clues are rolled over, notes and templates are kept
verbatim, and the Strong Start page is regenerated with earlier notes kept
underneath. It also exposes the ``prep`` CLI entry points.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from prep_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
