"""Thin wrapper around BeautifulSoup for journal HTML fragments.

Carry-forward policy code works against :class:`HtmlFragment` rather than
splicing strings: parse once, query by tag or CSS selector, remove nodes, and
serialize the remaining inner HTML. The ``html.parser`` backend never raises on
malformed markup, which matters because previous-session pages are user-edited.
"""

from __future__ import annotations

import typing as typ

from bs4 import BeautifulSoup
from bs4.element import NavigableString, Tag

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from bs4.element import PageElement


class HtmlFragment:
    """Parsed HTML fragment with the handful of operations the engine needs."""

    def __init__(self, soup: BeautifulSoup) -> None:
        self._soup = soup

    @classmethod
    def parse(cls, html: str | None) -> HtmlFragment:
        """Parse ``html`` (``None`` is treated as empty) into a fragment."""
        return cls(BeautifulSoup("" if html is None else str(html), "html.parser"))

    @property
    def root(self) -> BeautifulSoup:
        """Return the underlying soup for read-only traversal."""
        return self._soup

    def select_first(self, selector: str) -> Tag | None:
        """Return the first element matching the CSS ``selector``, if any."""
        return self._soup.select_one(selector)

    def find_all(self, tag: str) -> list[Tag]:
        """Return every ``tag`` element in document order."""
        return list(self._soup.find_all(tag))

    @staticmethod
    def children(node: Tag, tag: str) -> list[Tag]:
        """Return the direct ``tag`` children of ``node``."""
        return list(node.find_all(tag, recursive=False))

    @staticmethod
    def text_of(node: PageElement) -> str:
        """Return the markup-stripped text content of ``node``."""
        if isinstance(node, NavigableString):
            return str(node)
        return node.get_text()

    @staticmethod
    def following_siblings(node: Tag) -> cabc.Iterator[PageElement]:
        """Yield every sibling after ``node``, text nodes included."""
        sibling = node.next_sibling
        while sibling is not None:
            yield sibling
            sibling = sibling.next_sibling

    def remove(self, node: Tag) -> None:
        """Detach ``node`` and its descendants from the fragment."""
        node.decompose()

    def serialize(self) -> str:
        """Return the fragment's inner HTML."""
        return self._soup.decode_contents()


def serialize_nodes(nodes: cabc.Iterable[PageElement]) -> str:
    """Return the concatenated HTML of ``nodes`` without touching their tree."""
    parts: list[str] = []
    for node in nodes:
        if isinstance(node, NavigableString):
            # str() on text nodes skips entity escaping; output_ready applies it.
            parts.append(node.output_ready())
        else:
            parts.append(node.decode())
    return "".join(parts)


__all__ = ["HtmlFragment", "serialize_nodes"]
