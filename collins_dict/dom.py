#!/usr/bin/env python3
"""
DOM query interface used by the extractors.

The extractors only ask three questions of a document: "first element under
this node matching a class or tag", "all such elements in document order",
and "what text does this node hold". :class:`DomQuery` names that capability;
:class:`SoupQuery` implements it once over BeautifulSoup.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Protocol, Union

from bs4 import BeautifulSoup, Tag
from bs4.builder import ParserRejectedMarkup

from .exceptions import ParseError

logger = logging.getLogger(__name__)

Node = Tag


@dataclass(frozen=True)
class Selector:
    """A class-name or tag-name match, the only two kinds the site needs."""
    kind: str
    name: str

    def __str__(self) -> str:
        return f".{self.name}" if self.kind == "class" else self.name


def by_class(name: str) -> Selector:
    return Selector("class", name)


def by_tag(name: str) -> Selector:
    return Selector("tag", name)


class DomQuery(Protocol):
    """Read-only queries over a parsed document."""

    def find_first(self, parent: Node, selector: Selector) -> Optional[Node]:
        ...

    def find_all(self, parent: Node, selector: Selector) -> List[Node]:
        ...

    def text(self, node: Node) -> str:
        ...

    def class_attribute(self, node: Node) -> str:
        ...


class SoupQuery:
    """:class:`DomQuery` over BeautifulSoup tags.

    Searches cover descendants only, never ``parent`` itself. Class matches
    are token matches (``class="gramGrp pos"`` matches both ``gramGrp`` and
    ``pos``).
    """

    def _kwargs(self, selector: Selector) -> dict:
        if selector.kind == "class":
            return {"class_": selector.name}
        if selector.kind == "tag":
            return {"name": selector.name}
        raise ValueError(f"Unsupported selector kind: {selector.kind}")

    def find_first(self, parent: Node, selector: Selector) -> Optional[Node]:
        return parent.find(**self._kwargs(selector))

    def find_all(self, parent: Node, selector: Selector) -> List[Node]:
        return list(parent.find_all(**self._kwargs(selector)))

    def text(self, node: Node) -> str:
        return node.get_text()

    def class_attribute(self, node: Node) -> str:
        """The raw ``class`` attribute, tokens joined by single spaces."""
        value = node.get("class")
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        return " ".join(value)


def parse_document(html: Union[str, bytes], parser: str = "html.parser") -> Node:
    """Parse raw HTML and return the ``<body>`` element (or the root if absent)."""

    try:
        soup = BeautifulSoup(html, parser)
    except (ParserRejectedMarkup, ValueError) as e:
        logger.error(f"HTML parse failed: {e}")
        raise ParseError(str(e)) from e

    return soup.body if soup.body is not None else soup
