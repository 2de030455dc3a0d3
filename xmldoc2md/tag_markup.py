"""Parsing of documentation tag markup into a small element tree."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Union

from xmldoc2md.errors import TagMarkupError


@dataclass
class TagElement:
    """One markup element: a tag name, its attributes and ordered children.

    Children are either text runs (``str``) or nested ``TagElement`` objects.
    """

    name: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[TagNode] = field(default_factory=list)

    def elements(self, name: str | None = None) -> list[TagElement]:
        """Return child elements, optionally only those with the given name."""
        return [
            c
            for c in self.children
            if isinstance(c, TagElement) and (name is None or c.name == name)
        ]

    def element(self, name: str) -> TagElement | None:
        """Return the first child element with the given name, if any."""
        found = self.elements(name)
        return found[0] if found else None

    def get(self, attribute: str) -> str | None:
        return self.attributes.get(attribute)

    @property
    def text(self) -> str:
        """Concatenated text of this element and all descendants."""
        return "".join(
            c if isinstance(c, str) else c.text for c in self.children
        )


TagNode = Union[str, TagElement]


def _convert(el: ET.Element) -> TagElement:
    node = TagElement(name=el.tag.lower(), attributes=dict(el.attrib))
    if el.text:
        node.children.append(el.text)
    for child in el:
        node.children.append(_convert(child))
        if child.tail:
            node.children.append(child.tail)
    return node


def parse_tag_markup(markup: str) -> TagElement:
    """Parse a normalized comment into a tree rooted at a synthetic ``root`` tag.

    Raises ``TagMarkupError`` when the nested tag structure is malformed.
    """
    try:
        root = ET.fromstring(f"<root>{markup}</root>")
    except ET.ParseError as e:
        raise TagMarkupError(str(e)) from e
    return _convert(root)
