"""Lightweight DOM used by the HTML to document tree converter.

HTML is parsed with BeautifulSoup and copied into plain DomText and
DomElement objects. The ``data-md`` attribute is lifted into the explicit
``DomElement.source_delimiter`` field: an element with a source delimiter is
literal markdown source, not rich-text formatting.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from bs4 import BeautifulSoup, NavigableString, Tag

SOURCE_DELIMITER_ATTR = "data-md"


@dataclass
class DomText:
    """A text node."""

    data: str


@dataclass
class DomElement:
    """An element node.

    Attributes:
        name: Lower-case tag name
        attrs: Attributes; multi-valued attributes are joined with spaces and
            valueless attributes map to ''
        children: Child nodes in document order
        parent_name: Tag name of the parent element, None at the top level
        source_delimiter: Value of ``data-md`` or None when absent
    """

    name: str
    attrs: Dict[str, str] = field(default_factory=dict)
    children: List["DomNode"] = field(default_factory=list)
    parent_name: Optional[str] = None
    source_delimiter: Optional[str] = None

    def has_attr(self, name: str) -> bool:
        return name in self.attrs

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.attrs.get(name, default)


DomNode = Union[DomText, DomElement]


def _attr_value(value) -> str:
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return "" if value is None else str(value)


def _convert(node, parent_name: Optional[str]) -> Optional[DomNode]:
    if isinstance(node, Tag):
        attrs = {key: _attr_value(value) for key, value in node.attrs.items()}
        element = DomElement(
            name=node.name.lower(),
            attrs=attrs,
            parent_name=parent_name,
            source_delimiter=attrs.get(SOURCE_DELIMITER_ATTR),
        )
        element.children = _convert_children(node, element.name)
        return element
    # Comments, doctypes and processing instructions are NavigableString
    # subclasses; only plain text is kept.
    if type(node) is NavigableString:
        return DomText(data=str(node))
    return None


def _convert_children(node, parent_name: Optional[str]) -> List[DomNode]:
    children = []
    for child in node.children:
        converted = _convert(child, parent_name)
        if converted is not None:
            children.append(converted)
    return children


def parse_html(html: str) -> List[DomNode]:
    """Parse an HTML fragment into a list of top-level DOM nodes.

    Uses the ``html.parser`` backend, which keeps the fragment as written
    (no implicit html/body/p wrappers around top-level text).

    Args:
        html: HTML fragment

    Returns:
        Top-level text and element nodes in document order
    """
    soup = BeautifulSoup(html, "html.parser")
    return _convert_children(soup, None)


def get_text(node: DomNode) -> str:
    """Return the concatenated text of a node and its descendants."""
    if isinstance(node, DomText):
        return node.data
    return "".join(get_text(child) for child in node.children)
