"""Data models for the editor document tree.

The editor works on a tree of blocks holding inline content. Every node is
an EditorNode tagged with a NodeType; text leaves carry their formatting as
a mapping of MarkType to True. Void inline nodes (mentions and emoticons)
carry a single empty text child, as the editor expects.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class NodeType(Enum):
    """Types of nodes in the editor document tree."""

    # Block nodes
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    CODE_LINE = "code-line"
    CODE_BLOCK = "code-block"
    QUOTE_LINE = "quote-line"
    BLOCK_QUOTE = "block-quote"
    LIST_ITEM = "list-item"
    ORDERED_LIST = "ordered-list"
    UNORDERED_LIST = "unordered-list"

    # Inline nodes
    TEXT = "text"
    MENTION = "mention"
    EMOTICON = "emoticon"


class MarkType(Enum):
    """Formatting marks that can be set on a text leaf."""

    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKE_THROUGH = "strikeThrough"
    CODE = "code"
    SPOILER = "spoiler"


INLINE_NODE_TYPES = {NodeType.TEXT, NodeType.MENTION, NodeType.EMOTICON}

# Heading sizes the editor can display
HEADING_LEVELS = (1, 2, 3)


@dataclass
class EditorNode:
    """A node in the editor document tree.

    Attributes:
        type: Node type
        children: Child nodes (blocks, line containers or inline nodes)
        text: Text content (text leaves only)
        marks: Formatting marks (text leaves only)
        attrs: Type-specific attributes (heading level, mention target, ...)
    """

    type: NodeType
    children: List["EditorNode"] = field(default_factory=list)
    text: Optional[str] = None
    marks: Dict[MarkType, bool] = field(default_factory=dict)
    attrs: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_inline(self) -> bool:
        return self.type in INLINE_NODE_TYPES

    @property
    def is_text(self) -> bool:
        return self.type == NodeType.TEXT

    @property
    def level(self) -> Optional[int]:
        """Heading level (headings only)."""
        return self.attrs.get("level")

    @property
    def target_id(self) -> Optional[str]:
        """Mentioned user, room id or alias (mentions only)."""
        return self.attrs.get("id")

    @property
    def label(self) -> Optional[str]:
        """Display label (mentions only)."""
        return self.attrs.get("name")

    @property
    def event_id(self) -> Optional[str]:
        return self.attrs.get("eventId")

    @property
    def via_servers(self) -> Optional[List[str]]:
        return self.attrs.get("viaServers")

    @property
    def src(self) -> Optional[str]:
        """Image source (emoticons only)."""
        return self.attrs.get("key")

    @property
    def alt(self) -> Optional[str]:
        return self.attrs.get("shortcode")

    def has_mark(self, mark: MarkType) -> bool:
        return self.marks.get(mark, False)

    def get_text_content(self) -> str:
        """Concatenated text of all text leaves in this subtree."""
        if self.is_text:
            return self.text or ""
        return "".join(child.get_text_content() for child in self.children)

    def to_dict(self) -> Dict[str, Any]:
        """Convert this node to the editor's JSON shape.

        Text leaves become ``{"text": ..., "bold": true, ...}``; every other
        node becomes ``{"type": ..., <attrs>, "children": [...]}``.
        """
        if self.is_text:
            result: Dict[str, Any] = {"text": self.text or ""}
            for mark, enabled in self.marks.items():
                if enabled:
                    result[mark.value] = True
            return result

        result = {"type": self.type.value}
        for key, value in self.attrs.items():
            if value is not None:
                result[key] = value
        result["children"] = [child.to_dict() for child in self.children]
        return result


def text_node(text: str, **marks: bool) -> EditorNode:
    """Create a text leaf.

    Marks are given by MarkType value, e.g. ``text_node("x", bold=True)``.
    """
    return EditorNode(
        type=NodeType.TEXT,
        text=text,
        marks={MarkType(name): value for name, value in marks.items()},
    )


def paragraph(children: List[EditorNode]) -> EditorNode:
    return EditorNode(type=NodeType.PARAGRAPH, children=children)


def heading(level: int, children: List[EditorNode]) -> EditorNode:
    return EditorNode(type=NodeType.HEADING, children=children, attrs={"level": level})


def create_mention_element(
    target_id: str,
    name: str,
    highlight: bool = False,
    event_id: Optional[str] = None,
    via_servers: Optional[List[str]] = None,
) -> EditorNode:
    """Create a mention of a user, room or room event."""
    return EditorNode(
        type=NodeType.MENTION,
        children=[text_node("")],
        attrs={
            "id": target_id,
            "eventId": event_id,
            "viaServers": via_servers,
            "highlight": highlight,
            "name": name,
        },
    )


def create_emoticon_element(key: str, shortcode: str) -> EditorNode:
    """Create an emoticon; ``key`` is the image source, ``shortcode`` its alt text."""
    return EditorNode(
        type=NodeType.EMOTICON,
        children=[text_node("")],
        attrs={"key": key, "shortcode": shortcode},
    )


def document_to_dict(nodes: List[EditorNode]) -> List[Dict[str, Any]]:
    """Convert a whole document to its JSON shape."""
    return [node.to_dict() for node in nodes]
