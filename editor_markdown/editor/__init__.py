"""Editor document tree and HTML conversion.

Key functions:
    html_to_editor_input: Sanitized HTML to editor nodes
    plain_to_editor_input: Plain text to editor nodes
    dom_to_editor_input: Parsed DOM nodes to editor nodes

Key classes:
    EditorNode: Node of the editor document tree
    NodeType, MarkType: Node and text formatting kinds
    DomElement, DomText: Parsed HTML handed to the converter
"""

from .dom import DomElement, DomNode, DomText, get_text, parse_html
from .input import dom_to_editor_input, html_to_editor_input, plain_to_editor_input
from .matrix_to import (
    RoomEventMention,
    RoomMention,
    UserMention,
    get_matrix_to_room,
    get_matrix_to_room_event,
    get_matrix_to_user,
    resolve_matrix_to,
)
from .models import (
    EditorNode,
    MarkType,
    NodeType,
    create_emoticon_element,
    create_mention_element,
    document_to_dict,
)
from .sanitizer import sanitize_custom_html

__all__ = [
    # Conversion
    "html_to_editor_input",
    "plain_to_editor_input",
    "dom_to_editor_input",
    # Document tree
    "EditorNode",
    "NodeType",
    "MarkType",
    "create_mention_element",
    "create_emoticon_element",
    "document_to_dict",
    # DOM
    "DomElement",
    "DomText",
    "DomNode",
    "parse_html",
    "get_text",
    # Collaborators
    "sanitize_custom_html",
    "resolve_matrix_to",
    "get_matrix_to_user",
    "get_matrix_to_room",
    "get_matrix_to_room_event",
    "UserMention",
    "RoomMention",
    "RoomEventMention",
]
