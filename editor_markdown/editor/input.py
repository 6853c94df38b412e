"""HTML and plain text to editor document tree conversion.

Walks sanitized HTML and rebuilds the editor's block and inline nodes.
Every formatting element can mean one of two things: real rich-text
formatting, or literal markdown the user typed and that must be shown again
as source. Elements carrying a source delimiter (``data-md``) are the latter
and come back as plain text that includes their delimiters.
"""

import logging
import re
from typing import Callable, List, Optional
from urllib.parse import unquote

from ..markdown import escape_markdown_block_sequences, escape_markdown_inline_sequences
from .dom import DomElement, DomNode, DomText, get_text, parse_html
from .matrix_to import RoomEventMention, RoomMention, UserMention, resolve_matrix_to
from .models import (
    HEADING_LEVELS,
    EditorNode,
    MarkType,
    NodeType,
    create_emoticon_element,
    create_mention_element,
    heading,
    paragraph,
    text_node,
)
from .sanitizer import sanitize_custom_html

logger = logging.getLogger(__name__)

ProcessTextCallback = Callable[[str], str]

HEADING_TAG = re.compile(r"^h([1-6])$")

DEFAULT_EMOTICON_ALT = "Unknown Emoji"


def _get_inline_node_mark_type(node: DomElement) -> Optional[MarkType]:
    if node.name in ("b", "strong"):
        return MarkType.BOLD
    if node.name in ("i", "em"):
        return MarkType.ITALIC
    if node.name == "u":
        return MarkType.UNDERLINE
    if node.name in ("s", "del", "strike"):
        return MarkType.STRIKE_THROUGH
    if node.name == "code":
        # Code inside <pre> is code block content, not an inline code span
        if node.parent_name == "pre":
            return None
        return MarkType.CODE
    if node.name == "span" and node.has_attr("data-mx-spoiler"):
        return MarkType.SPOILER
    return None


def _get_inline_mark_element(
    mark: MarkType,
    node: DomElement,
    get_child: Callable[[DomNode], List[EditorNode]],
) -> List[EditorNode]:
    children = [inline for child in node.children for inline in get_child(child)]

    if node.source_delimiter is not None:
        return [
            text_node(node.source_delimiter),
            *children,
            text_node(node.source_delimiter),
        ]

    for child in children:
        if child.is_text:
            child.marks[mark] = True
    return children


def _create_link_mention(node: DomElement, href: str) -> Optional[EditorNode]:
    link = resolve_matrix_to(href)
    label = get_text(node)

    if isinstance(link, UserMention):
        return create_mention_element(link.user_id, label or link.user_id)
    if isinstance(link, RoomMention):
        return create_mention_element(
            link.room_id_or_alias,
            label or link.room_id_or_alias,
            via_servers=link.via_servers,
        )
    if isinstance(link, RoomEventMention):
        return create_mention_element(
            link.room_id_or_alias,
            label or link.room_id_or_alias,
            event_id=link.event_id,
            via_servers=link.via_servers,
        )
    return None


def _get_inline_non_mark_element(node: DomElement) -> Optional[EditorNode]:
    if node.name == "img" and node.has_attr("data-mx-emoticon"):
        src = node.get("src")
        if not src:
            return None
        return create_emoticon_element(src, node.get("alt") or DEFAULT_EMOTICON_ALT)

    if node.name == "a" and node.has_attr("href"):
        return _create_link_mention(node, unquote(node.get("href")))

    return None


def _get_inline_element(node: DomNode, process_text: ProcessTextCallback) -> List[EditorNode]:
    if isinstance(node, DomText):
        return [text_node(process_text(node.data))]

    mark = _get_inline_node_mark_type(node)
    if mark is not None:
        if mark == MarkType.CODE:
            return _get_inline_mark_element(
                mark, node, lambda child: [text_node(get_text(child))]
            )
        return _get_inline_mark_element(
            mark, node, lambda child: _get_inline_element(child, process_text)
        )

    inline_node = _get_inline_non_mark_element(node)
    if inline_node is not None:
        return [inline_node]

    children = _get_inline_children(node, process_text)
    if node.name == "a" and node.has_attr("href"):
        return [text_node("["), *children, text_node(f"]({node.get('href')})")]
    return children


def _get_inline_children(node: DomElement, process_text: ProcessTextCallback) -> List[EditorNode]:
    return [
        inline
        for child in node.children
        for inline in _get_inline_element(child, process_text)
    ]


def _non_empty(children: List[EditorNode]) -> List[EditorNode]:
    """Block content must hold at least one (possibly empty) text leaf."""
    return children if children else [text_node("")]


def _group_lines(
    node: DomElement, line_tag: str, process_text: ProcessTextCallback
) -> List[List[EditorNode]]:
    """Split the children of a container into lines of inline content.

    A ``<br>`` ends the current line; a ``line_tag`` child (``p`` for quotes,
    ``li`` for lists) is a line of its own.
    """
    lines: List[List[EditorNode]] = []
    line_holder: List[EditorNode] = []

    def append_line() -> None:
        nonlocal line_holder
        if not line_holder:
            return
        lines.append(line_holder)
        line_holder = []

    for child in node.children:
        if isinstance(child, DomText):
            line_holder.append(text_node(process_text(child.data)))
            continue
        if child.name == "br":
            line_holder.append(text_node(""))
            append_line()
            continue
        if child.name == line_tag:
            append_line()
            lines.append(_non_empty(_get_inline_children(child, process_text)))
            continue
        line_holder.extend(_get_inline_element(child, process_text))
    append_line()

    return lines


def _parse_blockquote_node(node: DomElement, process_text: ProcessTextCallback) -> List[EditorNode]:
    quote_lines = _group_lines(node, "p", process_text)

    if node.source_delimiter is not None:
        return [
            paragraph([text_node(f"{node.source_delimiter} "), *line])
            for line in quote_lines
        ]

    return [
        EditorNode(
            type=NodeType.BLOCK_QUOTE,
            children=[
                EditorNode(type=NodeType.QUOTE_LINE, children=line)
                for line in _non_empty_lines(quote_lines)
            ],
        )
    ]


def _non_empty_lines(lines: List[List[EditorNode]]) -> List[List[EditorNode]]:
    return lines if lines else [[text_node("")]]


def _parse_code_block_node(node: DomElement) -> List[EditorNode]:
    code_lines = get_text(node).strip().split("\n")

    if node.source_delimiter is not None:
        first_child = node.children[0] if node.children else None
        class_name = ""
        if isinstance(first_child, DomElement) and first_child.name == "code":
            class_name = first_child.get("class") or ""
        language = class_name.replace("language-", "", 1)
        return [
            paragraph([text_node(f"{node.source_delimiter}{language}")]),
            *(paragraph([text_node(line)]) for line in code_lines),
            paragraph([text_node(node.source_delimiter)]),
        ]

    return [
        EditorNode(
            type=NodeType.CODE_BLOCK,
            children=[
                EditorNode(type=NodeType.CODE_LINE, children=[text_node(line)])
                for line in code_lines
            ],
        )
    ]


def _list_item_prefix(source_delimiter: str) -> str:
    """Literal prefix to redisplay for one item of a markdown list."""
    marker = source_delimiter or "-"
    if marker in ("*", "-"):
        return f"{marker} "
    return f"{marker.rstrip('.')}. "


def _parse_list_node(node: DomElement, process_text: ProcessTextCallback) -> List[EditorNode]:
    list_lines = _group_lines(node, "li", process_text)

    if node.source_delimiter is not None:
        prefix = _list_item_prefix(node.source_delimiter)
        return [paragraph([text_node(prefix), *line]) for line in list_lines]

    list_type = NodeType.ORDERED_LIST if node.name == "ol" else NodeType.UNORDERED_LIST
    return [
        EditorNode(
            type=list_type,
            children=[
                EditorNode(type=NodeType.LIST_ITEM, children=line)
                for line in _non_empty_lines(list_lines)
            ],
        )
    ]


def _parse_heading_node(node: DomElement, process_text: ProcessTextCallback) -> EditorNode:
    children = _get_inline_children(node, process_text)

    if node.source_delimiter is not None:
        return paragraph([text_node(f"{node.source_delimiter} "), *children])

    level = int(HEADING_TAG.match(node.name).group(1))
    return heading(min(level, HEADING_LEVELS[-1]), _non_empty(children))


def dom_to_editor_input(
    dom_nodes: List[DomNode],
    process_text: ProcessTextCallback,
    process_line_start_text: ProcessTextCallback,
) -> List[EditorNode]:
    """Convert DOM nodes into editor block nodes.

    Inline content is collected into a current line that is flushed as a
    Paragraph whenever a block element or a line break is reached.

    Args:
        dom_nodes: Top-level nodes of sanitized HTML
        process_text: Applied to text fragments inside a line
        process_line_start_text: Applied to the first text fragment of a line

    Returns:
        Fresh list of block nodes
    """
    children: List[EditorNode] = []
    line_holder: List[EditorNode] = []

    def append_line() -> None:
        nonlocal line_holder
        if not line_holder:
            return
        children.append(paragraph(line_holder))
        line_holder = []

    for node in dom_nodes:
        if isinstance(node, DomText):
            if not line_holder:
                # First part of a line; it may start with block markdown
                line_holder.append(text_node(process_line_start_text(node.data)))
            else:
                line_holder.append(text_node(process_text(node.data)))
            continue

        if node.name == "br":
            line_holder.append(text_node(""))
            append_line()
            continue

        if node.name == "p":
            append_line()
            children.append(paragraph(_non_empty(_get_inline_children(node, process_text))))
            continue

        if node.name == "blockquote":
            append_line()
            children.extend(_parse_blockquote_node(node, process_text))
            continue

        if node.name == "pre":
            append_line()
            children.extend(_parse_code_block_node(node))
            continue

        if node.name in ("ol", "ul"):
            append_line()
            children.extend(_parse_list_node(node, process_text))
            continue

        if HEADING_TAG.match(node.name):
            append_line()
            children.append(_parse_heading_node(node, process_text))
            continue

        line_holder.extend(_get_inline_element(node, process_text))
    append_line()

    return children


def html_to_editor_input(
    unsafe_html: str, markdown: bool = False, sanitize: bool = True
) -> List[EditorNode]:
    """Convert HTML into editor block nodes.

    Args:
        unsafe_html: HTML from a message body or the clipboard
        markdown: Whether the editor shows markdown source. When set, literal
            markdown characters in the HTML text are escaped so they are not
            read as formatting when the message is sent again
        sanitize: Run the allowlist sanitizer first (disable only for HTML
            that is already sanitized)

    Returns:
        Fresh list of block nodes
    """
    html = sanitize_custom_html(unsafe_html) if sanitize else unsafe_html

    def process_text(part_text: str) -> str:
        if not markdown:
            return part_text
        return escape_markdown_inline_sequences(part_text)

    def process_line_start_text(line_start_text: str) -> str:
        if not markdown:
            return line_start_text
        return escape_markdown_block_sequences(line_start_text, process_text)

    nodes = dom_to_editor_input(parse_html(html), process_text, process_line_start_text)
    logger.debug(
        f"Converted {len(unsafe_html)} chars of HTML to {len(nodes)} blocks "
        f"(markdown={markdown})"
    )
    return nodes


def plain_to_editor_input(text: str, markdown: bool = False) -> List[EditorNode]:
    """Convert plain text into one Paragraph per line.

    Args:
        text: Plain text, lines separated by ``\\n``
        markdown: Escape block and inline markdown sequences on every line

    Returns:
        Fresh list of Paragraph nodes
    """
    nodes = []
    for line_text in text.split("\n"):
        if markdown:
            line_text = escape_markdown_block_sequences(
                line_text, escape_markdown_inline_sequences
            )
        nodes.append(paragraph([text_node(line_text)]))
    logger.debug(f"Converted {len(text)} chars of plain text to {len(nodes)} paragraphs")
    return nodes
