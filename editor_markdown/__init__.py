"""Markdown, HTML and document tree conversion for a rich-text message editor.

Markdown typed in the editor is lowered to HTML whose elements remember
their literal delimiters (``data-md``); that HTML, or HTML pasted from
elsewhere, is turned back into the editor's document tree.
"""

from .editor import EditorNode, MarkType, NodeType, html_to_editor_input, plain_to_editor_input
from .markdown import (
    escape_markdown_block_sequences,
    escape_markdown_inline_sequences,
    markdown_to_html,
    parse_block_md,
    parse_inline_md,
    unescape_markdown_block_sequences,
    unescape_markdown_inline_sequences,
)

__version__ = "0.1.0"

__all__ = [
    "parse_inline_md",
    "parse_block_md",
    "markdown_to_html",
    "escape_markdown_inline_sequences",
    "unescape_markdown_inline_sequences",
    "escape_markdown_block_sequences",
    "unescape_markdown_block_sequences",
    "html_to_editor_input",
    "plain_to_editor_input",
    "EditorNode",
    "NodeType",
    "MarkType",
]
