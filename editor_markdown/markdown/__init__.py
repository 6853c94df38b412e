"""Markdown rule engines for the message editor.

Lowers markdown source text to HTML in which every formatted element
remembers its literal delimiter through a ``data-md`` attribute, and
provides the escape transforms that keep literal text literal.

Key functions:
    parse_inline_md: Inline markdown (emphasis, code, spoilers, links) to HTML
    parse_block_md: Block markdown (headings, fences, quotes, lists) to HTML
    markdown_to_html: Block parsing with inline parsing of every line
    escape_markdown_inline_sequences / unescape_markdown_inline_sequences
    escape_markdown_block_sequences / unescape_markdown_block_sequences
"""

from .block_parser import parse_block_md
from .escape import (
    escape_markdown_block_sequences,
    escape_markdown_inline_sequences,
    unescape_markdown_block_sequences,
    unescape_markdown_inline_sequences,
)
from .inline_parser import parse_inline_md
from .models import BlockRule, InlineRule, MatchResult


def markdown_to_html(text: str) -> str:
    """Convert message markdown to HTML, parsing inline markdown per line."""
    return parse_block_md(text, parse_inline_md)


__all__ = [
    "parse_inline_md",
    "parse_block_md",
    "markdown_to_html",
    "escape_markdown_inline_sequences",
    "unescape_markdown_inline_sequences",
    "escape_markdown_block_sequences",
    "unescape_markdown_block_sequences",
    "MatchResult",
    "InlineRule",
    "BlockRule",
]
