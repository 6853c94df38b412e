"""Block-level markdown rules.

Block rules render their matched region directly. Inline content inside a
block (heading text, quote lines, list items) goes through the optional
inline parser one line at a time.
"""

import re
from typing import Optional

from .models import BlockRule, InlineParser, MatchResult


def _inline(parse_inline: Optional[InlineParser], text: str) -> str:
    return parse_inline(text) if parse_inline else text


def _block_lines(block_text: str):
    """Split a matched block into lines, ignoring one trailing newline."""
    if block_text.endswith("\n"):
        block_text = block_text[:-1]
    return block_text.split("\n")


HEADING_REG_1 = re.compile(r"^(#{1,6}) +(.+)\n?", re.M)


def _render_heading(match: MatchResult, parse_inline: Optional[InlineParser]) -> str:
    marker = match.group(1)
    level = len(marker)
    content = _inline(parse_inline, match.group(2))
    return f'<h{level} data-md="{marker}">{content}</h{level}>'


HeadingRule = BlockRule(
    match=lambda text: MatchResult.from_re(HEADING_REG_1.search(text)),
    render=_render_heading,
)

CODEBLOCK_MD_1 = "```"
CODEBLOCK_REG_1 = re.compile(r"^`{3}(\S*)\n((?:.*\n)+?)`{3} *(?!.)\n?", re.M)


def _render_code_block(match: MatchResult, parse_inline: Optional[InlineParser]) -> str:
    language = match.group(1)
    class_attr = f' class="language-{language}"' if language else ""
    return (
        f'<pre data-md="{CODEBLOCK_MD_1}">'
        f"<code{class_attr}>{match.group(2)}</code></pre>"
    )


CodeBlockRule = BlockRule(
    match=lambda text: MatchResult.from_re(CODEBLOCK_REG_1.search(text)),
    render=_render_code_block,
)

BLOCKQUOTE_MD_1 = ">"
QUOTE_LINE_PREFIX = re.compile(r"^> *")
BLOCKQUOTE_REG_1 = re.compile(r"(^>.*\n?)+", re.M)


def _render_block_quote(match: MatchResult, parse_inline: Optional[InlineParser]) -> str:
    lines = "".join(
        f"{_inline(parse_inline, QUOTE_LINE_PREFIX.sub('', line, count=1))}<br/>"
        for line in _block_lines(match.text)
    )
    return f'<blockquote data-md="{BLOCKQUOTE_MD_1}">{lines}</blockquote>'


BlockQuoteRule = BlockRule(
    match=lambda text: MatchResult.from_re(BLOCKQUOTE_REG_1.search(text)),
    render=_render_block_quote,
)

ORDERED_LIST_MD_1 = "-"
O_LIST_ITEM_PREFIX = re.compile(r"^(?:-|[0-9a-zA-Z]\.) *")
O_LIST_START = re.compile(r"^([0-9])\.")
O_LIST_TYPE = re.compile(r"^([aAiI])\.")
# ASCII only; \d would also accept digits from other scripts.
ORDERED_LIST_REG_1 = re.compile(r"(^(?:-|[0-9a-zA-Z]\.) +.+\n?)+", re.M)


def _render_list_items(list_text: str, prefix: "re.Pattern[str]",
                       parse_inline: Optional[InlineParser]) -> str:
    return "".join(
        f"<li><p>{_inline(parse_inline, prefix.sub('', line, count=1))}</p></li>"
        for line in _block_lines(list_text)
    )


def _render_ordered_list(match: MatchResult, parse_inline: Optional[InlineParser]) -> str:
    list_text = match.text
    start = O_LIST_START.match(list_text)
    list_type = O_LIST_TYPE.match(list_text)

    # data-md is the first item's type letter or start digit, else the dash.
    list_start = start.group(1) if start else ""
    type_letter = list_type.group(1) if list_type else ""
    marker = type_letter or list_start or ORDERED_LIST_MD_1

    items = _render_list_items(list_text, O_LIST_ITEM_PREFIX, parse_inline)
    start_attr = f' start="{list_start}"' if list_start else ""
    type_attr = f' type="{type_letter}"' if type_letter else ""
    return f'<ol data-md="{marker}"{start_attr}{type_attr}>{items}</ol>'


OrderedListRule = BlockRule(
    match=lambda text: MatchResult.from_re(ORDERED_LIST_REG_1.search(text)),
    render=_render_ordered_list,
)

UNORDERED_LIST_MD_1 = "*"
U_LIST_ITEM_PREFIX = re.compile(r"^\* *")
UNORDERED_LIST_REG_1 = re.compile(r"(^\* +.+\n?)+", re.M)


def _render_unordered_list(match: MatchResult, parse_inline: Optional[InlineParser]) -> str:
    items = _render_list_items(match.text, U_LIST_ITEM_PREFIX, parse_inline)
    return f'<ul data-md="{UNORDERED_LIST_MD_1}">{items}</ul>'


UnorderedListRule = BlockRule(
    match=lambda text: MatchResult.from_re(UNORDERED_LIST_REG_1.search(text)),
    render=_render_unordered_list,
)

# Block sequence at the start of a line, with or without escaping backslashes.
UN_ESC_BLOCK_SEQ = re.compile(r"^\\*(#{1,6} +|```|>|(?:-|[0-9a-zA-Z]\.) +|\* +)")
# Block sequence escaped with at least one backslash; group 1 drops the first.
ESC_BLOCK_SEQ = re.compile(r"^\\(\\*(?:#{1,6} +|```|>|(?:-|[0-9a-zA-Z]\.) +|\* +))")
