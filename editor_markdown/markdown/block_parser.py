"""Block-level markdown parser.

Unlike the inline parser, block rules are tried one after another in a
fixed priority order and the first rule that matches anywhere in the text
wins. The text before the matched region is parsed again as blocks and
the text after it is handled by the next round of the loop; the matched
region itself is rendered by the rule.
"""

from typing import List, Optional, Sequence, Tuple

from .block_rules import (
    BlockQuoteRule,
    CodeBlockRule,
    ESC_BLOCK_SEQ,
    HeadingRule,
    OrderedListRule,
    UnorderedListRule,
)
from .internal import after_match, before_match, replace_match
from .models import BlockRule, InlineParser, MatchResult

BLOCK_RULES: Sequence[BlockRule] = (
    CodeBlockRule,
    BlockQuoteRule,
    OrderedListRule,
    UnorderedListRule,
    HeadingRule,
)


def match_block_rules(
    text: str, rules: Sequence[BlockRule] = BLOCK_RULES
) -> Optional[Tuple[BlockRule, MatchResult]]:
    """Find the first rule, in priority order, that matches the text.

    Args:
        text: The text to search
        rules: Block rules in priority order

    Returns:
        The rule and its match, or None if no rule matches
    """
    for rule in rules:
        match = rule.match(text)
        if match is not None:
            return rule, match
    return None


def _parse_line(line: str, parse_inline: Optional[InlineParser]) -> str:
    """Parse a plain line, dropping the backslash of an escaped block sequence."""
    def inline(part: str) -> str:
        return parse_inline(part) if parse_inline else part

    escaped = ESC_BLOCK_SEQ.match(line)
    if escaped is None:
        return inline(line)

    match = MatchResult.from_re(escaped)
    return "".join(
        replace_match(line, match, match.group(1), lambda part: [inline(part)])
    )


def _parse_lines(text: str, parse_inline: Optional[InlineParser]) -> str:
    return "<br/>".join(_parse_line(line, parse_inline) for line in text.split("\n"))


def parse_block_md(text: str, parse_inline: Optional[InlineParser] = None) -> str:
    """Parse block-level markdown text into HTML.

    Args:
        text: The markdown text to parse
        parse_inline: Optional inline parser for the content of each line

    Returns:
        The HTML. Text without block markdown has its lines inline-parsed
        and joined with ``<br/>`` so empty lines are preserved.
    """
    parts: List[str] = []

    while text:
        found = match_block_rules(text)
        if found is None:
            parts.append(_parse_lines(text, parse_inline))
            break

        rule, match = found
        before = before_match(text, match)
        if before:
            parts.append(parse_block_md(before, parse_inline))
        parts.append(rule.render(match, parse_inline))
        text = after_match(text, match)

    return "".join(parts)
