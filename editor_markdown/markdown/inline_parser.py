"""Inline markdown parser.

Lowers a single run of text to HTML. The code rule is tried on its own
first because code spans switch off every other rule inside them. The
remaining rules are evaluated together and the match that starts
earliest wins; ties go to the rule listed first.
"""

from typing import List, Optional, Sequence, Tuple

from .inline_rules import (
    BoldRule,
    CodeRule,
    EscapeRule,
    ItalicRule1,
    ItalicRule2,
    LinkRule,
    SpoilerRule,
    StrikeRule,
    UnderlineRule,
)
from .internal import after_match, before_match
from .models import InlineRule, MatchResult

LEVELED_RULES: Sequence[InlineRule] = (
    BoldRule,
    ItalicRule1,
    UnderlineRule,
    ItalicRule2,
    StrikeRule,
    SpoilerRule,
    LinkRule,
    EscapeRule,
)

RuleMatch = Tuple[InlineRule, MatchResult]


def match_inline_rule(text: str, rule: InlineRule) -> Optional[RuleMatch]:
    """Find the first match of a single rule in the text.

    Args:
        text: The text to search
        rule: The rule to run

    Returns:
        The rule and its match, or None if the rule does not match
    """
    match = rule.match(text)
    if match is None:
        return None
    return rule, match


def match_inline_rules(text: str, rules: Sequence[InlineRule]) -> Optional[RuleMatch]:
    """Run several rules at once and pick the leftmost match.

    Args:
        text: The text to search
        rules: Rules in priority order

    Returns:
        The winning rule and its match, or None if nothing matches
    """
    target: Optional[RuleMatch] = None

    for rule in rules:
        match = rule.match(text)
        if match is None:
            continue
        # Strictly smaller start only, so earlier rules win ties.
        if target is None or match.start < target[1].start:
            target = (rule, match)

    return target


def _next_match(text: str) -> Optional[RuleMatch]:
    return match_inline_rule(text, CodeRule) or match_inline_rules(text, LEVELED_RULES)


def parse_inline_md(text: str) -> str:
    """Parse inline markdown text into HTML.

    The text before a match and the matched content are parsed again;
    the text after it is consumed by the loop, so nesting depth depends
    only on how deeply spans are nested.

    Args:
        text: The markdown text to parse

    Returns:
        The HTML, or the original text if no markdown was found
    """
    parts: List[str] = []

    while text:
        found = _next_match(text)
        if found is None:
            parts.append(text)
            break

        rule, match = found
        before = before_match(text, match)
        if before:
            parts.append(parse_inline_md(before))
        parts.append(rule.render(parse_inline_md, match))
        text = after_match(text, match)

    return "".join(parts)
