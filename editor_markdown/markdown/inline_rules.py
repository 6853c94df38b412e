"""Inline markdown rules.

Every rendered span carries a ``data-md`` attribute holding the delimiter
that produced it, so the HTML can later be turned back into the literal
markdown the user typed.
"""

import re

from .internal import search_outside_urls
from .models import InlineRule, MatchResult

MIN_ANY = r"(.+?)"
ESC_NEG_LB = r"(?<!\\)"

INLINE_SEQUENCE_SET = r"[*_~`|]"


def _delimited(prefix: str, neg_la: str) -> "re.Pattern[str]":
    """Compile ``prefix content prefix`` with an unescaped-prefix guard."""
    guarded = f"{ESC_NEG_LB}{prefix}"
    return re.compile(f"{guarded}{MIN_ANY}{guarded}{neg_la}")


BOLD_MD_1 = "**"
BOLD_REG_1 = _delimited(r"\*{2}", r"(?!\*)")


def _render_bold(parse, match: MatchResult) -> str:
    return f'<strong data-md="{BOLD_MD_1}">{parse(match.group(1))}</strong>'


BoldRule = InlineRule(
    match=lambda text: search_outside_urls(BOLD_REG_1, text),
    render=_render_bold,
)

ITALIC_MD_1 = "*"
ITALIC_REG_1 = _delimited(r"\*", r"(?!\*)")


def _render_italic_1(parse, match: MatchResult) -> str:
    return f'<i data-md="{ITALIC_MD_1}">{parse(match.group(1))}</i>'


ItalicRule1 = InlineRule(
    match=lambda text: search_outside_urls(ITALIC_REG_1, text),
    render=_render_italic_1,
)

ITALIC_MD_2 = "_"
ITALIC_REG_2 = _delimited(r"_", r"(?!_)")


def _render_italic_2(parse, match: MatchResult) -> str:
    return f'<i data-md="{ITALIC_MD_2}">{parse(match.group(1))}</i>'


ItalicRule2 = InlineRule(
    match=lambda text: search_outside_urls(ITALIC_REG_2, text),
    render=_render_italic_2,
)

UNDERLINE_MD_1 = "__"
UNDERLINE_REG_1 = _delimited(r"_{2}", r"(?!_)")


def _render_underline(parse, match: MatchResult) -> str:
    return f'<u data-md="{UNDERLINE_MD_1}">{parse(match.group(1))}</u>'


UnderlineRule = InlineRule(
    match=lambda text: search_outside_urls(UNDERLINE_REG_1, text),
    render=_render_underline,
)

STRIKE_MD_1 = "~~"
STRIKE_REG_1 = _delimited(r"~{2}", r"(?!~)")


def _render_strike(parse, match: MatchResult) -> str:
    return f'<s data-md="{STRIKE_MD_1}">{parse(match.group(1))}</s>'


StrikeRule = InlineRule(
    match=lambda text: search_outside_urls(STRIKE_REG_1, text),
    render=_render_strike,
)

CODE_MD_1 = "`"
CODE_REG_1 = _delimited(r"`", r"(?!`)")


def _render_code(parse, match: MatchResult) -> str:
    # Code content is emitted verbatim, never parsed.
    return f'<code data-md="{CODE_MD_1}">{match.group(1)}</code>'


CodeRule = InlineRule(
    match=lambda text: search_outside_urls(CODE_REG_1, text),
    render=_render_code,
)

SPOILER_MD_1 = "||"
SPOILER_REG_1 = _delimited(r"\|{2}", r"(?!\|)")


def _render_spoiler(parse, match: MatchResult) -> str:
    return (
        f'<span data-md="{SPOILER_MD_1}" data-mx-spoiler>'
        f'{parse(match.group(1))}</span>'
    )


SpoilerRule = InlineRule(
    match=lambda text: search_outside_urls(SPOILER_REG_1, text),
    render=_render_spoiler,
)

LINK_ALT = rf"\[{MIN_ANY}\]"
LINK_URL = r"\((https?://.+?)\)"
LINK_REG_1 = re.compile(f"{LINK_ALT}{LINK_URL}")


def _render_link(parse, match: MatchResult) -> str:
    return f'<a data-md href="{match.group(2)}">{parse(match.group(1))}</a>'


LinkRule = InlineRule(
    match=lambda text: MatchResult.from_re(LINK_REG_1.search(text)),
    render=_render_link,
)

ESC_SEQ_1 = rf"\\({INLINE_SEQUENCE_SET})"
ESC_REG_1 = re.compile(ESC_SEQ_1)


def _render_escape(parse, match: MatchResult) -> str:
    return match.group(1)


EscapeRule = InlineRule(
    match=lambda text: MatchResult.from_re(ESC_REG_1.search(text)),
    render=_render_escape,
)
