"""Match helpers shared by the inline and block rule engines."""

import re
from typing import Callable, List, Optional, TypeVar

from .models import MatchResult

C = TypeVar("C")

# A scheme anywhere in the run of non-space characters leading up to a match
# means the match would start inside a URL.
URL_SCHEME = re.compile(r"(?:https?|ftp)://|mailto:|magnet:")
_TRAILING_NON_SPACE = re.compile(r"\S*$")


def before_match(text: str, match: MatchResult) -> str:
    """Return the part of ``text`` before the match."""
    return text[:match.start]


def after_match(text: str, match: MatchResult) -> str:
    """Return the part of ``text`` after the match."""
    return text[match.end:]


def replace_match(
    text: str,
    match: MatchResult,
    content: C,
    process_part: Callable[[str], List],
) -> List:
    """Replace a match in the text with content.

    The text before and after the match is handed to ``process_part``
    exactly once each.

    Args:
        text: The text the match was found in
        match: The match to replace
        content: Replacement for the matched substring
        process_part: Processes the remaining parts of the text

    Returns:
        Processed parts before the match, the content, processed parts after
    """
    return [
        *process_part(before_match(text, match)),
        content,
        *process_part(after_match(text, match)),
    ]


def is_inside_url(text: str, offset: int) -> bool:
    """Check whether ``offset`` falls inside a URL-like run of characters."""
    run = _TRAILING_NON_SPACE.search(text[:offset]).group(0)
    return bool(run) and URL_SCHEME.search(run) is not None


def search_outside_urls(pattern: "re.Pattern[str]", text: str) -> Optional[MatchResult]:
    """Find the first match of ``pattern`` that does not start inside a URL.

    Stands in for a variable-width negative lookbehind, which ``re`` does
    not support. Candidates that start inside a URL are skipped and the
    search resumes one character later.
    """
    pos = 0
    while pos <= len(text):
        match = pattern.search(text, pos)
        if match is None:
            return None
        if not is_inside_url(text, match.start()):
            return MatchResult.from_re(match)
        pos = match.start() + 1
    return None
