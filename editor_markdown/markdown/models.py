"""Data models for the markdown rule engines.

A rule is a pair of pure functions: one that tests a text window and one
that renders a successful match to HTML. Rules carry no state and are only
distinguished by their position in a priority-ordered table.
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional, Tuple


@dataclass(frozen=True)
class MatchResult:
    """Outcome of testing one rule against a text window.

    Attributes:
        text: The matched substring
        start: Offset of the match within the text it was tested against
        groups: Ordered capture groups (None for groups that did not take part)
    """

    text: str
    start: int
    groups: Tuple[Optional[str], ...] = ()

    @property
    def end(self) -> int:
        """Offset just past the matched substring."""
        return self.start + len(self.text)

    def group(self, index: int) -> str:
        """Return capture group ``index`` (1-based), or '' if it did not match."""
        value = self.groups[index - 1]
        return value if value is not None else ''

    @classmethod
    def from_re(cls, match: Optional["re.Match[str]"]) -> Optional["MatchResult"]:
        """Build a MatchResult from a ``re`` match object."""
        if match is None:
            return None
        return cls(text=match.group(0), start=match.start(), groups=match.groups())


MatchRule = Callable[[str], Optional[MatchResult]]

InlineParser = Callable[[str], str]


@dataclass(frozen=True)
class InlineRule:
    """Inline markdown rule.

    Attributes:
        match: Finds the first occurrence of the rule in a text
        render: Converts a match to HTML; receives the inline parser so that
            captured content can be parsed recursively
    """

    match: MatchRule
    render: Callable[[InlineParser, MatchResult], str]


@dataclass(frozen=True)
class BlockRule:
    """Block-level markdown rule.

    Attributes:
        match: Finds the first occurrence of the rule in a text
        render: Converts a match to HTML; receives the optional inline parser
            to apply to each rendered line
    """

    match: MatchRule
    render: Callable[[MatchResult, Optional[InlineParser]], str]
