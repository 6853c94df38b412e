"""Escape and unescape transforms for markdown sequences.

Escaping turns characters that would otherwise be read as markdown into
literal text by prefixing them with a backslash; unescaping removes that
backslash again. Inline sequences are escaped anywhere in the text, block
sequences only at the very start of it.

For text without backslashes, unescape(escape(text)) == text. Escaping is
not idempotent: escaping already escaped text escapes it again.
"""

import re
from typing import Callable

from .block_rules import ESC_BLOCK_SEQ, UN_ESC_BLOCK_SEQ
from .inline_rules import ESC_REG_1, INLINE_SEQUENCE_SET
from .internal import replace_match
from .models import MatchResult

_INLINE_SEQUENCE = re.compile(f"({INLINE_SEQUENCE_SET})")


def unescape_markdown_inline_sequences(text: str) -> str:
    """Remove escape backslashes from inline markdown characters.

    Example: ``"some \\*italic\\*"`` becomes ``"some *italic*"``.
    """
    return ESC_REG_1.sub(r"\1", text)


def escape_markdown_inline_sequences(text: str) -> str:
    """Add a backslash before every inline markdown character.

    Example: ``"some *italic*"`` becomes ``"some \\*italic\\*"``.
    """
    return _INLINE_SEQUENCE.sub(r"\\\1", text)


def unescape_markdown_block_sequences(
    text: str, process_part: Callable[[str], str]
) -> str:
    """Remove one escape backslash from a leading block sequence.

    Args:
        text: Text that may start with an escaped block sequence (``\\> quote``)
        process_part: Applied to the rest of the text

    Returns:
        The text with the block sequence unescaped and the rest processed
    """
    escaped = ESC_BLOCK_SEQ.match(text)
    if escaped is None:
        return process_part(text)

    match = MatchResult.from_re(escaped)
    return "".join(
        replace_match(text, match, match.group(1), lambda part: [process_part(part)])
    )


def escape_markdown_block_sequences(
    text: str, process_part: Callable[[str], str]
) -> str:
    """Escape a leading block sequence with one more backslash.

    Args:
        text: Text that may start with a block sequence (``> quote``)
        process_part: Applied to the rest of the text

    Returns:
        The text with the block sequence escaped and the rest processed
    """
    found = UN_ESC_BLOCK_SEQ.match(text)
    if found is None:
        return process_part(text)

    match = MatchResult.from_re(found)
    return "".join(
        replace_match(text, match, f"\\{match.text}", lambda part: [process_part(part)])
    )
