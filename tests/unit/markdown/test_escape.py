"""Unit tests for markdown.escape module."""

import pytest

from editor_markdown.markdown.escape import (
    escape_markdown_block_sequences,
    escape_markdown_inline_sequences,
    unescape_markdown_block_sequences,
    unescape_markdown_inline_sequences,
)


def identity(text):
    return text


class TestInlineSequences:
    """Test cases for inline escaping."""

    def test_escape_every_inline_character(self):
        """All five inline characters get a backslash."""
        result = escape_markdown_inline_sequences("a*b_c~d`e|f")

        assert result == r"a\*b\_c\~d\`e\|f"

    def test_escape_leaves_other_text(self):
        """Text without inline characters is unchanged."""
        assert escape_markdown_inline_sequences("# plain > text") == "# plain > text"

    def test_unescape(self):
        """Escape backslashes are removed."""
        assert unescape_markdown_inline_sequences(r"some \*italic\*") == "some *italic*"

    def test_unescape_keeps_unrelated_backslashes(self):
        """A backslash before another character stays."""
        assert unescape_markdown_inline_sequences(r"C:\dir\_x") == r"C:\dir_x"

    def test_escape_is_not_idempotent(self):
        """Escaping twice escapes the character again, not the backslash."""
        twice = escape_markdown_inline_sequences(escape_markdown_inline_sequences("*"))

        assert twice == "\\\\*"

    @pytest.mark.parametrize("text", [
        "",
        "plain",
        "**bold** and _it_",
        "`code` ~~s~~ ||sp||",
        "***",
        "a|b|c",
    ])
    def test_round_trip(self, text):
        """Unescaping escaped text gives the original back."""
        escaped = escape_markdown_inline_sequences(text)

        assert unescape_markdown_inline_sequences(escaped) == text

    def test_round_trip_long_text(self):
        """A thousand escaped characters unescape in one pass."""
        text = "*" * 1000 + "_|" * 500

        escaped = escape_markdown_inline_sequences(text)

        assert unescape_markdown_inline_sequences(escaped) == text

    def test_unescape_removes_one_backslash_per_character(self):
        assert unescape_markdown_inline_sequences("\\\\*" * 3) == "\\*" * 3


class TestBlockSequences:
    """Test cases for block escaping."""

    @pytest.mark.parametrize("text,expected", [
        ("# title", r"\# title"),
        ("### title", r"\### title"),
        ("> quote", r"\> quote"),
        ("- item", r"\- item"),
        ("* item", r"\* item"),
        ("1. item", r"\1. item"),
        ("a. item", r"\a. item"),
        ("```js", r"\```js"),
    ])
    def test_escape_leading_sequence(self, text, expected):
        """A block sequence at the start of the text gets a backslash."""
        assert escape_markdown_block_sequences(text, identity) == expected

    def test_escape_processes_rest(self):
        """The remainder is handed to process_part."""
        result = escape_markdown_block_sequences("> *x*", escape_markdown_inline_sequences)

        assert result == r"\> \*x\*"

    def test_escape_without_sequence(self):
        """Text without a leading sequence is only processed."""
        result = escape_markdown_block_sequences("plain *x*", escape_markdown_inline_sequences)

        assert result == r"plain \*x\*"

    def test_escape_only_at_start(self):
        """Sequences later in the text are not block sequences."""
        assert escape_markdown_block_sequences("a # b", identity) == "a # b"

    def test_escape_already_escaped(self):
        """Already escaped sequences gain another backslash."""
        assert escape_markdown_block_sequences(r"\# x", identity) == r"\\# x"

    def test_unescape_leading_sequence(self):
        """One backslash is removed from the leading sequence."""
        assert unescape_markdown_block_sequences(r"\# title", identity) == "# title"

    def test_unescape_removes_only_one_backslash(self):
        """Double-escaped sequences keep one backslash."""
        assert unescape_markdown_block_sequences(r"\\# t", identity) == r"\# t"

    def test_unescape_without_sequence(self):
        """Text without an escaped sequence is only processed."""
        result = unescape_markdown_block_sequences("# x", str.upper)

        assert result == "# X"

    @pytest.mark.parametrize("text", [
        "# h",
        "> q",
        "- a",
        "* b",
        "1. c",
        "```py",
        "plain *x*",
        r"\# x",
        "",
    ])
    def test_round_trip(self, text):
        """Block and inline escaping together round-trip."""
        escaped = escape_markdown_block_sequences(text, escape_markdown_inline_sequences)

        result = unescape_markdown_block_sequences(escaped, unescape_markdown_inline_sequences)

        assert result == text
