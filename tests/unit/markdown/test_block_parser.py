"""Unit tests for markdown.block_parser module."""

import pytest

from editor_markdown.markdown import markdown_to_html
from editor_markdown.markdown.block_parser import BLOCK_RULES, match_block_rules, parse_block_md
from editor_markdown.markdown.block_rules import CodeBlockRule, HeadingRule
from editor_markdown.markdown.inline_parser import parse_inline_md


class TestHeadings:
    """Test cases for the heading rule."""

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_heading_levels(self, level):
        """One to six hashes produce h1 to h6."""
        marker = "#" * level

        result = parse_block_md(f"{marker} Title")

        assert result == f'<h{level} data-md="{marker}">Title</h{level}>'

    def test_seven_hashes_is_not_a_heading(self):
        """Seven hashes fall through to plain text."""
        assert parse_block_md("####### seven") == "####### seven"

    def test_heading_needs_space(self):
        """#tag is not a heading."""
        assert parse_block_md("#tag") == "#tag"

    def test_heading_content_is_inline_parsed(self):
        """Heading text goes through the inline parser."""
        result = parse_block_md("### **T**", parse_inline_md)

        assert result == '<h3 data-md="###"><strong data-md="**">T</strong></h3>'

    def test_heading_between_lines(self):
        """Lines around the heading are parsed as plain lines."""
        result = parse_block_md("hello\n# Title\nworld")

        assert result == 'hello<br/><h1 data-md="#">Title</h1>world'


class TestCodeBlocks:
    """Test cases for the code block rule."""

    def test_code_block_with_language(self):
        """The info string becomes a language class."""
        result = parse_block_md("```python\nprint(1)\n```")

        assert result == (
            '<pre data-md="```"><code class="language-python">print(1)\n</code></pre>'
        )

    def test_code_block_without_language(self):
        """No info string means no class attribute."""
        result = parse_block_md("```\na\nb\n```")

        assert result == '<pre data-md="```"><code>a\nb\n</code></pre>'

    def test_code_block_body_is_not_parsed(self):
        """Markdown inside a fence stays literal."""
        result = parse_block_md("```\n**x**\n# y\n```", parse_inline_md)

        assert result == '<pre data-md="```"><code>**x**\n# y\n</code></pre>'

    def test_unclosed_fence_is_text(self):
        """A fence without a closing line is not a code block."""
        assert parse_block_md("```\ncode") == "```<br/>code"

    def test_code_block_wins_over_heading(self):
        """Code blocks have the highest priority."""
        result = parse_block_md("# a\n```\nb\n```")

        assert result == '<h1 data-md="#">a</h1><pre data-md="```"><code>b\n</code></pre>'


class TestBlockQuotes:
    """Test cases for the block quote rule."""

    def test_quote_lines(self):
        """Each quoted line is followed by a line break."""
        result = parse_block_md("> a\n> b")

        assert result == '<blockquote data-md=">">a<br/>b<br/></blockquote>'

    def test_empty_quote_line(self):
        """A bare > is an empty quote line."""
        result = parse_block_md("> a\n>\n> b")

        assert result == '<blockquote data-md=">">a<br/><br/>b<br/></blockquote>'

    def test_quote_then_heading(self):
        """Text after the quote is parsed as blocks again."""
        result = parse_block_md("> quote\n# head")

        assert result == (
            '<blockquote data-md=">">quote<br/></blockquote>'
            '<h1 data-md="#">head</h1>'
        )

    def test_quote_content_is_inline_parsed(self):
        """Quote lines go through the inline parser."""
        result = parse_block_md("> *x*", parse_inline_md)

        assert result == '<blockquote data-md=">"><i data-md="*">x</i><br/></blockquote>'


class TestLists:
    """Test cases for the list rules."""

    def test_ordered_list_numeric(self):
        """Numeric markers set start."""
        result = parse_block_md("1. one\n2. two")

        assert result == (
            '<ol data-md="1" start="1"><li><p>one</p></li><li><p>two</p></li></ol>'
        )

    def test_ordered_list_start(self):
        """The first marker decides the start number."""
        assert parse_block_md("3. x") == '<ol data-md="3" start="3"><li><p>x</p></li></ol>'

    def test_ordered_list_alpha_type(self):
        """a, A, i and I markers set the list type."""
        result = parse_block_md("a. x\nb. y")

        assert result == (
            '<ol data-md="a" type="a"><li><p>x</p></li><li><p>y</p></li></ol>'
        )

    def test_ordered_list_other_letter(self):
        """Other letters are list markers without start or type."""
        assert parse_block_md("c. x") == '<ol data-md="-"><li><p>x</p></li></ol>'

    def test_dash_list_is_ordered(self):
        """Dash items form an ordered list marked with the dash."""
        result = parse_block_md("- a\n- b")

        assert result == (
            '<ol data-md="-"><li><p>a</p></li><li><p>b</p></li></ol>'
        )

    def test_dash_and_number_items_share_a_list(self):
        result = parse_block_md("- a\n2. b")

        assert result == (
            '<ol data-md="-"><li><p>a</p></li><li><p>b</p></li></ol>'
        )

    def test_star_list_is_unordered(self):
        result = parse_block_md("* a\n* b")

        assert result == (
            '<ul data-md="*"><li><p>a</p></li><li><p>b</p></li></ul>'
        )

    def test_dash_then_star_items(self):
        """A star item ends the dash list and starts an unordered one."""
        result = parse_block_md("- a\n* b")

        assert result == (
            '<ol data-md="-"><li><p>a</p></li></ol>'
            '<ul data-md="*"><li><p>b</p></li></ul>'
        )

    @pytest.mark.parametrize("text", ["١. x", "٣. x", "². x"])
    def test_non_ascii_digits_are_not_markers(self, text):
        """Only ASCII digits and letters start an ordered item."""
        assert parse_block_md(text) == text

    def test_list_items_are_inline_parsed(self):
        """List item text goes through the inline parser."""
        result = parse_block_md("- **a**", parse_inline_md)

        assert result == '<ol data-md="-"><li><p><strong data-md="**">a</strong></p></li></ol>'


class TestPlainLines:
    """Test cases for text without block markdown."""

    def test_empty_text(self):
        """Empty text is the base case."""
        assert parse_block_md("") == ""

    def test_lines_joined_with_breaks(self):
        """Lines are joined with <br/>."""
        assert parse_block_md("line one\nline two") == "line one<br/>line two"

    def test_empty_lines_preserved(self):
        """Empty lines survive as consecutive breaks."""
        assert parse_block_md("a\n\nb") == "a<br/><br/>b"

    def test_no_inline_parser_leaves_inline_markdown(self):
        """Without an inline parser, inline markdown is left alone."""
        assert parse_block_md("**x**") == "**x**"

    def test_escaped_heading_drops_one_backslash(self):
        """An escaped block sequence renders literally."""
        result = parse_block_md(r"\# not a heading", parse_inline_md)

        assert result == "# not a heading"

    def test_double_escaped_sequence_keeps_one_backslash(self):
        """Only one backslash is removed."""
        assert parse_block_md(r"\\> x") == r"\> x"


class TestMatchBlockRules:
    """Test cases for match_block_rules."""

    def test_returns_none_without_match(self):
        """Text without block markdown yields None."""
        assert match_block_rules("plain") is None

    def test_first_rule_in_priority_order_wins(self):
        """A later code block beats an earlier heading."""
        rule, match = match_block_rules("# a\n```\nb\n```")

        assert rule is CodeBlockRule
        assert match.start == 4

    def test_given_rules_only(self):
        assert match_block_rules("```\nb\n```", [HeadingRule]) is None

    def test_block_rule_priority_order(self):
        """Code blocks are tried first and headings last."""
        assert BLOCK_RULES[0] is CodeBlockRule
        assert BLOCK_RULES[-1] is HeadingRule


class TestLongInput:
    """Test cases for inputs with many blocks."""

    def test_many_headings(self):
        """A thousand headings parse without deep recursion."""
        result = parse_block_md("\n".join(["# h"] * 1000))

        assert result == '<h1 data-md="#">h</h1>' * 1000

    def test_many_alternating_lists(self):
        result = parse_block_md("\n".join(["- a\n* b"] * 500))

        assert result == (
            '<ol data-md="-"><li><p>a</p></li></ol>'
            '<ul data-md="*"><li><p>b</p></li></ul>'
        ) * 500


class TestMarkdownToHtml:
    """Test cases for markdown_to_html."""

    def test_combines_block_and_inline(self):
        """Block and inline rules both apply."""
        result = markdown_to_html("# *Hi*\nsee [x](https://example.com)")

        assert result == (
            '<h1 data-md="#"><i data-md="*">Hi</i></h1>'
            'see <a data-md href="https://example.com">x</a>'
        )
