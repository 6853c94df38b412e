"""Unit tests for editor.sanitizer module."""

from editor_markdown.editor.sanitizer import sanitize_custom_html


class TestSanitizeCustomHtml:
    """Test cases for sanitize_custom_html."""

    def test_allowed_markup_is_kept(self):
        assert sanitize_custom_html("<p>a <b>b</b></p>") == "<p>a <b>b</b></p>"

    def test_script_is_removed_with_content(self):
        assert sanitize_custom_html("<p>a</p><script>alert(1)</script>") == "<p>a</p>"

    def test_event_handlers_are_removed(self):
        assert sanitize_custom_html('<b onclick="x()">y</b>') == "<b>y</b>"

    def test_unknown_tags_are_unwrapped(self):
        """Disallowed tags go, their text stays."""
        assert sanitize_custom_html("<marquee>hi</marquee>") == "hi"

    def test_disallowed_attribute_on_allowed_tag(self):
        assert sanitize_custom_html('<div style="color:red">a</div>') == "<div>a</div>"

    def test_source_delimiter_is_kept(self):
        result = sanitize_custom_html('<strong data-md="**">x</strong>')

        assert 'data-md="**"' in result

    def test_spoiler_attribute_is_kept(self):
        result = sanitize_custom_html("<span data-mx-spoiler>s</span>")

        assert "data-mx-spoiler" in result

    def test_only_language_classes_on_code(self):
        result = sanitize_custom_html('<code class="language-py evil">x</code>')

        assert result == '<code class="language-py">x</code>'

    def test_code_class_without_language_is_dropped(self):
        assert sanitize_custom_html('<code class="evil">x</code>') == "<code>x</code>"

    def test_javascript_links_are_removed(self):
        result = sanitize_custom_html('<a href="javascript:alert(1)">x</a>')

        assert "javascript" not in result
        assert "x" in result

    def test_matrix_to_links_are_kept(self):
        result = sanitize_custom_html('<a href="https://matrix.to/#/@a:x.org">a</a>')

        assert 'href="https://matrix.to/#/@a:x.org"' in result

    def test_mxc_image_source_is_kept(self):
        result = sanitize_custom_html('<img data-mx-emoticon src="mxc://x.org/abc" alt=":x:">')

        assert 'src="mxc://x.org/abc"' in result

    def test_comments_are_removed(self):
        assert sanitize_custom_html("a<!-- secret -->b") == "ab"
