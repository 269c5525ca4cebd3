"""Unit tests for ContentSanitizer."""

import pytest

from blog.domain.service import ContentSanitizer


@pytest.fixture
def sanitizer():
    return ContentSanitizer()


class TestContentSanitizer:
    """Tests for the allow-list HTML sanitizer."""

    def test_keeps_allowed_formatting(self, sanitizer):
        """Inline formatting tags survive."""
        html = "<b>bold</b> <i>it</i> <em>em</em> <strong>s</strong> <code>x</code>"
        assert sanitizer.sanitize(html) == html

    def test_removes_script_with_content(self, sanitizer):
        """Scripts are dropped entirely."""
        assert sanitizer.sanitize("hi<script>alert('x')</script>") == "hi"

    def test_strips_disallowed_tags_but_keeps_text(self, sanitizer):
        """Unknown tags are unwrapped."""
        assert sanitizer.sanitize("<div><span>text</span></div>") == "text"

    def test_drops_disallowed_attributes(self, sanitizer):
        """Event handlers and styles are removed from allowed tags."""
        result = sanitizer.sanitize('<b onclick="steal()" style="color:red">x</b>')
        assert result == "<b>x</b>"

    def test_keeps_link_attributes(self, sanitizer):
        """Links keep href, target and rel."""
        html = '<a href="https://example.com" target="_blank" rel="noopener">link</a>'
        result = sanitizer.sanitize(html)
        assert 'href="https://example.com"' in result
        assert 'target="_blank"' in result
        assert 'rel="noopener"' in result

    def test_rejects_javascript_urls(self, sanitizer):
        """Unsafe URL schemes are stripped from links."""
        result = sanitizer.sanitize('<a href="javascript:alert(1)">x</a>')
        assert "javascript" not in result

    def test_trims_whitespace(self, sanitizer):
        """Surrounding whitespace is removed."""
        assert sanitizer.sanitize("   padded  \n") == "padded"
