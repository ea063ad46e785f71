"""Unit tests for rich-text sanitization."""

from domain.normalizers.html import (
    coerce_legacy_html,
    find_img_sources,
    html_to_text,
    plain_text_to_html,
    sanitize_message_html,
    sanitize_rich_html,
)


class TestSanitizeRichHtml:
    def test_strips_scripts_and_event_handlers(self):
        result = sanitize_rich_html(
            '<p onclick="x()">Hi<script>alert(1)</script></p><img src="/images/a.png" onerror="x()">'
        )

        assert "script" not in result
        assert "onclick" not in result
        assert "onerror" not in result
        assert '<img src="/images/a.png">' in result

    def test_links_open_in_new_tab(self):
        result = sanitize_rich_html('<a href="https://example.com" target="_self">x</a>')

        assert 'href="https://example.com"' in result
        assert 'target="_blank"' in result
        assert 'rel="noopener noreferrer"' in result

    def test_drops_unsafe_href(self):
        result = sanitize_rich_html('<a href="javascript:alert(1)">x</a>')

        assert "javascript" not in result

    def test_keeps_allowed_formatting(self):
        result = sanitize_rich_html("<h2>T</h2><ul><li><strong>a</strong></li></ul><blockquote>q</blockquote>")

        assert result == "<h2>T</h2><ul><li><strong>a</strong></li></ul><blockquote>q</blockquote>"

    def test_non_string_is_empty(self):
        assert sanitize_rich_html(None) == ""
        assert sanitize_rich_html(["<p>x</p>"]) == ""


class TestLegacyHtml:
    def test_plain_text_becomes_paragraphs(self):
        result = coerce_legacy_html("First line\nsecond line\n\nNew paragraph")

        assert result.startswith("<p>First line<br")
        assert result.endswith("<p>New paragraph</p>")
        assert result.count("<p>") == 2

    def test_plain_text_is_escaped(self):
        result = coerce_legacy_html("1 < 2 & 3 > 2")

        assert result == "<p>1 &lt; 2 &amp; 3 &gt; 2</p>"

    def test_html_is_sanitized_not_wrapped(self):
        assert coerce_legacy_html("<p>Hello</p>") == "<p>Hello</p>"

    def test_idempotent(self):
        for value in ["Hi\nthere", "<p>Hi</p><script>x</script>", "<div>only div</div>", "a < b"]:
            once = coerce_legacy_html(value)
            assert coerce_legacy_html(once) == once

    def test_blank_is_empty(self):
        assert coerce_legacy_html("   ") == ""
        assert coerce_legacy_html(None) == ""


class TestMessageHtml:
    def test_narrow_allow_list(self):
        result = sanitize_message_html('<h1>Big</h1><p>ok</p><img src="/images/a.png">')

        assert "<h1>" not in result
        assert "<img" not in result
        assert "<p>ok</p>" in result

    def test_html_to_text(self):
        text = html_to_text("<p>Hello<br>there</p><ul><li>one</li><li>two</li></ul><p>&amp; bye</p>")

        assert text == "Hello\nthere\n- one\n- two\n\n& bye"

    def test_plain_text_to_html(self):
        assert plain_text_to_html("a\nb") == "<p>a<br />b</p>"
        assert plain_text_to_html("   ") == ""


def test_find_img_sources():
    html = '<p><img src="/images/a.png" alt="a"></p><img alt="b" src=\'https://cdn/x.jpg\'>'

    assert find_img_sources(html) == ["/images/a.png", "https://cdn/x.jpg"]
    assert find_img_sources(None) == []
