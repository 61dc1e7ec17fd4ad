"""Tests for HTML escaping and HTML-to-text extraction."""

import pytest

from rsvp_core.services.tokenizer.escaping import escape_html, strip_html, unescape_html


# =============================================================================
# Escaping
# =============================================================================


class TestEscapeHtml:
    """Tests for escape_html."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("<x>", "&lt;x&gt;"),
            ("&<>\"'", "&amp;&lt;&gt;&quot;&#39;"),
            ("Tom & Jerry", "Tom &amp; Jerry"),
            ("&amp;", "&amp;amp;"),
            ("plain café", "plain café"),
            ("", ""),
        ],
    )
    def test_escape(self, text, expected):
        assert escape_html(text) == expected

    @pytest.mark.parametrize("value", [None, 123, ["<"]])
    def test_non_string_gives_empty(self, value):
        assert escape_html(value) == ""

    def test_output_has_no_raw_markup(self):
        escaped = escape_html('<img src="x" onerror=\'alert(1)\'>')
        for char in "<>\"'":
            assert char not in escaped

    @pytest.mark.parametrize(
        "text",
        ["<script>", "a & b", "\"quoted\" 'single'", "&lt; already", "日本語 & more"],
    )
    def test_unescape_reverses_escape(self, text):
        assert unescape_html(escape_html(text)) == text


# =============================================================================
# HTML Stripping
# =============================================================================


class TestStripHtml:
    """Tests for strip_html."""

    @pytest.mark.parametrize(
        "html,expected",
        [
            ("<p>Hello &amp; world</p>", "Hello & world"),
            ("<script>bad()</script>Safe", "Safe"),
            ("<STYLE type='x'>p { color: red }</STYLE>text", "text"),
            ("<noscript>enable js</noscript>ok", "ok"),
            ("<svg><path d='M0'/></svg>icon", "icon"),
            ("a<br>b", "a b"),
            ("<div>\n  one\n\n  two\t</div>", "one two"),
            ("Tom &amp; Jerry&#39;s", "Tom & Jerry's"),
        ],
    )
    def test_strip(self, html, expected):
        assert strip_html(html) == expected

    def test_multiline_script_removed(self):
        html = "<script type='text/javascript'>\nvar x = '<p>';\nalert(x);\n</script><p>Body</p>"
        assert strip_html(html) == "Body"

    def test_every_script_block_removed(self):
        html = "<script>a()</script>Keep<script>b()</script> this"
        assert strip_html(html) == "Keep this"

    @pytest.mark.parametrize("value", [None, "", 42])
    def test_empty_input(self, value):
        assert strip_html(value) == ""


class TestEntityDecoding:
    """Tests for named and numeric entity decoding."""

    @pytest.mark.parametrize(
        "html,expected",
        [
            ("&#65;&#x42;", "AB"),
            ("&#X43;", "C"),
            ("&#x1F600;", "\U0001F600"),
            ("&hellip;", "…"),
            ("a&nbsp;b", "a b"),
            ("&NBSP;x", "x"),
            ("&mdash;", "—"),
            ("&copy; 2024", "© 2024"),
        ],
    )
    def test_decoded(self, html, expected):
        assert strip_html(html) == expected

    @pytest.mark.parametrize(
        "html,expected",
        [
            ("&#0;x", "x"),
            ("&#1114112;x", "x"),
            ("&#xD800;x", "x"),
            ("&#99999999999999999999;x", "x"),
        ],
    )
    def test_invalid_code_points_dropped(self, html, expected):
        assert strip_html(html) == expected

    def test_unknown_entity_becomes_space(self):
        assert strip_html("a&foo;b") == "a b"

    @pytest.mark.parametrize(
        "html,expected",
        [
            ("&amp;lt;b&amp;gt;", "<b>"),
            ("&AMP;quot;hi&amp;quot;", '"hi"'),
            ("&amp;#65;", "A"),
            ("&amp;#x42;", "B"),
            # nbsp is decoded before amp, so what amp uncovers is left over
            ("a&amp;nbsp;b", "a b"),
        ],
    )
    def test_decoding_order(self, html, expected):
        """Named entities run in table order, before numeric references."""
        assert strip_html(html) == expected

    def test_incomplete_entity_left_alone(self):
        assert strip_html("fish &chips") == "fish &chips"
