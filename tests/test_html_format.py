"""Tests for the HTML snippets used by the Streamlit client."""
from __future__ import annotations

from app.utils.html_format import format_hashtags_html, format_hook_html


class TestHookHtml:

    def test_plain_hook(self):
        assert format_hook_html("Spring sale") == "<div class='variant-hook'>Spring sale</div>"

    def test_markup_in_hook_is_escaped(self):
        result = format_hook_html("</div><img src=x onerror=alert(1)>")

        assert "<img" not in result
        assert result.count("</div>") == 1
        assert "&lt;/div&gt;&lt;img src=x onerror=alert(1)&gt;" in result

    def test_quotes_are_escaped(self):
        assert "&#x27;" in format_hook_html("It's 'here'")


class TestHashtagsHtml:

    def test_badges(self):
        assert format_hashtags_html(["#a", "#b"]) == (
            "<span class='hashtag-badge'>#a</span> <span class='hashtag-badge'>#b</span>"
        )

    def test_markup_in_tag_is_escaped(self):
        result = format_hashtags_html(["#<script>alert(1)</script>"])

        assert "<script>" not in result
        assert "#&lt;script&gt;alert(1)&lt;/script&gt;" in result

    def test_empty(self):
        assert format_hashtags_html([]) == ""
