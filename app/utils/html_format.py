"""HTML snippets for showing variants in the Streamlit client. Model text is always escaped."""
import html
from typing import List


def format_hook_html(hook: str) -> str:
    return f"<div class='variant-hook'>{html.escape(hook)}</div>"


def format_hashtags_html(hashtags: List[str]) -> str:
    return " ".join(f"<span class='hashtag-badge'>{html.escape(tag)}</span>" for tag in hashtags)
