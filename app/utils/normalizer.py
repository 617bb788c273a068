import json
import logging
import re
from typing import Any, List

from app.schemas.response import PostVariant

logger = logging.getLogger(__name__)

DEFAULT_HOOK = "New results without extra risk."
DEFAULT_CAPTION = "New post coming soon!"
MAX_HOOK_LENGTH = 120

# First newline or sentence-ending punctuation
_HOOK_DELIMITER = re.compile(r"[\n.!?]")

# Leading run of "#" characters and whitespace, in any mix
_HASHTAG_PREFIX = re.compile(r"^[#\s]+")


class ResponseNormalizer:
    """
    Turns raw model output into a non-empty list of well-formed variants.

    Guarantees for every variant:
    - caption is non-empty
    - hook is non-empty and at most 120 characters
    - every hashtag starts with exactly one '#'

    Malformed output is never an error: each bad path falls back to
    placeholder content instead of raising.
    """

    def __init__(self, max_hook_length: int = MAX_HOOK_LENGTH):
        self.max_hook_length = max_hook_length

    def normalize(self, raw_text: Any) -> List[PostVariant]:
        """
        Normalize the raw completion text.

        Args:
            raw_text: Text returned by the completion call

        Returns:
            List of repaired variants, never empty
        """
        text = raw_text if isinstance(raw_text, str) else ""
        candidates = self._extract_candidates(text)

        variants = [self._repair(candidate) for candidate in candidates]
        if not variants:
            logger.warning("Model returned an empty variants array; using default variant")
            return [self.default_variant()]
        return variants

    def default_variant(self) -> PostVariant:
        return PostVariant(hook=DEFAULT_HOOK, caption=DEFAULT_CAPTION, hashtags=[])

    def _extract_candidates(self, text: str) -> List[dict]:
        """Parse the text and pull out raw variant dicts, or a single raw-text fallback."""
        try:
            parsed = json.loads(text)
        except (ValueError, RecursionError):
            logger.warning(f"Model output is not valid JSON ({len(text)} chars); using it as caption")
            return [{"hook": "", "caption": text, "hashtags": []}]

        variants = parsed.get("variants") if isinstance(parsed, dict) else None
        if not isinstance(variants, list):
            logger.warning("Model output has no 'variants' array; using it as caption")
            return [{"hook": "", "caption": text, "hashtags": []}]

        candidates = []
        for item in variants:
            if not isinstance(item, dict):
                item = {}
            hashtags = item.get("hashtags")
            candidates.append({
                "hook": self._as_text(item.get("hook")),
                "caption": self._as_text(item.get("caption")),
                "hashtags": hashtags if isinstance(hashtags, list) else [],
            })
        return candidates

    def _repair(self, candidate: dict) -> PostVariant:
        # A missing caption gives no hook to derive, even after the placeholder fills it
        source_caption = candidate["caption"].strip()
        caption = source_caption or DEFAULT_CAPTION
        hook = self.repair_hook(candidate["hook"], source_caption)
        hashtags = self.normalize_hashtags(candidate["hashtags"])
        return PostVariant(hook=hook, caption=caption, hashtags=hashtags)

    def repair_hook(self, hook: str, caption: str) -> str:
        """Use the given hook, else the caption's first sentence, else the placeholder."""
        hook = hook.strip()
        if not hook:
            hook = self.derive_hook(caption)
        hook = hook[:self.max_hook_length].strip()
        return hook or DEFAULT_HOOK

    def derive_hook(self, caption: str) -> str:
        """
        First segment of the caption up to a newline or '.', '!', '?'.

        A caption that starts with a delimiter yields an empty hook.
        """
        first_segment = _HOOK_DELIMITER.split(caption, maxsplit=1)[0]
        return first_segment.strip()[:self.max_hook_length]

    def normalize_hashtags(self, hashtags: List[Any]) -> List[str]:
        normalized = []
        for tag in hashtags:
            tag = self.normalize_hashtag(tag)
            if tag:
                normalized.append(tag)
        return normalized

    def normalize_hashtag(self, tag: Any) -> str:
        """Return '#tag' for any tag with or without leading '#' characters, or '' if nothing remains."""
        text = "" if tag is None else str(tag)
        body = _HASHTAG_PREFIX.sub("", text).strip()
        if not body:
            return ""
        return f"#{body}"

    @staticmethod
    def _as_text(value: Any) -> str:
        return value if isinstance(value, str) else ""


# Global normalizer instance
response_normalizer = ResponseNormalizer()
