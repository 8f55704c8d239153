"""Frequency-ranked keyword extraction."""

from collections import Counter
from typing import List

MAX_KEYWORDS = 5
MIN_KEYWORD_LENGTH = 4

STOP_WORDS = frozenset({
    "about", "also", "been", "being", "could", "from", "have", "just",
    "like", "really", "should", "some", "than", "that", "their", "them",
    "then", "there", "they", "think", "this", "what", "when", "where",
    "which", "will", "with", "would", "your",
})


def extract_keywords(sanitized_text, limit: int = MAX_KEYWORDS) -> List[str]:
    """Return up to ``limit`` tokens ordered by frequency.

    Ties keep first-occurrence order: Counter preserves insertion order and
    ``sorted`` is stable even with ``reverse=True``.
    """
    if not isinstance(sanitized_text, str):
        return []
    counts = Counter(
        token
        for token in sanitized_text.lower().split()
        if len(token) >= MIN_KEYWORD_LENGTH and token not in STOP_WORDS
    )
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [token for token, _ in ranked[:limit]]
