"""Text sanitization: strips identifying tokens before any analysis.

Pure Python, no framework dependencies. Nothing leaves the process on the
insights path unless it has passed through ``sanitize``.
"""

import re
import unicodedata

# Slack markup: <@U123>, <#C123|general>, <!here>, <!subteam^S1|@team>
MENTION_RE = re.compile(r"<[@#!][^>]*>")
# Slack link markup first (<https://x|label>, <mailto:a@b.c|a@b.c>), then bare URLs
LINK_MARKUP_RE = re.compile(r"<(?:https?://|mailto:)[^>]*>", re.IGNORECASE)
URL_RE = re.compile(r"(?:https?://|www\.)\S+", re.IGNORECASE)
EMAIL_RE = re.compile(r"[\w.+-]+@[\w-]+(?:\.[\w-]+)+")
PHONE_RE = re.compile(r"\+?\d[\d\s().-]{7,}\d")
DATE_RE = re.compile(r"\b\d{1,4}[/-]\d{1,2}[/-]\d{1,4}\b")
LONG_DIGITS_RE = re.compile(r"\d{4,}")
WHITESPACE_RE = re.compile(r"\s+")

NOISE_RE = re.compile(r"^[\d\s:/\-.,]+$")
DIGIT_RE = re.compile(r"\d")


def _keep_char(ch: str) -> bool:
    # Combining marks stay so scripts like Devanagari or Thai are not split apart
    return ch.isalnum() or ch.isspace() or unicodedata.category(ch).startswith("M")


def strip_punctuation(text: str) -> str:
    """Drop everything except letters, digits, combining marks and whitespace."""
    return "".join(ch for ch in text if _keep_char(ch))


def collapse_whitespace(text: str) -> str:
    return WHITESPACE_RE.sub(" ", text).strip()


def _strip_digit_identifiers(text: str) -> str:
    text = PHONE_RE.sub(" ", text)
    return LONG_DIGITS_RE.sub(" ", text)


def sanitize(raw) -> str:
    """Remove mentions, URLs, emails, phone numbers, dates and long digit runs.

    Returns "" for non-string input or on any internal failure; empty text is
    rejected downstream, so failing closed never leaks anything.
    """
    if not isinstance(raw, str):
        return ""
    try:
        text = MENTION_RE.sub(" ", raw)
        text = LINK_MARKUP_RE.sub(" ", text)
        text = URL_RE.sub(" ", text)
        text = EMAIL_RE.sub(" ", text)
        text = PHONE_RE.sub(" ", text)
        text = DATE_RE.sub(" ", text)
        text = LONG_DIGITS_RE.sub(" ", text)
        text = collapse_whitespace(strip_punctuation(text))
        # Dropping punctuation can join digit groups ("12.345.678" -> "12345678")
        return collapse_whitespace(_strip_digit_identifiers(text))
    except Exception:
        return ""


def is_numeric_or_date_only(text) -> bool:
    """True for residue like "12 34 56" or "12/34/2024": digits and separators only."""
    if not isinstance(text, str):
        return False
    stripped = text.strip()
    if not stripped:
        return False
    return bool(NOISE_RE.match(stripped)) and bool(DIGIT_RE.search(stripped))
