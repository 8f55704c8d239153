"""Formatting of answers and sources for Slack (mrkdwn)."""

import re
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

from slack_bridge.ports.outbound import Source

NO_ANSWER = "No answer found."

# Trailing "Sources:" block the backend sometimes appends to the answer itself
SOURCES_BLOCK_RE = re.compile(r"Sources?:[\s\S]*", re.IGNORECASE)
SOURCE_BULLET_RE = re.compile(
    r"\n[*\-•]\s*[A-Za-z0-9_\-().,\s]+(Updated|No Link Available|Link|http).*$",
    re.IGNORECASE | re.MULTILINE,
)
UPDATED_BULLET_RE = re.compile(
    r"\n\*\s*[A-Za-z0-9_\-().,\s]+Updated:[^\n]*",
    re.IGNORECASE | re.MULTILINE,
)

FEEDBACK_UP = "feedback_up"
FEEDBACK_DOWN = "feedback_down"

# Slack rejects section blocks whose text exceeds this many characters
SECTION_TEXT_LIMIT = 3000


def _parse_timestamp(value: str) -> Optional[datetime]:
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except (AttributeError, ValueError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def relative_date(updated_at: Optional[str], now: Optional[datetime] = None) -> str:
    """Human-readable age, e.g. "3 days ago", "1 hour ago", "just now"."""
    then = _parse_timestamp(updated_at) if updated_at else None
    if then is None:
        return "unknown"
    now = now or datetime.now(timezone.utc)
    seconds = int((now - then).total_seconds())
    minutes = seconds // 60
    hours = minutes // 60
    days = hours // 24

    if days > 1:
        return f"{days} days ago"
    if days == 1:
        return "1 day ago"
    if hours >= 1:
        return f"{hours} hour{'s' if hours > 1 else ''} ago"
    if minutes >= 1:
        return f"{minutes} minute{'s' if minutes > 1 else ''} ago"
    return "just now"


def clean_answer(answer: Optional[str]) -> str:
    """Strip source listings the backend inlined into the answer text."""
    text = answer or ""
    text = SOURCES_BLOCK_RE.sub("", text)
    text = SOURCE_BULLET_RE.sub("", text)
    text = UPDATED_BULLET_RE.sub("", text)
    return text.strip() or NO_ANSWER


def format_sources(
    sources: Sequence[Source], with_dates: bool = True, now: Optional[datetime] = None
) -> str:
    if not sources:
        return ""
    lines = []
    for source in sources:
        line = f"• <{source.url}|{source.title}>" if source.url else f"• {source.title}"
        if with_dates:
            line += f" (Updated: {relative_date(source.updated_at, now)})"
        lines.append(line)
    return "\n\n*Sources:*\n" + "\n".join(lines)


def format_answer(
    question: str, answer: str, sources: Sequence[Source], now: Optional[datetime] = None
) -> str:
    return f"💡 *Answer to:* {question}\n\n{clean_answer(answer)}{format_sources(sources, now=now)}"


def split_section_text(text: str, limit: int = SECTION_TEXT_LIMIT) -> List[str]:
    """Split text into pieces of at most ``limit`` characters.

    Cuts at the last line break in the second half of the window, else mid-line.
    """
    pieces = []
    while len(text) > limit:
        cut = text.rfind("\n", 0, limit + 1)
        if cut < limit // 2:
            cut = limit
        pieces.append(text[:cut])
        text = text[cut:].lstrip("\n")
    if text or not pieces:
        pieces.append(text)
    return pieces


def answer_blocks(text: str, log_id: Optional[str]) -> Optional[List[Dict[str, Any]]]:
    """Block Kit layout with 👍/👎 buttons carrying the answer's log id."""
    if not log_id:
        return None
    blocks: List[Dict[str, Any]] = [
        {"type": "section", "text": {"type": "mrkdwn", "text": piece}}
        for piece in split_section_text(text)
    ]
    blocks.append(
        {
            "type": "actions",
            "elements": [
                {
                    "type": "button",
                    "action_id": FEEDBACK_UP,
                    "text": {"type": "plain_text", "text": "👍 Helpful"},
                    "value": log_id,
                },
                {
                    "type": "button",
                    "action_id": FEEDBACK_DOWN,
                    "text": {"type": "plain_text", "text": "👎 Not helpful"},
                    "value": log_id,
                },
            ],
        }
    )
    return blocks
