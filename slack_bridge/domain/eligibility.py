"""Structural checks deciding whether a message is a candidate for analysis."""

import re

from slack_bridge.ports.inbound import ChannelType, MessageEvent

MIN_WORD_COUNT = 4

# Public channel ids start with "C"; private channels use "G", DMs "D"
PUBLIC_CHANNEL_PREFIX = "C"

# User-authored subtypes that still count as ordinary messages
ALLOWED_SUBTYPES = frozenset({"thread_broadcast"})

# One or more adjacent shortcodes, e.g. ":tada::tada:" or ":+1::skin-tone-2:"
SHORTCODE_RUN_RE = re.compile(r"(?::[\w+\-']+:)+")


def _is_emoji_token(token: str) -> bool:
    if SHORTCODE_RUN_RE.fullmatch(token):
        return True
    # Unicode emoji and symbol runs carry no letters or digits
    return not any(ch.isalnum() for ch in token)


def is_emoji_only(text: str) -> bool:
    """True when the text is one or more emoji (shortcodes or glyphs) and nothing else."""
    tokens = text.split()
    return bool(tokens) and all(_is_emoji_token(t) for t in tokens)


def is_eligible(message) -> bool:
    """Cheap gate run before sanitization. Never raises."""
    try:
        if not isinstance(message, MessageEvent):
            return False
        if message.channel_type is not ChannelType.CHANNEL:
            return False
        if not message.channel_id.startswith(PUBLIC_CHANNEL_PREFIX):
            return False
        if message.sender_is_bot:
            return False
        if message.subtype and message.subtype not in ALLOWED_SUBTYPES:
            return False
        text = message.text if isinstance(message.text, str) else ""
        if len(text.split()) < MIN_WORD_COUNT:
            return False
        if is_emoji_only(text):
            return False
        return True
    except Exception:
        return False
