"""Inbound port — Slack payloads translated into explicit event variants.

Raw Slack dicts are converted here, at the boundary, so the rest of the
bridge never inspects loosely-typed payloads.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class ChannelType(str, Enum):
    CHANNEL = "channel"
    GROUP = "group"
    DM = "dm"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, raw: Any) -> "ChannelType":
        value = str(raw or "").strip().lower()
        if value == "channel":
            return cls.CHANNEL
        if value in ("group", "private_channel"):
            return cls.GROUP
        if value in ("im", "mpim", "dm"):
            return cls.DM
        return cls.UNKNOWN


@dataclass(frozen=True)
class CommandInvocation:
    """A slash-command invocation (``/ask ...``)."""

    command_text: str
    workspace_id: str
    user_id: str = ""
    channel_id: str = ""
    kind: str = "command"

    @property
    def question(self) -> str:
        return self.command_text.strip()


@dataclass(frozen=True)
class MessageEvent:
    """A channel message delivered through the Events API."""

    text: str
    channel_id: str
    channel_type: ChannelType
    workspace_id: str
    user_id: str = ""
    timestamp: str = ""
    thread_timestamp: Optional[str] = None
    subtype: Optional[str] = None
    bot_id: Optional[str] = None
    kind: str = "message"

    @property
    def sender_is_bot(self) -> bool:
        return bool(self.bot_id) or self.subtype == "bot_message"


@dataclass(frozen=True)
class ActionEvent:
    """A button press on an answer (feedback up/down)."""

    action_id: str
    action_value: str
    user_id: str
    workspace_id: str
    kind: str = "action"


def _str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def command_from_payload(payload: Any) -> CommandInvocation:
    """Translate a slash-command payload."""
    payload = _dict(payload)
    return CommandInvocation(
        command_text=_str(payload.get("text")),
        workspace_id=_str(payload.get("team_id")),
        user_id=_str(payload.get("user_id")),
        channel_id=_str(payload.get("channel_id")),
    )


def message_from_payload(event: Any, team_id: str = "") -> MessageEvent:
    """Translate a ``message`` event; ``team_id`` comes from the outer envelope."""
    event = _dict(event)
    return MessageEvent(
        text=_str(event.get("text")),
        channel_id=_str(event.get("channel")),
        channel_type=ChannelType.parse(event.get("channel_type")),
        workspace_id=_str(event.get("team")) or _str(team_id),
        user_id=_str(event.get("user")),
        timestamp=_str(event.get("ts")),
        thread_timestamp=_str(event.get("thread_ts")) or None,
        subtype=_str(event.get("subtype")) or None,
        bot_id=_str(event.get("bot_id")) or None,
    )


def action_from_payload(body: Any) -> ActionEvent:
    """Translate a block-actions body; only the first action is considered."""
    body = _dict(body)
    actions = body.get("actions")
    action = _dict(actions[0]) if isinstance(actions, list) and actions else {}
    user = _dict(body.get("user"))
    team = _dict(body.get("team"))
    return ActionEvent(
        action_id=_str(action.get("action_id")),
        action_value=_str(action.get("value")),
        user_id=_str(user.get("id")),
        workspace_id=_str(team.get("id")) or _str(user.get("team_id")),
    )
