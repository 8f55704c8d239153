"""Outbound ports — interfaces for backend and Slack-side adapters."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Protocol, runtime_checkable

from slack_bridge.ports.inbound import MessageEvent

if TYPE_CHECKING:
    from slack_bridge.domain.models import InsightsSignal, TenantContext


@dataclass(frozen=True)
class Source:
    """A document the retrieval backend cited."""

    title: str
    url: Optional[str] = None
    updated_at: Optional[str] = None


@dataclass(frozen=True)
class RetrievalAnswer:
    answer: str
    sources: List[Source] = field(default_factory=list)
    log_id: Optional[str] = None


class RespondMode(str, Enum):
    EPHEMERAL = "ephemeral"
    THREAD_REPLY = "thread_reply"
    CHANNEL_MESSAGE = "channel_message"

    @classmethod
    def parse(cls, raw: Any) -> "RespondMode":
        for mode in cls:
            if mode.value == raw:
                return mode
        return cls.CHANNEL_MESSAGE


@dataclass(frozen=True)
class InterventionDecision:
    should_respond: bool = False
    reply_text: Optional[str] = None
    respond_mode: RespondMode = RespondMode.CHANNEL_MESSAGE
    sources: List[Source] = field(default_factory=list)


@runtime_checkable
class TenantResolverPort(Protocol):
    """Maps a workspace id to its tenant."""

    async def resolve(self, workspace_id: str) -> TenantContext: ...


@runtime_checkable
class RetrievalPort(Protocol):
    """Question answering over the tenant's knowledge base."""

    async def query(self, question: str, tenant: TenantContext) -> RetrievalAnswer: ...


@runtime_checkable
class InterventionPort(Protocol):
    """Policy service deciding whether to reply proactively to a message."""

    async def decide(self, tenant: TenantContext, event: MessageEvent) -> InterventionDecision: ...


@runtime_checkable
class FeedbackPort(Protocol):
    async def submit(self, log_id: str, feedback: str, tenant: TenantContext, user_id: str) -> None: ...


@runtime_checkable
class InsightsPort(Protocol):
    async def ingest(self, signal: InsightsSignal) -> None: ...


@runtime_checkable
class ResponderPort(Protocol):
    """Replies to the user who triggered a command or action."""

    async def respond(self, text: str, blocks: Optional[List[Dict[str, Any]]] = None) -> None: ...


@runtime_checkable
class ChannelPort(Protocol):
    """Posts into a channel on behalf of the bot."""

    async def post_ephemeral(
        self, channel_id: str, user_id: str, text: str, token: Optional[str] = None
    ) -> None: ...

    async def post_message(
        self,
        channel_id: str,
        text: str,
        thread_ts: Optional[str] = None,
        token: Optional[str] = None,
    ) -> None: ...
