"""Port interfaces (Hexagonal Architecture)."""

from slack_bridge.ports.inbound import (
    ActionEvent,
    ChannelType,
    CommandInvocation,
    MessageEvent,
    action_from_payload,
    command_from_payload,
    message_from_payload,
)
from slack_bridge.ports.outbound import (
    ChannelPort,
    FeedbackPort,
    InsightsPort,
    InterventionDecision,
    InterventionPort,
    RespondMode,
    ResponderPort,
    RetrievalAnswer,
    RetrievalPort,
    Source,
    TenantResolverPort,
)

__all__ = [
    "ActionEvent",
    "ChannelType",
    "CommandInvocation",
    "MessageEvent",
    "action_from_payload",
    "command_from_payload",
    "message_from_payload",
    "ChannelPort",
    "FeedbackPort",
    "InsightsPort",
    "InterventionDecision",
    "InterventionPort",
    "RespondMode",
    "ResponderPort",
    "RetrievalAnswer",
    "RetrievalPort",
    "Source",
    "TenantResolverPort",
]
