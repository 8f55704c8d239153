"""Intervention client: asks the policy service whether to reply to a message."""

from slack_bridge.adapters.backend.base import BackendClient
from slack_bridge.adapters.backend.retrieval_client import parse_sources
from slack_bridge.domain.models import TenantContext
from slack_bridge.ports.inbound import MessageEvent
from slack_bridge.ports.outbound import InterventionDecision, RespondMode


class InterventionClient(BackendClient):
    name = "intervention"

    async def decide(self, tenant: TenantContext, event: MessageEvent) -> InterventionDecision:
        data = await self._post(
            {
                "tenant_id": tenant.tenant_id,
                "slack_team_id": event.workspace_id,
                "message_text": event.text,
                "metadata": {
                    "channel_id": event.channel_id,
                    "thread_ts": event.thread_timestamp,
                    "user_id": event.user_id,
                    "message_ts": event.timestamp,
                },
            },
            tenant_id=tenant.tenant_id,
        )
        reply_text = data.get("reply_text")
        return InterventionDecision(
            should_respond=data.get("should_respond") is True,
            reply_text=reply_text if isinstance(reply_text, str) and reply_text else None,
            respond_mode=RespondMode.parse(data.get("respond_mode")),
            sources=parse_sources(data.get("sources")),
        )
