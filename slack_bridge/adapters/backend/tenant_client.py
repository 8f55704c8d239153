"""Tenant lookup client: Slack workspace id to tenant id and bot token."""

from slack_bridge.adapters.backend.base import BackendClient
from slack_bridge.domain.models import TenantContext
from slack_bridge.errors import BackendError


class TenantClient(BackendClient):
    name = "tenant-lookup"

    async def resolve(self, workspace_id: str) -> TenantContext:
        data = await self._post({"slack_team_id": workspace_id})
        tenant_id = data.get("tenant_id")
        if not tenant_id or not isinstance(tenant_id, str):
            raise BackendError(self.name, "response missing tenant_id")
        bot_token = data.get("bot_token")
        return TenantContext(
            tenant_id=tenant_id,
            bot_token=bot_token if isinstance(bot_token, str) else "",
        )
