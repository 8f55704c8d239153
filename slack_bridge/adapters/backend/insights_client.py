"""Insights ingest client: sends de-identified signals for aggregate analytics."""

from slack_bridge.adapters.backend.base import BackendClient
from slack_bridge.domain.models import InsightsSignal


class InsightsClient(BackendClient):
    name = "insights"

    async def ingest(self, signal: InsightsSignal) -> None:
        await self._post(signal.to_payload(), tenant_id=signal.tenant_id, expect_json=False)
