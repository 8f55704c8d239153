"""Feedback client: records 👍/👎 on an answer's log entry."""

from slack_bridge.adapters.backend.base import BackendClient
from slack_bridge.domain.models import TenantContext

FEEDBACK_SOURCE = "slack"


class FeedbackClient(BackendClient):
    name = "feedback"

    async def submit(self, log_id: str, feedback: str, tenant: TenantContext, user_id: str) -> None:
        await self._post(
            {
                "log_id": log_id,
                "feedback": feedback,
                "source": FEEDBACK_SOURCE,
                "tenant_id": tenant.tenant_id,
                "user_id": user_id,
            },
            tenant_id=tenant.tenant_id,
            expect_json=False,
        )
