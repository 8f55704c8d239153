"""Backend adapters — aiohttp clients implementing the outbound ports."""

from slack_bridge.adapters.backend.base import BackendClient
from slack_bridge.adapters.backend.feedback_client import FeedbackClient
from slack_bridge.adapters.backend.insights_client import InsightsClient
from slack_bridge.adapters.backend.intervention_client import InterventionClient
from slack_bridge.adapters.backend.retrieval_client import RetrievalClient
from slack_bridge.adapters.backend.tenant_client import TenantClient

__all__ = [
    "BackendClient",
    "FeedbackClient",
    "InsightsClient",
    "InterventionClient",
    "RetrievalClient",
    "TenantClient",
]
