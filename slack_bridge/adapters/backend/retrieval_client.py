"""Retrieval (RAG) client: answers /ask questions."""

from typing import Any, List

from slack_bridge.adapters.backend.base import BackendClient
from slack_bridge.domain.models import TenantContext
from slack_bridge.errors import BackendError
from slack_bridge.ports.outbound import RetrievalAnswer, Source

QUESTION_SOURCE = "slack"


def parse_sources(raw: Any) -> List[Source]:
    """Keep only well-formed entries; a source without a title is dropped."""
    if not isinstance(raw, list):
        return []
    sources = []
    for item in raw:
        if not isinstance(item, dict) or not item.get("title"):
            continue
        url = item.get("url")
        updated_at = item.get("updated_at")
        sources.append(
            Source(
                title=str(item["title"]),
                url=url if isinstance(url, str) and url else None,
                updated_at=updated_at if isinstance(updated_at, str) else None,
            )
        )
    return sources


class RetrievalClient(BackendClient):
    name = "rag"

    async def query(self, question: str, tenant: TenantContext) -> RetrievalAnswer:
        data = await self._post(
            {"question": question, "source": QUESTION_SOURCE},
            tenant_id=tenant.tenant_id,
        )
        answer = data.get("answer") or data.get("text") or ""
        if not isinstance(answer, str):
            raise BackendError(self.name, "answer is not a string")
        log_id = data.get("log_id")
        return RetrievalAnswer(
            answer=answer,
            sources=parse_sources(data.get("sources")),
            log_id=str(log_id) if log_id else None,
        )
