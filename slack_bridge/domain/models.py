"""Domain data models: pure Python dataclasses."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

SIGNAL_SOURCE = "slack"


class Sentiment(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class SentimentResult:
    """Primary polarity plus deduplicated risk labels."""

    primary: Sentiment = Sentiment.NEUTRAL
    labels: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"primary": self.primary.value, "labels": list(self.labels)}


@dataclass(frozen=True)
class TenantContext:
    """Tenant owning a workspace, resolved once per inbound event."""

    tenant_id: str
    bot_token: str = ""


@dataclass(frozen=True)
class InsightsSignal:
    """De-identified analytics record; the only thing the insights path sends out."""

    tenant_id: str
    content_hash: str
    sanitized_text: str
    sentiment: SentimentResult
    keywords: List[str]
    source: str = SIGNAL_SOURCE

    def to_payload(self) -> Dict[str, Any]:
        return {
            "tenant_id": self.tenant_id,
            "content_hash": self.content_hash,
            "sanitized_text": self.sanitized_text,
            "sentiment": self.sentiment.to_dict(),
            "keywords": list(self.keywords),
            "source": self.source,
        }
