"""Domain layer — pure Python, no framework dependencies."""

from slack_bridge.domain.models import InsightsSignal, Sentiment, SentimentResult, TenantContext
from slack_bridge.domain.sanitizer import is_numeric_or_date_only, sanitize
from slack_bridge.domain.eligibility import is_eligible
from slack_bridge.domain.keywords import extract_keywords
from slack_bridge.domain.classifier import classify
from slack_bridge.domain.sampling import SamplingPolicy, clamp_length
from slack_bridge.domain.insights import InsightsOutcome, InsightsPipeline, content_hash
from slack_bridge.domain.bridge import SlackBridge

__all__ = [
    "InsightsSignal",
    "Sentiment",
    "SentimentResult",
    "TenantContext",
    "is_numeric_or_date_only",
    "sanitize",
    "is_eligible",
    "extract_keywords",
    "classify",
    "SamplingPolicy",
    "clamp_length",
    "InsightsOutcome",
    "InsightsPipeline",
    "content_hash",
    "SlackBridge",
]
