"""Insights pipeline — sampled, sanitized, locally analyzed message signals.

received -> sampled_out | ineligible | (truncate, sanitize) -> empty |
too_short | noise | (classify, extract) -> published | publish_failed

Every exit other than ``published`` is silent: nothing is raised to the
caller and nothing is shown to the user.
"""

import hashlib
import sys
from enum import Enum
from typing import Optional, Tuple

from slack_bridge.domain.classifier import classify
from slack_bridge.domain.eligibility import is_eligible
from slack_bridge.domain.keywords import extract_keywords
from slack_bridge.domain.models import InsightsSignal
from slack_bridge.domain.sampling import SamplingPolicy
from slack_bridge.domain.sanitizer import is_numeric_or_date_only, sanitize
from slack_bridge.errors import BridgeError
from slack_bridge.ports.inbound import MessageEvent
from slack_bridge.ports.outbound import InsightsPort


def _log(msg: str):
    print(msg, file=sys.stderr)


class InsightsOutcome(str, Enum):
    SAMPLED_OUT = "sampled_out"
    INELIGIBLE = "ineligible"
    EMPTY = "empty_after_sanitize"
    TOO_SHORT = "too_short"
    NOISE = "noise"
    PUBLISHED = "published"
    PUBLISH_FAILED = "publish_failed"


def content_hash(sanitized_text: str) -> str:
    """SHA-256 hex digest of the sanitized text, used for deduplication."""
    return hashlib.sha256(sanitized_text.encode("utf-8")).hexdigest()


class InsightsPipeline:
    """Runs the gating and analysis steps for one message at a time."""

    def __init__(self, policy: SamplingPolicy, publisher: InsightsPort):
        self.policy = policy
        self.publisher = publisher

    def build_signal(
        self, message: MessageEvent, tenant_id: str
    ) -> Tuple[Optional[InsightsOutcome], Optional[InsightsSignal]]:
        """Apply every gate; returns (None, signal) only when all of them pass."""
        if not self.policy.should_process(message):
            return InsightsOutcome.SAMPLED_OUT, None
        if not is_eligible(message):
            return InsightsOutcome.INELIGIBLE, None

        text = sanitize(self.policy.clamp_length(message.text))
        if not text:
            return InsightsOutcome.EMPTY, None
        if not self.policy.is_long_enough(text):
            return InsightsOutcome.TOO_SHORT, None
        if is_numeric_or_date_only(text):
            return InsightsOutcome.NOISE, None

        signal = InsightsSignal(
            tenant_id=tenant_id,
            content_hash=content_hash(text),
            sanitized_text=text,
            sentiment=classify(text),
            keywords=extract_keywords(text),
        )
        return None, signal

    async def process_insights_signal(self, message: MessageEvent, tenant_id: str) -> InsightsOutcome:
        outcome, signal = self.build_signal(message, tenant_id)
        if signal is None:
            return outcome
        try:
            await self.publisher.ingest(signal)
        except BridgeError as e:
            _log(f"[insights] publish failed for {signal.content_hash[:12]}: {e}")
            return InsightsOutcome.PUBLISH_FAILED
        _log(
            f"[insights] published {signal.content_hash[:12]} "
            f"({signal.sentiment.primary.value}, {len(signal.keywords)} keywords)"
        )
        return InsightsOutcome.PUBLISHED
