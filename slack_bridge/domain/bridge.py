"""SlackBridge — routes commands, messages and actions to the backends.

No Slack SDK dependency: the adapter hands in ports for replying, and the
bridge talks to backends only through the outbound port protocols.

Handles:
- ``/ask`` questions via the retrieval backend
- proactive interventions on channel messages
- insights collection, launched as a detached task per message
- feedback buttons on answers
"""

import asyncio
import sys
from typing import Awaitable, Optional, Set

from slack_bridge.domain.eligibility import ALLOWED_SUBTYPES
from slack_bridge.domain.formatting import (
    FEEDBACK_DOWN,
    FEEDBACK_UP,
    answer_blocks,
    format_answer,
    format_sources,
)
from slack_bridge.domain.insights import InsightsOutcome, InsightsPipeline
from slack_bridge.domain.models import TenantContext
from slack_bridge.errors import BridgeError
from slack_bridge.ports.inbound import ActionEvent, ChannelType, CommandInvocation, MessageEvent
from slack_bridge.ports.outbound import (
    ChannelPort,
    FeedbackPort,
    InterventionPort,
    RespondMode,
    ResponderPort,
    RetrievalPort,
    TenantResolverPort,
)

WORKING_TEXT = "⚙️ Working on it..."
USAGE_TEXT = "Type a question after `/ask`, e.g. `/ask What is our leave policy?`"
GENERIC_ERROR_TEXT = "❌ Sorry, something went wrong while processing your question."
RETRIEVAL_UNAVAILABLE_TEXT = "⚠️ The RAG service didn’t respond (timeout or network error)."
FEEDBACK_THANKS_TEXT = "🙏 Thanks for the feedback!"

FEEDBACK_VALUES = {FEEDBACK_UP: "up", FEEDBACK_DOWN: "down"}


def _log(msg: str):
    print(msg, file=sys.stderr)


class SlackBridge:
    """Pure bridge logic, testable with mock ports."""

    def __init__(
        self,
        tenants: TenantResolverPort,
        retrieval: RetrievalPort,
        interventions: InterventionPort,
        feedback: FeedbackPort,
        insights: Optional[InsightsPipeline] = None,
    ):
        self.tenants = tenants
        self.retrieval = retrieval
        self.interventions = interventions
        self.feedback = feedback
        self.insights = insights
        self._background_tasks: Set[asyncio.Task] = set()

    # -- Detached tasks --

    def spawn(self, coro: Awaitable) -> asyncio.Task:
        """Run ``coro`` without awaiting it; keeps a reference until it finishes."""
        task = asyncio.ensure_future(coro)
        self._background_tasks.add(task)
        task.add_done_callback(self._on_task_done)
        return task

    def _on_task_done(self, task: asyncio.Task) -> None:
        self._background_tasks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            _log(f"[bridge] background task failed: {task.exception()}")

    @property
    def pending_tasks(self) -> int:
        return len(self._background_tasks)

    async def drain(self) -> None:
        """Wait for every detached task (used on shutdown and in tests)."""
        while self._background_tasks:
            await asyncio.gather(*list(self._background_tasks), return_exceptions=True)

    # -- /ask --

    async def handle_command(self, cmd: CommandInvocation, responder: ResponderPort) -> None:
        question = cmd.question
        if not question:
            await responder.respond(USAGE_TEXT)
            return

        try:
            _log(f"[ask] looking up tenant for team {cmd.workspace_id}")
            tenant = await self.tenants.resolve(cmd.workspace_id)
            _log(f"[ask] tenant resolved: {tenant.tenant_id}")

            try:
                result = await self.retrieval.query(question, tenant)
            except BridgeError as e:
                _log(f"[ask] retrieval failed or timed out: {e}")
                await responder.respond(RETRIEVAL_UNAVAILABLE_TEXT)
                return

            text = format_answer(question, result.answer, result.sources)
            await responder.respond(text, blocks=answer_blocks(text, result.log_id))
            _log("[ask] response sent")
        except Exception as e:
            _log(f"[ask] error: {e}")
            await responder.respond(GENERIC_ERROR_TEXT)

    # -- Channel messages --

    @staticmethod
    def is_candidate(event: MessageEvent) -> bool:
        """Only human messages in public channels reach the backends."""
        return (
            (not event.subtype or event.subtype in ALLOWED_SUBTYPES)
            and not event.sender_is_bot
            and event.channel_type is ChannelType.CHANNEL
        )

    async def handle_message(self, event: MessageEvent, channel: ChannelPort) -> None:
        if not self.is_candidate(event):
            return

        _log(f"[intervention] message received in channel {event.channel_id}")
        try:
            tenant = await self.tenants.resolve(event.workspace_id)
        except Exception as e:
            _log(f"[intervention] tenant lookup failed: {e}")
            return

        if self.insights is not None:
            self.spawn(self.collect_insights(event, tenant.tenant_id))

        try:
            await self._intervene(event, tenant, channel)
        except Exception as e:
            # Never surface errors for ordinary channel traffic
            _log(f"[intervention] error: {e}")

    async def _intervene(self, event: MessageEvent, tenant: TenantContext, channel: ChannelPort) -> None:
        decision = await self.interventions.decide(tenant, event)
        _log(
            f"[intervention] should_respond={decision.should_respond} "
            f"mode={decision.respond_mode.value}"
        )
        if not (decision.should_respond and decision.reply_text):
            _log("[intervention] no intervention needed")
            return

        text = f"{decision.reply_text}{format_sources(decision.sources, with_dates=False)}"
        token = tenant.bot_token or None
        if decision.respond_mode is RespondMode.EPHEMERAL:
            await channel.post_ephemeral(event.channel_id, event.user_id, text, token=token)
        elif decision.respond_mode is RespondMode.THREAD_REPLY:
            await channel.post_message(
                event.channel_id,
                text,
                thread_ts=event.thread_timestamp or event.timestamp,
                token=token,
            )
        else:
            await channel.post_message(event.channel_id, text, token=token)
        _log(f"[intervention] {decision.respond_mode.value} sent")

    async def collect_insights(self, event: MessageEvent, tenant_id: str) -> Optional[InsightsOutcome]:
        """Insights side task; every failure ends here."""
        try:
            outcome = await self.insights.process_insights_signal(event, tenant_id)
        except Exception as e:
            _log(f"[insights] error: {e}")
            return None
        _log(f"[insights] outcome: {outcome.value}")
        return outcome

    # -- Feedback buttons --

    async def handle_feedback(self, action: ActionEvent, responder: Optional[ResponderPort] = None) -> bool:
        feedback = FEEDBACK_VALUES.get(action.action_id)
        if feedback is None or not action.action_value:
            _log(f"[feedback] ignoring action {action.action_id!r}")
            return False
        try:
            tenant = await self.tenants.resolve(action.workspace_id)
            await self.feedback.submit(action.action_value, feedback, tenant, action.user_id)
        except Exception as e:
            _log(f"[feedback] submission failed: {e}")
            return False
        _log(f"[feedback] {feedback} recorded for {action.action_value}")
        if responder is not None:
            await responder.respond(FEEDBACK_THANKS_TEXT)
        return True
