"""Slack adapter — bridges slack_bolt's AsyncApp to SlackBridge.

Registers the ``/ask`` command, ``message`` events and the feedback
buttons, converts every payload into an inbound variant, and wraps Bolt's
``respond`` and web client into the responder/channel ports.
"""

import sys
from typing import Any, Callable, Dict, List, Optional

from slack_bolt.async_app import AsyncApp
from slack_sdk.web.async_client import AsyncWebClient

from slack_bridge.domain.bridge import WORKING_TEXT, SlackBridge
from slack_bridge.domain.formatting import FEEDBACK_DOWN, FEEDBACK_UP
from slack_bridge.ports.inbound import action_from_payload, command_from_payload, message_from_payload

ASK_COMMAND = "/ask"


def _log(msg: str):
    print(msg, file=sys.stderr)


class BoltResponder:
    """ResponderPort implementation over Bolt's ``respond`` (response_url)."""

    def __init__(self, respond: Callable, response_type: str = "ephemeral"):
        self._respond = respond
        self._response_type = response_type

    async def respond(self, text: str, blocks: Optional[List[Dict[str, Any]]] = None) -> None:
        kwargs: Dict[str, Any] = {"text": text, "response_type": self._response_type}
        if blocks:
            kwargs["blocks"] = blocks
        await self._respond(**kwargs)


class BoltChannel:
    """ChannelPort implementation using the Slack Web API client."""

    def __init__(self, client: AsyncWebClient):
        self._client = client

    async def post_ephemeral(
        self, channel_id: str, user_id: str, text: str, token: Optional[str] = None
    ) -> None:
        kwargs: Dict[str, Any] = {"channel": channel_id, "user": user_id, "text": text}
        if token:
            kwargs["token"] = token
        await self._client.chat_postEphemeral(**kwargs)

    async def post_message(
        self,
        channel_id: str,
        text: str,
        thread_ts: Optional[str] = None,
        token: Optional[str] = None,
    ) -> None:
        kwargs: Dict[str, Any] = {"channel": channel_id, "text": text}
        if thread_ts:
            kwargs["thread_ts"] = thread_ts
        if token:
            kwargs["token"] = token
        await self._client.chat_postMessage(**kwargs)


class SlackBridgeAdapter:
    """Thin Bolt adapter that delegates to SlackBridge."""

    def __init__(self, bridge: SlackBridge, app: AsyncApp):
        self._bridge = bridge
        self.app = app
        app.command(ASK_COMMAND)(self.on_ask)
        app.event("message")(self.on_message)
        app.action(FEEDBACK_UP)(self.on_feedback)
        app.action(FEEDBACK_DOWN)(self.on_feedback)

    async def on_ask(self, ack, command, respond):
        """Ack within Slack's 3s window, then answer from a detached task."""
        await ack()
        cmd = command_from_payload(command)
        _log(f"[slack] {ASK_COMMAND} acknowledged for team {cmd.workspace_id}")
        responder = BoltResponder(respond)
        await responder.respond(WORKING_TEXT)
        self._bridge.spawn(self._bridge.handle_command(cmd, responder))

    async def on_message(self, event, body, client):
        team_id = body.get("team_id", "") if isinstance(body, dict) else ""
        message = message_from_payload(event, team_id=team_id)
        await self._bridge.handle_message(message, BoltChannel(client))

    async def on_feedback(self, ack, body, respond):
        await ack()
        action = action_from_payload(body)
        await self._bridge.handle_feedback(action, BoltResponder(respond))
