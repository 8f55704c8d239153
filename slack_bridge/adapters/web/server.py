"""FastAPI application: health probe and the Slack request URL."""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from slack_bolt.adapter.fastapi.async_handler import AsyncSlackRequestHandler

from slack_bridge import __version__
from slack_bridge.config import AppConfig

SLACK_EVENTS_PATH = "/slack/events"


def create_app(config: AppConfig, slack_handler: Optional[AsyncSlackRequestHandler] = None) -> FastAPI:
    """Build the web app; Slack routes are mounted only when a handler is given."""
    app = FastAPI(title="Slack Bridge", version=__version__)
    app.state.config = config

    @app.get("/health", response_class=PlainTextResponse)
    async def health():
        """Liveness probe"""
        return "ok"

    if slack_handler is not None:

        @app.post(SLACK_EVENTS_PATH)
        async def slack_events(req: Request):
            """Commands, events and interactive actions all arrive here."""
            return await slack_handler.handle(req)

    return app
