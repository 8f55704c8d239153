"""Web adapter: FastAPI server."""

from slack_bridge.adapters.web.server import SLACK_EVENTS_PATH, create_app

__all__ = ["SLACK_EVENTS_PATH", "create_app"]
