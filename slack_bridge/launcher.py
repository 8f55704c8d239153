"""Wiring: builds clients, bridge, Slack app and web server from AppConfig."""

import sys
from typing import Optional

from fastapi import FastAPI
from slack_bolt.adapter.fastapi.async_handler import AsyncSlackRequestHandler
from slack_bolt.async_app import AsyncApp

from slack_bridge.adapters.backend import (
    FeedbackClient,
    InsightsClient,
    InterventionClient,
    RetrievalClient,
    TenantClient,
)
from slack_bridge.adapters.slack import SlackBridgeAdapter
from slack_bridge.adapters.web import create_app
from slack_bridge.config import AppConfig
from slack_bridge.domain.bridge import SlackBridge
from slack_bridge.domain.insights import InsightsPipeline
from slack_bridge.domain.sampling import SamplingPolicy


def _log(msg: str):
    print(msg, file=sys.stderr)


def create_bridge(config: AppConfig) -> SlackBridge:
    """Create the bridge with one aiohttp client per backend."""
    backend = config.backend
    clients = {
        "tenant": TenantClient(backend.tenant_lookup_url, backend.api_key, backend.timeout_seconds),
        "rag": RetrievalClient(backend.rag_query_url, backend.api_key, backend.rag_timeout_seconds),
        "intervention": InterventionClient(
            backend.intervention_url, backend.api_key, backend.timeout_seconds
        ),
        "feedback": FeedbackClient(backend.feedback_url, backend.api_key, backend.timeout_seconds),
        "insights": InsightsClient(
            backend.insights_url, backend.api_key, config.insights.timeout_seconds
        ),
    }
    for name, client in clients.items():
        if client.is_configured:
            _log(f"{type(client).__name__} loaded")
        else:
            _log(f"{type(client).__name__} not configured, {name} requests will fail")

    pipeline = InsightsPipeline(SamplingPolicy.from_config(config.insights), clients["insights"])
    _log(f"Insights sample rate: {config.insights.sample_rate}")
    return SlackBridge(
        tenants=clients["tenant"],
        retrieval=clients["rag"],
        interventions=clients["intervention"],
        feedback=clients["feedback"],
        insights=pipeline,
    )


def create_server(config: Optional[AppConfig] = None) -> FastAPI:
    """Build the FastAPI app; without Slack credentials only /health is served."""
    config = config or AppConfig.from_env()
    bridge = create_bridge(config)

    handler = None
    if config.slack.is_configured:
        slack_app = AsyncApp(
            token=config.slack.bot_token,
            signing_secret=config.slack.signing_secret,
        )
        SlackBridgeAdapter(bridge, slack_app)
        handler = AsyncSlackRequestHandler(slack_app)
    else:
        _log("Slack not configured (set SLACK_BOT_TOKEN and SLACK_SIGNING_SECRET), serving /health only")

    app = create_app(config, slack_handler=handler)
    app.state.bridge = bridge

    @app.on_event("shutdown")
    async def _drain_background_tasks():
        await bridge.drain()

    return app
