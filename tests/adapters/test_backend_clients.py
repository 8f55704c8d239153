"""Tests for the aiohttp backend clients."""

import asyncio

import aiohttp
import pytest
from unittest.mock import patch

from slack_bridge.adapters.backend import (
    FeedbackClient,
    InsightsClient,
    InterventionClient,
    RetrievalClient,
    TenantClient,
)
from slack_bridge.adapters.backend.retrieval_client import parse_sources
from slack_bridge.domain.models import InsightsSignal, SentimentResult, TenantContext
from slack_bridge.errors import BackendError, ConfigurationError
from slack_bridge.ports.inbound import ChannelType, MessageEvent
from slack_bridge.ports.outbound import RespondMode

SESSION_PATH = "slack_bridge.adapters.backend.base.aiohttp.ClientSession"
TENANT = TenantContext(tenant_id="tenant-1", bot_token="xoxb-1")


def _mock_aiohttp_session(responses, calls):
    """Return a class replacing aiohttp.ClientSession.

    responses: list of (status, data) tuples consumed in order; ``data`` may be
    an exception instance, raised when the response body is read.
    calls: list receiving (url, kwargs) for every post().
    """
    call_idx = 0

    class FakeResponse:
        def __init__(self, status, data):
            self.status = status
            self._data = data

        async def json(self, **kwargs):
            if isinstance(self._data, Exception):
                raise self._data
            return self._data

        async def __aenter__(self):
            return self

        async def __aexit__(self, *args):
            pass

    class FakeSession:
        def __init__(self, **kwargs):
            self.kwargs = kwargs

        def post(self, url, **kwargs):
            nonlocal call_idx
            calls.append((url, kwargs))
            status, data = responses[call_idx]
            call_idx += 1
            return FakeResponse(status, data)

        async def __aenter__(self):
            return self

        async def __aexit__(self, *args):
            pass

    return FakeSession


class TestConfiguration:
    def test_is_configured(self):
        assert TenantClient("https://x/tenant", "anon").is_configured is True
        assert TenantClient("", "anon").is_configured is False
        assert TenantClient("https://x/tenant", "").is_configured is False

    @pytest.mark.asyncio
    async def test_unconfigured_raises(self):
        with pytest.raises(ConfigurationError):
            await TenantClient("", "").resolve("T1")

    def test_headers(self):
        client = RetrievalClient("https://x/rag", "anon")
        assert client._headers() == {"Content-Type": "application/json", "apikey": "anon"}
        assert client._headers("tenant-1")["x-tenant-id"] == "tenant-1"


class TestTenantClient:
    @pytest.mark.asyncio
    async def test_resolve(self):
        calls = []
        session = _mock_aiohttp_session([(200, {"tenant_id": "tenant-1", "bot_token": "xoxb-1"})], calls)
        client = TenantClient("https://x/tenant", "anon")
        with patch(SESSION_PATH, session):
            tenant = await client.resolve("T1")
        assert tenant == TENANT
        url, kwargs = calls[0]
        assert url == "https://x/tenant"
        assert kwargs["json"] == {"slack_team_id": "T1"}
        assert kwargs["headers"]["apikey"] == "anon"

    @pytest.mark.asyncio
    async def test_missing_tenant_id(self):
        session = _mock_aiohttp_session([(200, {"error": "not found"})], [])
        with patch(SESSION_PATH, session):
            with pytest.raises(BackendError):
                await TenantClient("https://x/tenant", "anon").resolve("T1")

    @pytest.mark.asyncio
    async def test_non_2xx(self):
        session = _mock_aiohttp_session([(404, {})], [])
        with patch(SESSION_PATH, session):
            with pytest.raises(BackendError) as exc_info:
                await TenantClient("https://x/tenant", "anon").resolve("T1")
        assert exc_info.value.status == 404
        assert exc_info.value.backend == "tenant-lookup"

    @pytest.mark.asyncio
    async def test_timeout(self):
        session = _mock_aiohttp_session([(200, asyncio.TimeoutError())], [])
        with patch(SESSION_PATH, session):
            with pytest.raises(BackendError, match="timed out"):
                await TenantClient("https://x/tenant", "anon", timeout_seconds=2).resolve("T1")

    @pytest.mark.asyncio
    async def test_network_error(self):
        session = _mock_aiohttp_session([(200, aiohttp.ClientError("connection reset"))], [])
        with patch(SESSION_PATH, session):
            with pytest.raises(BackendError, match="connection reset"):
                await TenantClient("https://x/tenant", "anon").resolve("T1")

    @pytest.mark.asyncio
    async def test_non_object_body(self):
        session = _mock_aiohttp_session([(200, ["tenant-1"])], [])
        with patch(SESSION_PATH, session):
            with pytest.raises(BackendError):
                await TenantClient("https://x/tenant", "anon").resolve("T1")


class TestRetrievalClient:
    @pytest.mark.asyncio
    async def test_query(self):
        calls = []
        session = _mock_aiohttp_session([
            (200, {
                "answer": "25 days.",
                "sources": [{"title": "HR", "url": "https://wiki/hr", "updated_at": "2024-01-01T00:00:00Z"}],
                "log_id": 42,
            }),
        ], calls)
        with patch(SESSION_PATH, session):
            result = await RetrievalClient("https://x/rag", "anon").query("How much leave?", TENANT)
        assert result.answer == "25 days."
        assert result.sources[0].title == "HR"
        assert result.sources[0].url == "https://wiki/hr"
        assert result.log_id == "42"
        _, kwargs = calls[0]
        assert kwargs["json"] == {"question": "How much leave?", "source": "slack"}
        assert kwargs["headers"]["x-tenant-id"] == "tenant-1"

    @pytest.mark.asyncio
    async def test_text_fallback(self):
        session = _mock_aiohttp_session([(200, {"text": "fallback"})], [])
        with patch(SESSION_PATH, session):
            result = await RetrievalClient("https://x/rag", "anon").query("q", TENANT)
        assert result.answer == "fallback"
        assert result.sources == []
        assert result.log_id is None

    def test_parse_sources_drops_malformed(self):
        sources = parse_sources([{"title": "A", "url": ""}, {"url": "https://no-title"}, "junk"])
        assert len(sources) == 1
        assert sources[0].title == "A"
        assert sources[0].url is None
        assert parse_sources(None) == []


class TestInterventionClient:
    @pytest.mark.asyncio
    async def test_decide(self):
        calls = []
        session = _mock_aiohttp_session([
            (200, {"should_respond": True, "reply_text": "See runbook", "respond_mode": "thread_reply"}),
        ], calls)
        event = MessageEvent(
            text="deploys are stuck",
            channel_id="C1",
            channel_type=ChannelType.CHANNEL,
            workspace_id="T1",
            user_id="U1",
            timestamp="1.2",
        )
        with patch(SESSION_PATH, session):
            decision = await InterventionClient("https://x/int", "anon").decide(TENANT, event)
        assert decision.should_respond is True
        assert decision.reply_text == "See runbook"
        assert decision.respond_mode == RespondMode.THREAD_REPLY
        _, kwargs = calls[0]
        assert kwargs["json"] == {
            "tenant_id": "tenant-1",
            "slack_team_id": "T1",
            "message_text": "deploys are stuck",
            "metadata": {"channel_id": "C1", "thread_ts": None, "user_id": "U1", "message_ts": "1.2"},
        }

    @pytest.mark.asyncio
    async def test_unknown_mode_defaults_to_channel(self):
        session = _mock_aiohttp_session([(200, {"should_respond": "yes", "respond_mode": "shout"})], [])
        event = MessageEvent("hi", "C1", ChannelType.CHANNEL, "T1")
        with patch(SESSION_PATH, session):
            decision = await InterventionClient("https://x/int", "anon").decide(TENANT, event)
        assert decision.should_respond is False
        assert decision.respond_mode == RespondMode.CHANNEL_MESSAGE


class TestFeedbackClient:
    @pytest.mark.asyncio
    async def test_submit(self):
        calls = []
        session = _mock_aiohttp_session([(204, ValueError("no body"))], calls)
        with patch(SESSION_PATH, session):
            await FeedbackClient("https://x/fb", "anon").submit("log-1", "up", TENANT, "U1")
        _, kwargs = calls[0]
        assert kwargs["json"] == {
            "log_id": "log-1",
            "feedback": "up",
            "source": "slack",
            "tenant_id": "tenant-1",
            "user_id": "U1",
        }


class TestInsightsClient:
    @pytest.mark.asyncio
    async def test_ingest(self):
        calls = []
        session = _mock_aiohttp_session([(200, {})], calls)
        signal = InsightsSignal(
            tenant_id="tenant-1",
            content_hash="abc",
            sanitized_text="deploys are broken again",
            sentiment=SentimentResult(),
            keywords=["deploys", "broken"],
        )
        with patch(SESSION_PATH, session):
            await InsightsClient("https://x/ins", "anon", timeout_seconds=5).ingest(signal)
        _, kwargs = calls[0]
        assert kwargs["json"] == {
            "tenant_id": "tenant-1",
            "content_hash": "abc",
            "sanitized_text": "deploys are broken again",
            "sentiment": {"primary": "neutral", "labels": []},
            "keywords": ["deploys", "broken"],
            "source": "slack",
        }

    @pytest.mark.asyncio
    async def test_ingest_failure(self):
        session = _mock_aiohttp_session([(500, {})], [])
        signal = InsightsSignal("tenant-1", "abc", "text", SentimentResult(), [])
        with patch(SESSION_PATH, session):
            with pytest.raises(BackendError):
                await InsightsClient("https://x/ins", "anon").ingest(signal)
