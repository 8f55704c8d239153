"""Configuration loaded once from the environment."""

import math
import os
import sys
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

DEFAULT_PORT = 3000
DEFAULT_SAMPLE_RATE = 1.0
DEFAULT_MAX_TEXT_LENGTH = 1500
DEFAULT_MIN_TEXT_LENGTH = 20
DEFAULT_INSIGHTS_TIMEOUT_SECONDS = 5.0
DEFAULT_RAG_TIMEOUT_SECONDS = 10.0
DEFAULT_BACKEND_TIMEOUT_SECONDS = 10.0

# Edge functions hosted next to the tenant lookup, used when no explicit URL is set
INTERVENTION_FUNCTION = "slack-intervention"
FEEDBACK_FUNCTION = "slack-feedback"
INSIGHTS_FUNCTION = "slack-insights-ingest"


def _as_float(raw: Optional[str]) -> Optional[float]:
    if raw is None or str(raw).strip() == "":
        return None
    try:
        value = float(str(raw).strip())
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_rate(raw: Optional[str], default: float = DEFAULT_SAMPLE_RATE, name: str = "rate") -> float:
    """Parse a probability in [0, 1]; anything else falls back to ``default``."""
    value = _as_float(raw)
    if value is None or not 0.0 <= value <= 1.0:
        if raw not in (None, ""):
            _stderr_print(f"Invalid {name}={raw!r}, falling back to {default}")
        return default
    return value


def parse_int(raw: Optional[str], default: int, minimum: int = 1, name: str = "value") -> int:
    """Parse an integer >= ``minimum``; anything else falls back to ``default``."""
    value = _as_float(raw)
    if value is None or value != int(value) or int(value) < minimum:
        if raw not in (None, ""):
            _stderr_print(f"Invalid {name}={raw!r}, falling back to {default}")
        return default
    return int(value)


def parse_seconds(raw: Optional[str], default: float, name: str = "timeout") -> float:
    """Parse a strictly positive number of seconds."""
    value = _as_float(raw)
    if value is None or value <= 0:
        if raw not in (None, ""):
            _stderr_print(f"Invalid {name}={raw!r}, falling back to {default}")
        return default
    return value


def function_url(base_url: str, function_name: str) -> str:
    """Build a Supabase edge-function URL, or "" when no base URL is known."""
    if not base_url:
        return ""
    return f"{base_url.rstrip('/')}/functions/v1/{function_name}"


# ── Typed config ──────────────────────────────────────


@dataclass(frozen=True)
class SlackConfig:
    bot_token: str = ""
    signing_secret: str = ""

    @property
    def is_configured(self) -> bool:
        return bool(self.bot_token and self.signing_secret)


@dataclass(frozen=True)
class BackendConfig:
    tenant_lookup_url: str = ""
    rag_query_url: str = ""
    supabase_url: str = ""
    api_key: str = ""
    intervention_url: str = ""
    feedback_url: str = ""
    insights_url: str = ""
    timeout_seconds: float = DEFAULT_BACKEND_TIMEOUT_SECONDS
    rag_timeout_seconds: float = DEFAULT_RAG_TIMEOUT_SECONDS


@dataclass(frozen=True)
class InsightsConfig:
    sample_rate: float = DEFAULT_SAMPLE_RATE
    max_text_length: int = DEFAULT_MAX_TEXT_LENGTH
    min_text_length: int = DEFAULT_MIN_TEXT_LENGTH
    timeout_seconds: float = DEFAULT_INSIGHTS_TIMEOUT_SECONDS


@dataclass(frozen=True)
class AppConfig:
    """Immutable process configuration, built once and passed to every component."""

    port: int = DEFAULT_PORT
    slack: SlackConfig = field(default_factory=SlackConfig)
    backend: BackendConfig = field(default_factory=BackendConfig)
    insights: InsightsConfig = field(default_factory=InsightsConfig)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        env = os.environ
        supabase_url = env.get("SUPABASE_URL", "").strip()
        return cls(
            port=parse_int(env.get("PORT"), DEFAULT_PORT, name="PORT"),
            slack=SlackConfig(
                bot_token=env.get("SLACK_BOT_TOKEN", ""),
                signing_secret=env.get("SLACK_SIGNING_SECRET", ""),
            ),
            backend=BackendConfig(
                tenant_lookup_url=env.get("SLACK_TENANT_LOOKUP_URL", "").strip(),
                rag_query_url=env.get("RAG_QUERY_URL", "").strip(),
                supabase_url=supabase_url,
                api_key=env.get("SUPABASE_ANON_KEY", ""),
                intervention_url=env.get("SLACK_INTERVENTION_URL", "").strip()
                or function_url(supabase_url, INTERVENTION_FUNCTION),
                feedback_url=env.get("SLACK_FEEDBACK_URL", "").strip()
                or function_url(supabase_url, FEEDBACK_FUNCTION),
                insights_url=env.get("INSIGHTS_INGEST_URL", "").strip()
                or function_url(supabase_url, INSIGHTS_FUNCTION),
                timeout_seconds=parse_seconds(
                    env.get("BACKEND_TIMEOUT_SECONDS"),
                    DEFAULT_BACKEND_TIMEOUT_SECONDS,
                    name="BACKEND_TIMEOUT_SECONDS",
                ),
                rag_timeout_seconds=parse_seconds(
                    env.get("RAG_TIMEOUT_SECONDS"),
                    DEFAULT_RAG_TIMEOUT_SECONDS,
                    name="RAG_TIMEOUT_SECONDS",
                ),
            ),
            insights=InsightsConfig(
                sample_rate=parse_rate(
                    env.get("INSIGHTS_SAMPLE_RATE"), DEFAULT_SAMPLE_RATE, name="INSIGHTS_SAMPLE_RATE"
                ),
                max_text_length=parse_int(
                    env.get("INSIGHTS_MAX_TEXT_LENGTH"),
                    DEFAULT_MAX_TEXT_LENGTH,
                    name="INSIGHTS_MAX_TEXT_LENGTH",
                ),
                min_text_length=parse_int(
                    env.get("INSIGHTS_MIN_TEXT_LENGTH"),
                    DEFAULT_MIN_TEXT_LENGTH,
                    minimum=0,
                    name="INSIGHTS_MIN_TEXT_LENGTH",
                ),
                timeout_seconds=parse_seconds(
                    env.get("INSIGHTS_TIMEOUT_SECONDS"),
                    DEFAULT_INSIGHTS_TIMEOUT_SECONDS,
                    name="INSIGHTS_TIMEOUT_SECONDS",
                ),
            ),
        )
