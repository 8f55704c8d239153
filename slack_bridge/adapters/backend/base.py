"""Shared aiohttp plumbing for the Supabase-hosted backends."""

import asyncio
from typing import Any, Dict, Optional

import aiohttp

from slack_bridge.config import DEFAULT_BACKEND_TIMEOUT_SECONDS
from slack_bridge.errors import BackendError, BridgeError, ConfigurationError


class BackendClient:
    """POSTs JSON to one backend URL with the anon-key header convention."""

    name = "backend"

    def __init__(
        self,
        url: str,
        api_key: str,
        timeout_seconds: float = DEFAULT_BACKEND_TIMEOUT_SECONDS,
    ):
        self.url = url
        self.api_key = api_key
        self.timeout_seconds = timeout_seconds

    @property
    def is_configured(self) -> bool:
        return bool(self.url and self.api_key)

    def _headers(self, tenant_id: Optional[str] = None) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "apikey": self.api_key,
        }
        if tenant_id:
            headers["x-tenant-id"] = tenant_id
        return headers

    async def _post(
        self,
        payload: Dict[str, Any],
        tenant_id: Optional[str] = None,
        expect_json: bool = True,
    ) -> Dict[str, Any]:
        """POST ``payload``; returns the decoded JSON object (or {} when not expected).

        Raises ConfigurationError when the URL/key is missing and BackendError
        on non-2xx, network failure, timeout or a malformed body.
        """
        if not self.is_configured:
            raise ConfigurationError(f"{self.name} URL or API key not configured")

        timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(
                    self.url, json=payload, headers=self._headers(tenant_id)
                ) as resp:
                    if not 200 <= resp.status < 300:
                        raise BackendError(self.name, "request failed", status=resp.status)
                    if not expect_json:
                        return {}
                    data = await resp.json(content_type=None)
        except BridgeError:
            raise
        except asyncio.TimeoutError as e:
            raise BackendError(self.name, f"timed out after {self.timeout_seconds}s") from e
        except (aiohttp.ClientError, ValueError) as e:
            raise BackendError(self.name, str(e) or type(e).__name__) from e

        if not isinstance(data, dict):
            raise BackendError(self.name, "unexpected response body")
        return data
