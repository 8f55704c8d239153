"""Exception types shared by the bridge and its backend clients."""

from typing import Optional


class BridgeError(Exception):
    """Base class for every failure the bridge knows how to recover from."""


class ConfigurationError(BridgeError):
    """Raised when a mandatory URL or secret is missing for the request at hand."""


class BackendError(BridgeError):
    """Raised on non-2xx, network error, timeout or malformed JSON from a backend."""

    def __init__(self, backend: str, message: str, status: Optional[int] = None):
        self.backend = backend
        self.status = status
        detail = f"{backend}: {message}"
        if status is not None:
            detail = f"{detail} (status {status})"
        super().__init__(detail)
