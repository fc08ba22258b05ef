"""Exceptions raised by the Cronos developer platform SDK."""

from __future__ import annotations

from typing import Any


class PlatformError(Exception):
    """Base class for every error raised by the SDK."""

    def __init__(
        self,
        message: str,
        *,
        status: int = 0,
        code: str | None = None,
        details: Any = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.code = code
        self.details = details

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={self.status}, code={self.code!r}, message={str(self)!r})"


class ConfigurationError(PlatformError):
    """Required setup (the API key) is missing at call time."""


class ValidationError(PlatformError):
    """Input rejected locally, before any request is made."""


class TransportError(PlatformError):
    """The service could not be reached or its response could not be read."""


class RemoteError(PlatformError):
    """The service answered with a non-2xx status."""
