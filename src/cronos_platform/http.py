"""Request dispatcher for the developer platform API (sync + async)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence
from urllib.parse import quote, urlencode

import httpx

from cronos_platform.config import ClientConfig
from cronos_platform.exceptions import RemoteError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://developer-platform-api.crypto.com"
API_PREFIX = "/api/v1/cdc-developer-platform"
DEFAULT_TIMEOUT = 30.0


class AuthPlacement(str, Enum):
    """Where an endpoint expects the API key."""

    HEADER = "header"
    QUERY = "query"
    NONE = "none"


@dataclass(frozen=True)
class Endpoint:
    """A single REST endpoint.

    ``path`` is relative to :data:`API_PREFIX` and may hold ``{}`` placeholders
    that are filled with URL-quoted positional arguments. ``tag`` identifies the
    operation in error messages and logs, e.g. ``"tokenApi/transfer"``.
    """

    method: str
    path: str
    tag: str
    auth: AuthPlacement = AuthPlacement.HEADER

    def format_path(self, *args: Any) -> str:
        return self.path.format(*(quote(str(a), safe="") for a in args))


def _build_url(base: str, path: str, params: dict[str, Any] | None = None) -> str:
    url = base.rstrip("/") + path
    if params:
        filtered = {k: v for k, v in params.items() if v is not None}
        if filtered:
            url += "?" + urlencode(filtered, doseq=True)
    return url


def _transport_error(tag: str, exc: Exception) -> TransportError:
    cause = str(exc) or type(exc).__name__
    message = f"[{tag}] - {cause}"
    logger.error(message)
    return TransportError(message)


def _handle_response(resp: httpx.Response, tag: str) -> Any:
    if not resp.is_success:
        try:
            body = resp.json()
        except ValueError:
            body = None
        error = body.get("error") if isinstance(body, dict) else None
        remote_message = str(error) if error else f"HTTP error! status: {resp.status_code}"
        message = f"[{tag}] - {remote_message}"
        logger.error(message)
        raise RemoteError(message, status=resp.status_code, details=body)
    try:
        return resp.json()
    except ValueError as exc:
        raise _transport_error(tag, exc) from exc


class _BaseHttpClient:
    def __init__(
        self,
        config: ClientConfig,
        base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        self.config = config
        self.base_url = base_url.rstrip("/")

    def _prepare(
        self,
        endpoint: Endpoint,
        path_args: Sequence[Any],
        params: dict[str, Any] | None,
    ) -> tuple[str, dict[str, str]]:
        # Raises ConfigurationError before anything goes on the wire.
        api_key = self.config.get_api_key()
        query: dict[str, Any] = dict(params or {})
        headers: dict[str, str] = {}
        if endpoint.auth is AuthPlacement.HEADER:
            headers["x-api-key"] = api_key
        elif endpoint.auth is AuthPlacement.QUERY:
            query["apiKey"] = api_key
        path = API_PREFIX + endpoint.format_path(*path_args)
        logger.debug("%s %s", endpoint.method, path)
        return _build_url(self.base_url, path, query), headers


def _default_headers(headers: dict[str, str] | None) -> dict[str, str]:
    _headers: dict[str, str] = {"Content-Type": "application/json"}
    if headers:
        _headers.update(headers)
    return _headers


# ---------------------------------------------------------------------------
# Synchronous client
# ---------------------------------------------------------------------------

class HttpClient(_BaseHttpClient):
    """Synchronous dispatcher wrapping ``httpx.Client``."""

    def __init__(
        self,
        config: ClientConfig,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        super().__init__(config, base_url)
        self._client = httpx.Client(timeout=timeout, headers=_default_headers(headers), transport=transport)

    def call(
        self,
        endpoint: Endpoint,
        *path_args: Any,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        """Issue one request for *endpoint* and return the parsed JSON envelope."""
        url, headers = self._prepare(endpoint, path_args, params)
        try:
            resp = self._client.request(endpoint.method, url, headers=headers, json=body)
        except httpx.HTTPError as exc:
            raise _transport_error(endpoint.tag, exc) from exc
        return _handle_response(resp, endpoint.tag)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


# ---------------------------------------------------------------------------
# Asynchronous client
# ---------------------------------------------------------------------------

class AsyncHttpClient(_BaseHttpClient):
    """Asynchronous dispatcher wrapping ``httpx.AsyncClient``."""

    def __init__(
        self,
        config: ClientConfig,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(config, base_url)
        self._client = httpx.AsyncClient(timeout=timeout, headers=_default_headers(headers), transport=transport)

    async def call(
        self,
        endpoint: Endpoint,
        *path_args: Any,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        url, headers = self._prepare(endpoint, path_args, params)
        try:
            resp = await self._client.request(endpoint.method, url, headers=headers, json=body)
        except httpx.HTTPError as exc:
            raise _transport_error(endpoint.tag, exc) from exc
        return _handle_response(resp, endpoint.tag)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHttpClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
