"""Event API — contract logs."""

from __future__ import annotations

from cronos_platform.http import AsyncHttpClient, Endpoint, HttpClient
from cronos_platform.types import ApiResponse

GET_LOGS = Endpoint("GET", "/events", "event/getLogs")


class EventApi:
    """Synchronous Event API."""

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def get_logs(self, address: str) -> ApiResponse:
        """Get event logs emitted by the contract at *address*."""
        return self._http.call(GET_LOGS, params={"address": address})


class AsyncEventApi:
    """Asynchronous Event API."""

    def __init__(self, http: AsyncHttpClient) -> None:
        self._http = http

    async def get_logs(self, address: str) -> ApiResponse:
        return await self._http.call(GET_LOGS, params={"address": address})
