"""Network API — chain metadata."""

from __future__ import annotations

from cronos_platform.http import AsyncHttpClient, Endpoint, HttpClient
from cronos_platform.types import ApiResponse

GET_NETWORK_INFO = Endpoint("GET", "/network/info", "network/getNetworkInfo")
GET_CHAIN_ID = Endpoint("GET", "/network/chain-id", "network/getChainId")
GET_CLIENT_VERSION = Endpoint("GET", "/network/client-version", "network/getClientVersion")


class NetworkApi:
    """Synchronous Network API."""

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def info(self) -> ApiResponse:
        """Get network information for the chain bound to the API key."""
        return self._http.call(GET_NETWORK_INFO)

    def chain_id(self) -> ApiResponse:
        """Get the chain ID reported by the node."""
        return self._http.call(GET_CHAIN_ID)

    def client_version(self) -> ApiResponse:
        """Get the node client version."""
        return self._http.call(GET_CLIENT_VERSION)


class AsyncNetworkApi:
    """Asynchronous Network API."""

    def __init__(self, http: AsyncHttpClient) -> None:
        self._http = http

    async def info(self) -> ApiResponse:
        return await self._http.call(GET_NETWORK_INFO)

    async def chain_id(self) -> ApiResponse:
        return await self._http.call(GET_CHAIN_ID)

    async def client_version(self) -> ApiResponse:
        return await self._http.call(GET_CLIENT_VERSION)
