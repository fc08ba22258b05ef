"""DeFi API — whitelisted tokens and farms per protocol."""

from __future__ import annotations

from enum import Enum

from cronos_platform.http import AsyncHttpClient, Endpoint, HttpClient
from cronos_platform.types import ApiResponse


class DefiProtocol(str, Enum):
    H2 = "h2finance"
    VVS = "vvsfinance"


GET_WHITELISTED_TOKENS = Endpoint("GET", "/defi/whitelisted-tokens/{}", "defiApi/getWhitelistedTokens")
GET_ALL_FARMS = Endpoint("GET", "/defi/farms/{}", "defiApi/getAllFarms")
GET_FARM_BY_SYMBOL = Endpoint("GET", "/defi/farms/{}/{}", "defiApi/getFarmBySymbol")


def _protocol(protocol: DefiProtocol | str) -> str:
    return protocol.value if isinstance(protocol, DefiProtocol) else protocol


class DefiApi:
    """Synchronous DeFi API."""

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def get_whitelisted_tokens(self, protocol: DefiProtocol | str) -> ApiResponse:
        """List tokens whitelisted by *protocol*."""
        return self._http.call(GET_WHITELISTED_TOKENS, _protocol(protocol))

    def get_all_farms(self, protocol: DefiProtocol | str) -> ApiResponse:
        """List every farm of *protocol*."""
        return self._http.call(GET_ALL_FARMS, _protocol(protocol))

    def get_farm_by_symbol(self, protocol: DefiProtocol | str, symbol: str) -> ApiResponse:
        """Get one farm by its LP symbol, e.g. ``'CRO-GOLD'``."""
        return self._http.call(GET_FARM_BY_SYMBOL, _protocol(protocol), symbol)


class AsyncDefiApi:
    """Asynchronous DeFi API."""

    def __init__(self, http: AsyncHttpClient) -> None:
        self._http = http

    async def get_whitelisted_tokens(self, protocol: DefiProtocol | str) -> ApiResponse:
        return await self._http.call(GET_WHITELISTED_TOKENS, _protocol(protocol))

    async def get_all_farms(self, protocol: DefiProtocol | str) -> ApiResponse:
        return await self._http.call(GET_ALL_FARMS, _protocol(protocol))

    async def get_farm_by_symbol(self, protocol: DefiProtocol | str, symbol: str) -> ApiResponse:
        return await self._http.call(GET_FARM_BY_SYMBOL, _protocol(protocol), symbol)
