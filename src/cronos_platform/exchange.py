"""Exchange API — public ticker data.

The ticker endpoints are public: the API key must still be configured but it
is not sent with the request.
"""

from __future__ import annotations

from cronos_platform.http import AsyncHttpClient, AuthPlacement, Endpoint, HttpClient
from cronos_platform.types import ApiResponse

GET_ALL_TICKERS = Endpoint("GET", "/exchange/tickers", "exchangeApi/getAllTickers", AuthPlacement.NONE)
GET_TICKER_BY_INSTRUMENT = Endpoint(
    "GET", "/exchange/tickers/{}", "exchangeApi/getTickerByInstrument", AuthPlacement.NONE
)


class ExchangeApi:
    """Synchronous Exchange API."""

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def get_all_tickers(self) -> ApiResponse:
        """Get tickers for every instrument."""
        return self._http.call(GET_ALL_TICKERS)

    def get_ticker_by_instrument(self, instrument_name: str) -> ApiResponse:
        """Get the ticker for one instrument, e.g. ``'CRO_USD'``."""
        return self._http.call(GET_TICKER_BY_INSTRUMENT, instrument_name)


class AsyncExchangeApi:
    """Asynchronous Exchange API."""

    def __init__(self, http: AsyncHttpClient) -> None:
        self._http = http

    async def get_all_tickers(self) -> ApiResponse:
        return await self._http.call(GET_ALL_TICKERS)

    async def get_ticker_by_instrument(self, instrument_name: str) -> ApiResponse:
        return await self._http.call(GET_TICKER_BY_INSTRUMENT, instrument_name)
