"""Tests for ExchangeApi and DefiApi."""

import pytest
from pytest_httpserver import HTTPServer

from cronos_platform import ClientConfig, DefiProtocol, PlatformClient
from cronos_platform.exceptions import ConfigurationError
from tests.conftest import API_KEY, PREFIX, json_response, ok

TICKER = {"instrumentName": "CRO_USD", "lastPrice": 0.1, "timestamp": 1700000000000}


class TestExchangeApi:
    def test_get_all_tickers_sends_no_key(self, httpserver: HTTPServer, client: PlatformClient) -> None:
        def handler(request):
            assert request.headers.get("x-api-key") is None
            assert request.query_string == b""
            return json_response(ok([TICKER]))

        httpserver.expect_request(f"{PREFIX}/exchange/tickers").respond_with_handler(handler)
        assert client.exchange.get_all_tickers() == ok([TICKER])

    def test_get_ticker_by_instrument(self, httpserver: HTTPServer, client: PlatformClient) -> None:
        httpserver.expect_request(f"{PREFIX}/exchange/tickers/CRO_USD").respond_with_json(ok(TICKER))
        assert client.exchange.get_ticker_by_instrument("CRO_USD")["data"]["lastPrice"] == 0.1

    def test_requires_configured_key(self, httpserver: HTTPServer) -> None:
        client = PlatformClient(ClientConfig(), httpserver.url_for(""))
        with pytest.raises(ConfigurationError):
            client.exchange.get_all_tickers()
        assert len(httpserver.log) == 0


class TestDefiApi:
    def test_get_whitelisted_tokens(self, httpserver: HTTPServer, client: PlatformClient) -> None:
        httpserver.expect_request(
            f"{PREFIX}/defi/whitelisted-tokens/h2finance", headers={"x-api-key": API_KEY}
        ).respond_with_json(ok([{"symbol": "CRO", "isSwappable": True}]))
        result = client.defi.get_whitelisted_tokens(DefiProtocol.H2)
        assert result["data"][0]["symbol"] == "CRO"

    def test_get_all_farms(self, httpserver: HTTPServer, client: PlatformClient) -> None:
        httpserver.expect_request(f"{PREFIX}/defi/farms/vvsfinance").respond_with_json(ok([{"lpSymbol": "CRO-VVS"}]))
        assert client.defi.get_all_farms(DefiProtocol.VVS)["data"][0]["lpSymbol"] == "CRO-VVS"

    def test_get_farm_by_symbol(self, httpserver: HTTPServer, client: PlatformClient) -> None:
        httpserver.expect_request(f"{PREFIX}/defi/farms/vvsfinance/CRO-VVS").respond_with_json(
            ok({"lpSymbol": "CRO-VVS", "baseApr": 12.5})
        )
        result = client.defi.get_farm_by_symbol("vvsfinance", "CRO-VVS")
        assert result["data"]["baseApr"] == 12.5
