"""Cross-facade behaviour of PlatformClient / AsyncPlatformClient."""

import asyncio
import re

import pytest
from pytest_httpserver import HTTPServer

from cronos_platform import AsyncPlatformClient, ClientConfig, CronosEvm, DefiProtocol, PlatformClient
from cronos_platform.exceptions import ConfigurationError, RemoteError
from tests.conftest import API_KEY

ANY_PATH = re.compile(r"/api/v1/cdc-developer-platform/.*")

OPERATIONS = [
    ("wallet", "create", ()),
    ("wallet", "balance", ("0xabc",)),
    ("token", "get_native_token_balance", ("0xabc",)),
    ("token", "get_erc20_token_balance", ("0xabc", "0xc0")),
    ("token", "transfer", ("0xdef", 1)),
    ("token", "wrap", (1,)),
    ("token", "swap", ("0xa", "0xb", 1)),
    ("token", "get_erc721_token_balance", ("0xabc", "0xnft")),
    ("token", "get_token_owner", ("0xnft", "1")),
    ("token", "get_token_uri", ("0xnft", "1")),
    ("token", "get_erc721_metadata", ("0xnft",)),
    ("token", "get_erc20_metadata", ("0xc0",)),
    ("transaction", "get_transactions_by_address", ("0xabc", "ek")),
    ("transaction", "get_transaction_by_hash", ("0xtx",)),
    ("transaction", "get_transaction_status", ("0xtx",)),
    ("transaction", "get_transaction_count", ("0xabc",)),
    ("transaction", "get_gas_price", ()),
    ("transaction", "get_fee_data", ()),
    ("transaction", "estimate_gas", ({"from": "0xa"},)),
    ("contract", "get_contract_abi", ("0xc0", "ek")),
    ("contract", "get_contract_code", ("0xc0",)),
    ("block", "get_current_block", ()),
    ("block", "get_block_by_tag", ("latest",)),
    ("cronosid", "forward_resolve", ("alice.cro",)),
    ("cronosid", "reverse_resolve", ("0xabc",)),
    ("defi", "get_whitelisted_tokens", (DefiProtocol.H2,)),
    ("defi", "get_all_farms", (DefiProtocol.VVS,)),
    ("defi", "get_farm_by_symbol", (DefiProtocol.VVS, "CRO-VVS")),
    ("exchange", "get_all_tickers", ()),
    ("exchange", "get_ticker_by_instrument", ("CRO_USD",)),
    ("network", "info", ()),
    ("network", "chain_id", ()),
    ("network", "client_version", ()),
    ("event", "get_logs", ("0xabc",)),
]

IDS = [f"{facade}.{op}" for facade, op, _ in OPERATIONS]


def _invoke(client, facade: str, op: str, args: tuple):
    return getattr(getattr(client, facade), op)(*args)


@pytest.mark.parametrize("facade,op,args", OPERATIONS, ids=IDS)
def test_unconfigured_client_fails_fast(httpserver: HTTPServer, facade: str, op: str, args: tuple) -> None:
    httpserver.expect_request(ANY_PATH).respond_with_json({"foo": 1})
    client = PlatformClient(ClientConfig(chain_id=CronosEvm.TESTNET), httpserver.url_for(""))
    with pytest.raises(ConfigurationError):
        _invoke(client, facade, op, args)
    assert len(httpserver.log) == 0


@pytest.mark.parametrize("facade,op,args", OPERATIONS, ids=IDS)
def test_remote_error_message(httpserver: HTTPServer, client: PlatformClient, facade: str, op: str, args: tuple) -> None:
    httpserver.expect_request(ANY_PATH).respond_with_json({"error": "not found"}, status=404)
    with pytest.raises(RemoteError, match="not found") as exc_info:
        _invoke(client, facade, op, args)
    assert exc_info.value.status == 404


@pytest.mark.parametrize("facade,op,args", OPERATIONS, ids=IDS)
def test_response_passthrough(httpserver: HTTPServer, client: PlatformClient, facade: str, op: str, args: tuple) -> None:
    httpserver.expect_request(ANY_PATH).respond_with_json({"foo": 1})
    assert _invoke(client, facade, op, args) == {"foo": 1}
    assert len(httpserver.log) == 1


@pytest.mark.parametrize("facade,op,args", OPERATIONS, ids=IDS)
def test_async_response_passthrough(httpserver: HTTPServer, facade: str, op: str, args: tuple) -> None:
    httpserver.expect_request(ANY_PATH).respond_with_json({"foo": 1})

    async def run():
        config = ClientConfig(api_key=API_KEY, chain_id=CronosEvm.TESTNET)
        async with AsyncPlatformClient(config, httpserver.url_for("")) as client:
            return await _invoke(client, facade, op, args)

    assert asyncio.run(run()) == {"foo": 1}


@pytest.mark.parametrize("facade,op,args", OPERATIONS, ids=IDS)
def test_async_unconfigured_client_fails_fast(httpserver: HTTPServer, facade: str, op: str, args: tuple) -> None:
    async def run():
        async with AsyncPlatformClient(ClientConfig(chain_id=CronosEvm.TESTNET), httpserver.url_for("")) as client:
            return await _invoke(client, facade, op, args)

    with pytest.raises(ConfigurationError):
        asyncio.run(run())
    assert len(httpserver.log) == 0


class TestPlatformClient:
    def test_context_manager_closes(self, httpserver: HTTPServer) -> None:
        with PlatformClient(ClientConfig(api_key=API_KEY), httpserver.url_for("")) as client:
            assert client.config.get_api_key() == API_KEY
        assert client.http._client.is_closed

    def test_shares_one_dispatcher(self, client: PlatformClient) -> None:
        assert client.wallet._http is client.http
        assert client.cronosid._http is client.http
        assert client.exchange._http is client.http
