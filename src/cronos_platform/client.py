"""Top-level platform client (sync + async)."""

from __future__ import annotations

import httpx

from cronos_platform.block import AsyncBlockApi, BlockApi
from cronos_platform.config import ClientConfig
from cronos_platform.contract import AsyncContractApi, ContractApi
from cronos_platform.cronosid import AsyncCronosIdApi, CronosIdApi
from cronos_platform.defi import AsyncDefiApi, DefiApi
from cronos_platform.event import AsyncEventApi, EventApi
from cronos_platform.exchange import AsyncExchangeApi, ExchangeApi
from cronos_platform.http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, AsyncHttpClient, HttpClient
from cronos_platform.network import AsyncNetworkApi, NetworkApi
from cronos_platform.token import AsyncTokenApi, TokenApi
from cronos_platform.transaction import AsyncTransactionApi, TransactionApi
from cronos_platform.wallet import AsyncWalletApi, WalletApi


class PlatformClient:
    """Synchronous client for the developer platform HTTP API.

    Usage::

        client = PlatformClient(ClientConfig(api_key="your-api-key", chain_id=CronosEvm.TESTNET))
        block = client.block.get_current_block()
        address = client.cronosid.forward_resolve("alice.cro")
    """

    def __init__(
        self,
        config: ClientConfig,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.config = config
        self.http = HttpClient(config, base_url, timeout=timeout, headers=headers, transport=transport)
        self.wallet = WalletApi(self.http)
        self.token = TokenApi(self.http)
        self.transaction = TransactionApi(self.http)
        self.contract = ContractApi(self.http)
        self.block = BlockApi(self.http)
        self.cronosid = CronosIdApi(self.http)
        self.defi = DefiApi(self.http)
        self.exchange = ExchangeApi(self.http)
        self.network = NetworkApi(self.http)
        self.event = EventApi(self.http)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "PlatformClient":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class AsyncPlatformClient:
    """Asynchronous client for the developer platform HTTP API.

    Usage::

        async with AsyncPlatformClient(ClientConfig(api_key="your-api-key")) as client:
            info = await client.network.info()
    """

    def __init__(
        self,
        config: ClientConfig,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self.http = AsyncHttpClient(config, base_url, timeout=timeout, headers=headers, transport=transport)
        self.wallet = AsyncWalletApi(self.http)
        self.token = AsyncTokenApi(self.http)
        self.transaction = AsyncTransactionApi(self.http)
        self.contract = AsyncContractApi(self.http)
        self.block = AsyncBlockApi(self.http)
        self.cronosid = AsyncCronosIdApi(self.http)
        self.defi = AsyncDefiApi(self.http)
        self.exchange = AsyncExchangeApi(self.http)
        self.network = AsyncNetworkApi(self.http)
        self.event = AsyncEventApi(self.http)

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> "AsyncPlatformClient":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()
