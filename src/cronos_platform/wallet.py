"""Wallet API — creation and balance."""

from __future__ import annotations

from cronos_platform.http import AsyncHttpClient, Endpoint, HttpClient
from cronos_platform.types import ApiResponse

CREATE_WALLET = Endpoint("POST", "/wallet", "walletApi/createWallet")
GET_BALANCE = Endpoint("GET", "/wallet/balance", "walletApi/getBalance")


class WalletApi:
    """Synchronous Wallet API."""

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def create(self) -> ApiResponse:
        """Create a new wallet. The response carries the address, private key and mnemonic."""
        return self._http.call(CREATE_WALLET)

    def balance(self, wallet_address: str) -> ApiResponse:
        """Get the native balance of *wallet_address*."""
        return self._http.call(GET_BALANCE, params={"walletAddress": wallet_address})


class AsyncWalletApi:
    """Asynchronous Wallet API."""

    def __init__(self, http: AsyncHttpClient) -> None:
        self._http = http

    async def create(self) -> ApiResponse:
        return await self._http.call(CREATE_WALLET)

    async def balance(self, wallet_address: str) -> ApiResponse:
        return await self._http.call(GET_BALANCE, params={"walletAddress": wallet_address})
