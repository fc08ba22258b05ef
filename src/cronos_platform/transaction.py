"""Transaction API — lookups, status, gas and fee estimation."""

from __future__ import annotations

from typing import Any

from cronos_platform.http import AsyncHttpClient, Endpoint, HttpClient
from cronos_platform.types import ApiResponse, EstimateGasPayload

GET_TRANSACTIONS_BY_ADDRESS = Endpoint("GET", "/transaction/address", "transactionApi/getTransactionsByAddress")
GET_TRANSACTION_BY_HASH = Endpoint("GET", "/transaction/tx-hash", "transactionApi/getTransactionByHash")
GET_TRANSACTION_STATUS = Endpoint("GET", "/transaction/status", "transactionApi/getTransactionStatus")
GET_TRANSACTION_COUNT = Endpoint("GET", "/transaction/tx-count", "transactionApi/getTransactionCount")
GET_GAS_PRICE = Endpoint("GET", "/transaction/gas-price", "transactionApi/getGasPrice")
GET_FEE_DATA = Endpoint("GET", "/transaction/fee-data", "transactionApi/getFeeData")
ESTIMATE_GAS = Endpoint("POST", "/transaction/estimate-gas", "transactionApi/estimateGas")


def _address_params(
    address: str,
    explorer_key: str,
    session: str,
    limit: str,
    start_block: int | None,
    end_block: int | None,
) -> ApiResponse:
    # session and limit are always sent; block bounds only when given.
    params: dict[str, Any] = {
        "address": address,
        "explorerKey": explorer_key,
        "session": session,
        "limit": limit,
    }
    if start_block is not None:
        params["startBlock"] = str(start_block)
    if end_block is not None:
        params["endBlock"] = str(end_block)
    return params


class TransactionApi:
    """Synchronous Transaction API."""

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def get_transactions_by_address(
        self,
        address: str,
        explorer_key: str,
        *,
        session: str = "",
        limit: str = "20",
        start_block: int | None = None,
        end_block: int | None = None,
    ) -> ApiResponse:
        """List transactions of *address* through the chain explorer.

        Pass the ``session`` token from a previous page's pagination block to
        fetch the next page.
        """
        params = _address_params(address, explorer_key, session, limit, start_block, end_block)
        return self._http.call(GET_TRANSACTIONS_BY_ADDRESS, params=params)

    def get_transaction_by_hash(self, tx_hash: str) -> ApiResponse:
        """Get a transaction by hash."""
        return self._http.call(GET_TRANSACTION_BY_HASH, params={"txHash": tx_hash})

    def get_transaction_status(self, tx_hash: str) -> ApiResponse:
        """Get the receipt status of a transaction."""
        return self._http.call(GET_TRANSACTION_STATUS, params={"txHash": tx_hash})

    def get_transaction_count(self, wallet_address: str) -> ApiResponse:
        """Get the nonce (sent transaction count) of *wallet_address*."""
        return self._http.call(GET_TRANSACTION_COUNT, params={"walletAddress": wallet_address})

    def get_gas_price(self) -> ApiResponse:
        return self._http.call(GET_GAS_PRICE)

    def get_fee_data(self) -> ApiResponse:
        return self._http.call(GET_FEE_DATA)

    def estimate_gas(self, payload: EstimateGasPayload | dict[str, Any]) -> ApiResponse:
        """Estimate the gas limit of a transaction. *payload* needs at least ``from``."""
        return self._http.call(ESTIMATE_GAS, body=payload)


class AsyncTransactionApi:
    """Asynchronous Transaction API."""

    def __init__(self, http: AsyncHttpClient) -> None:
        self._http = http

    async def get_transactions_by_address(
        self,
        address: str,
        explorer_key: str,
        *,
        session: str = "",
        limit: str = "20",
        start_block: int | None = None,
        end_block: int | None = None,
    ) -> ApiResponse:
        params = _address_params(address, explorer_key, session, limit, start_block, end_block)
        return await self._http.call(GET_TRANSACTIONS_BY_ADDRESS, params=params)

    async def get_transaction_by_hash(self, tx_hash: str) -> ApiResponse:
        return await self._http.call(GET_TRANSACTION_BY_HASH, params={"txHash": tx_hash})

    async def get_transaction_status(self, tx_hash: str) -> ApiResponse:
        return await self._http.call(GET_TRANSACTION_STATUS, params={"txHash": tx_hash})

    async def get_transaction_count(self, wallet_address: str) -> ApiResponse:
        return await self._http.call(GET_TRANSACTION_COUNT, params={"walletAddress": wallet_address})

    async def get_gas_price(self) -> ApiResponse:
        return await self._http.call(GET_GAS_PRICE)

    async def get_fee_data(self) -> ApiResponse:
        return await self._http.call(GET_FEE_DATA)

    async def estimate_gas(self, payload: EstimateGasPayload | dict[str, Any]) -> ApiResponse:
        return await self._http.call(ESTIMATE_GAS, body=payload)
