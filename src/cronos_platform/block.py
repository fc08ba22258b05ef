"""Block API — current block and lookup by tag."""

from __future__ import annotations

from cronos_platform.http import AsyncHttpClient, Endpoint, HttpClient
from cronos_platform.types import ApiResponse

GET_CURRENT_BLOCK = Endpoint("GET", "/block/current-block", "blockApi/getCurrentBlock")
GET_BLOCK_BY_TAG = Endpoint("GET", "/block/block-tag", "blockApi/getBlockByTag")


class BlockApi:
    """Synchronous Block API."""

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def get_current_block(self) -> ApiResponse:
        """Get the latest block number."""
        return self._http.call(GET_CURRENT_BLOCK)

    def get_block_by_tag(self, block_tag: str, tx_detail: str = "false") -> ApiResponse:
        """Get a block by number or tag (``'latest'``, ``'earliest'``, hex height).

        ``tx_detail`` is always sent; pass ``'true'`` to include full transactions.
        """
        return self._http.call(GET_BLOCK_BY_TAG, params={"blockTag": block_tag, "txDetail": tx_detail})


class AsyncBlockApi:
    """Asynchronous Block API."""

    def __init__(self, http: AsyncHttpClient) -> None:
        self._http = http

    async def get_current_block(self) -> ApiResponse:
        return await self._http.call(GET_CURRENT_BLOCK)

    async def get_block_by_tag(self, block_tag: str, tx_detail: str = "false") -> ApiResponse:
        return await self._http.call(GET_BLOCK_BY_TAG, params={"blockTag": block_tag, "txDetail": tx_detail})
