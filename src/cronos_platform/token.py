"""Token API — native/ERC20/ERC721 balances and metadata, transfer, wrap, swap."""

from __future__ import annotations

from typing import Any

from cronos_platform.http import AsyncHttpClient, Endpoint, HttpClient
from cronos_platform.types import ApiResponse

GET_NATIVE_TOKEN_BALANCE = Endpoint("GET", "/token/native-token-balance", "tokenApi/getNativeTokenBalance")
GET_ERC20_TOKEN_BALANCE = Endpoint("GET", "/token/erc20-token-balance", "tokenApi/getERC20TokenBalance")
TRANSFER_TOKEN = Endpoint("POST", "/token/transfer", "tokenApi/transferToken")
WRAP_TOKEN = Endpoint("POST", "/token/wrap", "tokenApi/wrapToken")
SWAP_TOKEN = Endpoint("POST", "/token/swap", "tokenApi/swapToken")
GET_ERC721_TOKEN_BALANCE = Endpoint("GET", "/token/erc721-token-balance", "tokenApi/getERC721TokenBalance")
GET_TOKEN_OWNER = Endpoint("GET", "/token/erc721-token-owner", "tokenApi/getTokenOwner")
GET_TOKEN_URI = Endpoint("GET", "/token/erc721-token-uri", "tokenApi/getTokenUri")
GET_ERC721_METADATA = Endpoint("GET", "/token/erc721-token-metadata", "tokenApi/getERC721Metadata")
GET_ERC20_METADATA = Endpoint("GET", "/token/erc20-token-metadata", "tokenApi/getERC20Metadata")


def _with_provider(payload: dict[str, Any], provider: str | None) -> dict[str, Any]:
    body = {k: v for k, v in payload.items() if v is not None}
    if provider is not None:
        body["provider"] = provider
    return body


class TokenApi:
    """Synchronous Token API.

    ``transfer``, ``wrap`` and ``swap`` do not sign anything: the service
    answers with a magic link built on the configured provider URL.
    """

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    # -- Balances ------------------------------------------------------------

    def get_native_token_balance(self, address: str) -> ApiResponse:
        """Get the native token balance of *address*."""
        return self._http.call(GET_NATIVE_TOKEN_BALANCE, params={"walletAddress": address})

    def get_erc20_token_balance(
        self,
        address: str,
        contract_address: str,
        block_height: str = "latest",
    ) -> ApiResponse:
        """Get the ERC20 balance of *address* at *block_height*."""
        params = {"walletAddress": address, "contractAddress": contract_address, "blockHeight": block_height}
        return self._http.call(GET_ERC20_TOKEN_BALANCE, params=params)

    def get_erc721_token_balance(self, wallet_address: str, contract_address: str) -> ApiResponse:
        """Get how many tokens of an ERC721 collection *wallet_address* holds."""
        params = {"walletAddress": wallet_address, "contractAddress": contract_address}
        return self._http.call(GET_ERC721_TOKEN_BALANCE, params=params)

    # -- Transactions --------------------------------------------------------

    def transfer(self, to: str, amount: float, contract_address: str | None = None) -> ApiResponse:
        """Transfer native tokens, or ERC20 tokens when *contract_address* is given."""
        payload = {"to": to, "amount": amount, "contractAddress": contract_address}
        return self._http.call(TRANSFER_TOKEN, body=_with_provider(payload, self._http.config.get_provider()))

    def wrap(self, amount: float) -> ApiResponse:
        """Wrap *amount* of the native token."""
        return self._http.call(WRAP_TOKEN, body=_with_provider({"amount": amount}, self._http.config.get_provider()))

    def swap(self, from_contract_address: str, to_contract_address: str, amount: float) -> ApiResponse:
        """Swap *amount* between two token contracts."""
        payload = {
            "fromContractAddress": from_contract_address,
            "toContractAddress": to_contract_address,
            "amount": amount,
        }
        return self._http.call(SWAP_TOKEN, body=_with_provider(payload, self._http.config.get_provider()))

    # -- ERC721 --------------------------------------------------------------

    def get_token_owner(self, contract_address: str, token_id: str) -> ApiResponse:
        """Get the owner of an ERC721 token."""
        return self._http.call(GET_TOKEN_OWNER, params={"contractAddress": contract_address, "tokenId": token_id})

    def get_token_uri(self, contract_address: str, token_id: str) -> ApiResponse:
        """Get the metadata URI of an ERC721 token."""
        return self._http.call(GET_TOKEN_URI, params={"contractAddress": contract_address, "tokenId": token_id})

    def get_erc721_metadata(self, contract_address: str) -> ApiResponse:
        """Get name and symbol of an ERC721 contract."""
        return self._http.call(GET_ERC721_METADATA, params={"contractAddress": contract_address})

    def get_erc20_metadata(self, contract_address: str) -> ApiResponse:
        """Get name, symbol and decimals of an ERC20 contract."""
        return self._http.call(GET_ERC20_METADATA, params={"contractAddress": contract_address})


class AsyncTokenApi:
    """Asynchronous Token API."""

    def __init__(self, http: AsyncHttpClient) -> None:
        self._http = http

    async def get_native_token_balance(self, address: str) -> ApiResponse:
        return await self._http.call(GET_NATIVE_TOKEN_BALANCE, params={"walletAddress": address})

    async def get_erc20_token_balance(
        self,
        address: str,
        contract_address: str,
        block_height: str = "latest",
    ) -> ApiResponse:
        params = {"walletAddress": address, "contractAddress": contract_address, "blockHeight": block_height}
        return await self._http.call(GET_ERC20_TOKEN_BALANCE, params=params)

    async def get_erc721_token_balance(self, wallet_address: str, contract_address: str) -> ApiResponse:
        params = {"walletAddress": wallet_address, "contractAddress": contract_address}
        return await self._http.call(GET_ERC721_TOKEN_BALANCE, params=params)

    async def transfer(self, to: str, amount: float, contract_address: str | None = None) -> ApiResponse:
        payload = {"to": to, "amount": amount, "contractAddress": contract_address}
        return await self._http.call(TRANSFER_TOKEN, body=_with_provider(payload, self._http.config.get_provider()))

    async def wrap(self, amount: float) -> ApiResponse:
        return await self._http.call(
            WRAP_TOKEN, body=_with_provider({"amount": amount}, self._http.config.get_provider())
        )

    async def swap(self, from_contract_address: str, to_contract_address: str, amount: float) -> ApiResponse:
        payload = {
            "fromContractAddress": from_contract_address,
            "toContractAddress": to_contract_address,
            "amount": amount,
        }
        return await self._http.call(SWAP_TOKEN, body=_with_provider(payload, self._http.config.get_provider()))

    async def get_token_owner(self, contract_address: str, token_id: str) -> ApiResponse:
        return await self._http.call(
            GET_TOKEN_OWNER, params={"contractAddress": contract_address, "tokenId": token_id}
        )

    async def get_token_uri(self, contract_address: str, token_id: str) -> ApiResponse:
        return await self._http.call(GET_TOKEN_URI, params={"contractAddress": contract_address, "tokenId": token_id})

    async def get_erc721_metadata(self, contract_address: str) -> ApiResponse:
        return await self._http.call(GET_ERC721_METADATA, params={"contractAddress": contract_address})

    async def get_erc20_metadata(self, contract_address: str) -> ApiResponse:
        return await self._http.call(GET_ERC20_METADATA, params={"contractAddress": contract_address})
