"""Contract API — ABI and bytecode lookup."""

from __future__ import annotations

from cronos_platform.http import AsyncHttpClient, AuthPlacement, Endpoint, HttpClient
from cronos_platform.types import ApiResponse

# The ABI lookup is proxied to the explorer and takes the key as a query parameter.
GET_CONTRACT_ABI = Endpoint("GET", "/contract/contract-abi", "contractApi/getContractABI", AuthPlacement.QUERY)
GET_CONTRACT_CODE = Endpoint("GET", "/contract/contract-code", "contractApi/getContractCode")


class ContractApi:
    """Synchronous Contract API."""

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def get_contract_abi(self, contract_address: str, explorer_key: str) -> ApiResponse:
        """Get the verified ABI of a contract using an explorer API key."""
        params = {"contractAddress": contract_address, "explorerKey": explorer_key}
        return self._http.call(GET_CONTRACT_ABI, params=params)

    def get_contract_code(self, contract_address: str) -> ApiResponse:
        """Get the deployed bytecode of a contract."""
        return self._http.call(GET_CONTRACT_CODE, params={"contractAddress": contract_address})


class AsyncContractApi:
    """Asynchronous Contract API."""

    def __init__(self, http: AsyncHttpClient) -> None:
        self._http = http

    async def get_contract_abi(self, contract_address: str, explorer_key: str) -> ApiResponse:
        params = {"contractAddress": contract_address, "explorerKey": explorer_key}
        return await self._http.call(GET_CONTRACT_ABI, params=params)

    async def get_contract_code(self, contract_address: str) -> ApiResponse:
        return await self._http.call(GET_CONTRACT_CODE, params={"contractAddress": contract_address})
