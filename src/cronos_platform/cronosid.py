"""CronosId API — ``.cro`` name resolution.

Resolution is only available on Cronos EVM; calls on any other chain are
rejected locally without contacting the service.
"""

from __future__ import annotations

from cronos_platform.chains import CRONOS_ID_CHAINS
from cronos_platform.config import ClientConfig
from cronos_platform.exceptions import ValidationError
from cronos_platform.http import AsyncHttpClient, Endpoint, HttpClient
from cronos_platform.types import ApiResponse

CRONOS_ID_SUFFIX = ".cro"

RESOLVE_NAME = Endpoint("GET", "/cronosid/resolve/{}", "cronosidApi/resolveName")
LOOKUP_ADDRESS = Endpoint("GET", "/cronosid/lookup/{}", "cronosidApi/lookupAddress")


def is_cronos_id(name: str) -> bool:
    """Return True if *name* looks like a CronosId, e.g. ``'alice.cro'``.

    The check is case-insensitive and requires a non-empty label before the
    first ``.cro``.
    """
    lowered = name.lower()
    return lowered.endswith(CRONOS_ID_SUFFIX) and len(lowered.split(CRONOS_ID_SUFFIX)[0]) > 0


def is_supported(config: ClientConfig) -> bool:
    """Return True if CronosId is deployed on the configured chain."""
    return config.get_chain_id() in CRONOS_ID_CHAINS


def _check_supported(config: ClientConfig) -> None:
    if not is_supported(config):
        raise ValidationError("CronosId is not supported on the current chain")


def _check_name(name: str) -> None:
    if not is_cronos_id(name):
        raise ValidationError(f"Invalid CronosId format: {name}")


class CronosIdApi:
    """Synchronous CronosId API."""

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def is_supported(self) -> bool:
        return is_supported(self._http.config)

    def forward_resolve(self, cronos_id: str) -> ApiResponse:
        """Resolve a CronosId to a wallet address.

        Raises ``ValidationError`` on an unsupported chain or a malformed name.
        """
        _check_supported(self._http.config)
        _check_name(cronos_id)
        return self._http.call(RESOLVE_NAME, cronos_id)

    def reverse_resolve(self, address: str) -> ApiResponse:
        """Look up the CronosId registered for *address*, if any."""
        _check_supported(self._http.config)
        return self._http.call(LOOKUP_ADDRESS, address)


class AsyncCronosIdApi:
    """Asynchronous CronosId API."""

    def __init__(self, http: AsyncHttpClient) -> None:
        self._http = http

    def is_supported(self) -> bool:
        return is_supported(self._http.config)

    async def forward_resolve(self, cronos_id: str) -> ApiResponse:
        _check_supported(self._http.config)
        _check_name(cronos_id)
        return await self._http.call(RESOLVE_NAME, cronos_id)

    async def reverse_resolve(self, address: str) -> ApiResponse:
        _check_supported(self._http.config)
        return await self._http.call(LOOKUP_ADDRESS, address)
