"""Client configuration: API key, provider URL and selected chain."""

from __future__ import annotations

import os
from dataclasses import dataclass

from cronos_platform.chains import CronosEvm, CronosZkEvm
from cronos_platform.exceptions import ConfigurationError

ENV_PREFIX = "CRONOS_PLATFORM_"


@dataclass(frozen=True)
class ClientConfig:
    """Immutable settings shared by every facade of a client.

    Build one at startup and hand it to :class:`~cronos_platform.PlatformClient`::

        config = ClientConfig(api_key="your-api-key", chain_id=CronosEvm.TESTNET)

    ``provider`` is the URL used to build magic links for transfer, wrap and
    swap requests.
    """

    api_key: str = ""
    provider: str | None = None
    chain_id: str | CronosEvm | CronosZkEvm | None = None

    def get_api_key(self) -> str:
        if not self.api_key:
            raise ConfigurationError(
                "API key not configured. Pass ClientConfig(api_key='your-api-key') to the client first."
            )
        return self.api_key

    def get_provider(self) -> str | None:
        return self.provider

    def get_chain_id(self) -> str | None:
        if self.chain_id is None:
            return None
        if isinstance(self.chain_id, (CronosEvm, CronosZkEvm)):
            return self.chain_id.value
        return str(self.chain_id)

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> "ClientConfig":
        """Read ``<prefix>API_KEY``, ``<prefix>PROVIDER`` and ``<prefix>CHAIN_ID``."""
        return cls(
            api_key=os.environ.get(f"{prefix}API_KEY", ""),
            provider=os.environ.get(f"{prefix}PROVIDER") or None,
            chain_id=os.environ.get(f"{prefix}CHAIN_ID") or None,
        )


def init(
    api_key: str,
    *,
    provider: str | None = None,
    chain_id: str | CronosEvm | CronosZkEvm | None = None,
) -> ClientConfig:
    """Create the configuration for a client."""
    return ClientConfig(api_key=api_key, provider=provider, chain_id=chain_id)
