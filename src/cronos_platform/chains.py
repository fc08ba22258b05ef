"""Chain identities understood by the platform."""

from __future__ import annotations

from enum import Enum


class CronosEvm(str, Enum):
    """Chain IDs for Cronos EVM."""

    MAINNET = "25"
    TESTNET = "338"


class CronosZkEvm(str, Enum):
    """Chain IDs for Cronos ZK EVM."""

    MAINNET = "388"
    TESTNET = "240"


# CronosId registries are only deployed on Cronos EVM.
CRONOS_ID_CHAINS = frozenset({CronosEvm.MAINNET.value, CronosEvm.TESTNET.value})
