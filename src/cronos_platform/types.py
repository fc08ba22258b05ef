"""Type definitions mirroring the developer platform response schema.

All types use ``TypedDict`` for maximum JSON compatibility — the SDK returns
raw dicts from the API, and these types provide editor auto-complete.
"""

from __future__ import annotations

from typing import Any, TypedDict


# ---------------------------------------------------------------------------
# Envelope
# ---------------------------------------------------------------------------

class ApiResponse(TypedDict):
    status: str
    data: Any


# ---------------------------------------------------------------------------
# Wallet & Token
# ---------------------------------------------------------------------------

class WalletData(TypedDict):
    address: str
    privateKey: str
    mnemonic: str


class Balance(TypedDict):
    balance: str


class TokenMetadata(TypedDict, total=False):
    name: str
    symbol: str
    decimals: str


class MagicLinkData(TypedDict):
    magicLink: str


# ---------------------------------------------------------------------------
# Transaction
# ---------------------------------------------------------------------------

class Pagination(TypedDict, total=False):
    totalRecord: int
    totalPage: int
    currentPage: int
    limit: int
    session: str


class TransactionsByAddress(TypedDict, total=False):
    transactions: list[dict[str, Any]]
    pagination: Pagination


class TransactionByHash(TypedDict):
    blockNumber: int
    from_: str  # 'from' is reserved in Python
    to: str
    value: str
    gasPrice: str
    nonce: int
    transactionIndex: int
    gas: int


class TransactionStatus(TypedDict, total=False):
    status: int | str
    errDescription: str


class TransactionCount(TypedDict):
    count: int


class GasPrice(TypedDict):
    gasPrice: str


class FeeData(TypedDict):
    feeData: dict[str, str]


class GasLimit(TypedDict):
    gasLimit: str


class AccessListEntry(TypedDict):
    address: str
    storageKeys: list[str]


class EstimateGasPayload(TypedDict, total=False):
    from_: str
    to: str
    value: str
    gasLimit: str
    gasPrice: str
    maxFeePerGas: str
    maxPriorityFeePerGas: str
    data: str
    nonce: int
    accessList: list[AccessListEntry]


# ---------------------------------------------------------------------------
# Block
# ---------------------------------------------------------------------------

class BlockNumber(TypedDict):
    blockNumber: int


class BlockData(TypedDict, total=False):
    hash: str
    number: int
    parentHash: str
    timestamp: int
    miner: str
    gasLimit: str
    gasUsed: str
    baseFeePerGas: str
    transactions: list[Any]


# ---------------------------------------------------------------------------
# CronosId
# ---------------------------------------------------------------------------

class ResolveName(TypedDict):
    address: str


class LookupAddress(TypedDict):
    name: str


# ---------------------------------------------------------------------------
# DeFi & Exchange
# ---------------------------------------------------------------------------

class WhitelistedToken(TypedDict, total=False):
    id: int
    name: str
    symbol: str
    address: str
    decimal: int
    isSwappable: bool
    chain: str
    chainId: int


class TokenInfo(TypedDict):
    id: int
    symbol: str
    address: str


class Farm(TypedDict, total=False):
    id: int
    pid: int
    lpSymbol: str
    lpAddress: str
    token: TokenInfo
    quoteToken: TokenInfo
    isFinished: bool
    chain: str
    chainId: int
    baseApr: float
    baseApy: float
    lpApr: float
    lpApy: float


class TickerData(TypedDict):
    instrumentName: str
    high: float
    low: float
    lastPrice: float
    volume: float
    volumeValue: float
    priceChange: float
    bestBid: float
    bestAsk: float
    openInterest: float
    timestamp: int


# ---------------------------------------------------------------------------
# Network & Events
# ---------------------------------------------------------------------------

class ChainId(TypedDict):
    chainId: str


class ClientVersion(TypedDict):
    clientVersion: str


class Log(TypedDict, total=False):
    address: str
    blockHash: str
    blockNumber: int
    data: str
    index: int
    removed: bool
    topics: list[str]
    transactionHash: str
    transactionIndex: int
