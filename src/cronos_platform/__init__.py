"""Python SDK for the Crypto.com Developer Platform API on Cronos."""

from cronos_platform.chains import CronosEvm, CronosZkEvm
from cronos_platform.client import AsyncPlatformClient, PlatformClient
from cronos_platform.config import ClientConfig, init
from cronos_platform.cronosid import is_cronos_id
from cronos_platform.defi import DefiProtocol
from cronos_platform.exceptions import (
    ConfigurationError,
    PlatformError,
    RemoteError,
    TransportError,
    ValidationError,
)
from cronos_platform.http import AsyncHttpClient, AuthPlacement, Endpoint, HttpClient

__all__ = [
    "PlatformClient",
    "AsyncPlatformClient",
    "ClientConfig",
    "init",
    "CronosEvm",
    "CronosZkEvm",
    "DefiProtocol",
    "is_cronos_id",
    "HttpClient",
    "AsyncHttpClient",
    "Endpoint",
    "AuthPlacement",
    "PlatformError",
    "ConfigurationError",
    "ValidationError",
    "TransportError",
    "RemoteError",
]

__version__ = "0.1.0"
