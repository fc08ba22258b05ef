#!/usr/bin/env python3
"""
Resolve CronosIds and print chain info concurrently with AsyncPlatformClient.

Configuration comes from the environment:
  CRONOS_PLATFORM_API_KEY   API key from the developer platform dashboard
  CRONOS_PLATFORM_CHAIN_ID  25 (Cronos EVM) or 338 (Cronos EVM Testnet)

Usage:
  python resolve_name.py alice.cro 0x1234...
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys

from cronos_platform import AsyncPlatformClient, ClientConfig, PlatformError, is_cronos_id


def log(section: str, msg: str, data: object = None) -> None:
    print(f"[{section}] {msg}")
    if data is not None:
        print(json.dumps(data, indent=2, default=str))


async def resolve(client: AsyncPlatformClient, value: str) -> None:
    try:
        if is_cronos_id(value):
            result = await client.cronosid.forward_resolve(value)
        else:
            result = await client.cronosid.reverse_resolve(value)
        log("cronosid", value, result.get("data"))
    except PlatformError as exc:
        log("cronosid", f"{value}: {exc}")


async def main() -> None:
    logging.basicConfig(level=logging.INFO)
    async with AsyncPlatformClient(ClientConfig.from_env()) as client:
        if not client.cronosid.is_supported():
            log("cronosid", "CronosId is not available on the configured chain")
            sys.exit(1)

        info, block = await asyncio.gather(client.network.info(), client.block.get_current_block())
        log("network", "Connected", info.get("data"))
        log("block", "Current block", block.get("data"))

        await asyncio.gather(*(resolve(client, value) for value in sys.argv[1:]))


if __name__ == "__main__":
    asyncio.run(main())
