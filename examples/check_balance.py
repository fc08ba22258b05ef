#!/usr/bin/env python3
"""Quick helper: check a wallet's native balance from the command line."""

from __future__ import annotations

import sys

from cronos_platform import ClientConfig, PlatformClient, PlatformError


def main() -> None:
    if len(sys.argv) < 2:
        print("usage: check_balance.py <wallet-address>", file=sys.stderr)
        sys.exit(2)

    with PlatformClient(ClientConfig.from_env()) as client:
        try:
            balance = client.wallet.balance(sys.argv[1])
            print(f"Balance : {balance['data']['balance']}")
        except PlatformError as exc:
            print(f"Error ({exc.status}): {exc}", file=sys.stderr)
            sys.exit(1)


if __name__ == "__main__":
    main()
