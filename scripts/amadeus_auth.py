#!/usr/bin/env python
from __future__ import annotations

import argparse
import json

from amadeus_client import Client


def main() -> int:
    parser = argparse.ArgumentParser(description="Fetch an Amadeus access token with client credentials")
    parser.add_argument(
        "--hostname",
        choices=["test", "production"],
        default=None,
        help="API environment (defaults to $AMADEUS_HOSTNAME or test)",
    )
    args = parser.parse_args()

    overrides = {"hostname": args.hostname} if args.hostname else {}
    client = Client.from_env(**overrides)
    token = client.access_token.get_bearer_token()
    print(
        json.dumps(
            {
                "ok": True,
                "host": client.configuration.host,
                "token_prefix": token[:8] + "...",
                "len": len(token),
            }
        )
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
