#!/usr/bin/env python
from __future__ import annotations

import argparse
import logging
import sys

import pandas as pd

from amadeus_client import Client, NetworkError, Params, ResponseError


def parse_param(raw: str) -> tuple[str, str]:
    if "=" not in raw:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {raw!r}")
    key, value = raw.split("=", 1)
    return key, value


def fetch_rows(client: Client, path: str, params: Params, pages: int) -> list[dict]:
    """GET `path` and follow `next` links until `pages` pages have been read."""
    rows: list[dict] = []
    response = client.get(path, params)
    for page_no in range(pages):
        data = response.data
        rows.extend(data if isinstance(data, list) else [data] if data else [])
        if page_no + 1 >= pages:
            break
        response = client.next(response)
        if response is None:
            break
    return rows


def main() -> int:
    parser = argparse.ArgumentParser(description="Authenticated GET against the Amadeus API")
    parser.add_argument("path", help="API path, e.g. /v1/reference-data/locations")
    parser.add_argument(
        "-p",
        "--param",
        dest="params",
        action="append",
        type=parse_param,
        default=[],
        help="Query parameter KEY=VALUE (repeatable)",
    )
    parser.add_argument("--pages", type=int, default=1, help="Number of pages to read, following 'next' links")
    parser.add_argument("--limit", type=int, default=20, help="Rows to display")
    parser.add_argument("--debug", action="store_true", help="Log every request and response")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    overrides = {"log_level": "debug"} if args.debug else {}
    client = Client.from_env(**overrides)

    try:
        rows = fetch_rows(client, args.path, Params(dict(args.params)), args.pages)
    except NetworkError as e:
        print(f"Network failure: {e}", file=sys.stderr)
        return 2
    except ResponseError as e:
        print(f"API error {e.code}:\n{e.description()}", file=sys.stderr)
        return 1

    if not rows:
        print("No data returned")
        return 0

    df = pd.json_normalize(rows)
    if args.limit:
        print(df.head(args.limit).to_string(index=False))
    else:
        print(df.to_string(index=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
