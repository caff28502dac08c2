#!/usr/bin/env python3
"""Example CLI that fetches and displays contract and bigmap data."""

import argparse
import asyncio
import json
import logging
import os
import sys

from tezrpc.block import parse_block_id
from tezrpc.client import Client
from tezrpc.config import RPC_URLS
from tezrpc.rpc import new_rpc_client
from tezrpc.tezos import Address


async def run(args: argparse.Namespace) -> None:
    url = os.environ.get("TEZOS_RPC_URL", RPC_URLS[args.env])
    block = parse_block_id(args.block)
    addr = Address.from_string(args.contract)

    print(f"Fetching contract {addr} at {block} from {url}...\n")

    async with Client(new_rpc_client(url)) as client:
        try:
            balance = await client.get_contract_balance(addr, block)
        except Exception as e:
            print(f"Error fetching balance: {e}")
            sys.exit(1)

        print("=== Contract ===")
        print(f"Address:   {addr} ({addr.kind})")
        print(f"Balance:   {balance / 1_000_000:.6f} tez ({balance} mutez)")
        print()

        if addr.is_contract:
            try:
                storage = await client.get_contract_storage(addr, block)
                print("=== Storage ===")
                print(json.dumps(storage.to_json(), indent=2))
            except Exception as e:
                print("=== Storage ===")
                print(f"  Error: {e}")
            print()

            try:
                eps = await client.get_contract_entrypoints(addr)
                print(f"=== Entrypoints ({len(eps)}) ===")
                for name, typ in sorted(eps.items()):
                    print(f"  {name}: {json.dumps(typ.to_json())}")
            except Exception as e:
                print("=== Entrypoints ===")
                print(f"  Error: {e}")
            print()

        for bigmap in args.bigmap:
            try:
                info = await client.get_bigmap_info(bigmap, block)
                keys = await client.get_bigmap_keys(bigmap, block)
                print(f"=== Bigmap {bigmap} ===")
                print(f"Key Type:     {json.dumps(info.key_type.to_json())}")
                print(f"Value Type:   {json.dumps(info.value_type.to_json())}")
                print(f"Total Bytes:  {info.total_bytes}")
                print(f"Known Keys:   {len(keys)}")
                for key in keys[:5]:
                    value = await client.get_bigmap_value(bigmap, key, block)
                    print(f"  {key}: {json.dumps(value.to_json())}")
                if len(keys) > 5:
                    print(f"  ... and {len(keys) - 5} more")
            except Exception as e:
                print(f"=== Bigmap {bigmap} ===")
                print(f"  Error: {e}")
            print()

    print("Done.")


def main() -> None:
    parser = argparse.ArgumentParser(description="Fetch contract and bigmap data")
    parser.add_argument("contract", help="Contract or account address")
    parser.add_argument(
        "--env",
        default="mainnet",
        choices=sorted(RPC_URLS),
        help="Environment to connect to",
    )
    parser.add_argument(
        "--block",
        default="head",
        help="Block to query: head, genesis, a level or a block hash",
    )
    parser.add_argument(
        "--bigmap",
        type=int,
        action="append",
        default=[],
        help="Bigmap id to inspect (repeatable)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log requests")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    asyncio.run(run(args))


if __name__ == "__main__":
    main()
