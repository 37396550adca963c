#!/usr/bin/env python3
"""Rebuild src/crossname/chains/data/chains.json from the chainlist dataset."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import httpx

from crossname.chains.registry import ChainRegistry, evm_coin_type
from crossname.core.models import ChainInfo

logger = logging.getLogger("generate_chains")

REPO_ROOT = Path(__file__).resolve().parents[1]
OUT_PATH = REPO_ROOT / "src" / "crossname" / "chains" / "data" / "chains.json"
CHAINLIST_URL = "https://chainid.network/chains.json"

# Major chains by market cap, TVL and ecosystem importance
MAJOR_CHAIN_IDS = [
    1,  # ethereum
    137,  # polygon
    56,  # bnb
    43114,  # avalanche
    10,  # optimism (OP Mainnet)
    8453,  # base
    42161,  # arbitrum (Arbitrum One)
    1101,  # polygon zkEVM
    59144,  # linea
    7777777,  # zora
    534352,  # scroll
    42220,  # celo
]

# Non-EVM chains missing from chainlist; coin types are raw SLIP-44 values
MANUAL_CHAINS: list[dict[str, Any]] = [
    {
        "chainId": "solana",
        "shortName": "solana",
        "name": "Solana",
        "coinType": 501,
        "namespace": "solana",
        "reference": "5eykt4UsFv8P8NJdTREpY1vzqKqZKvdp",
    },
    {
        "chainId": "bitcoin",
        "shortName": "bitcoin",
        "name": "Bitcoin",
        "coinType": 0,
        "namespace": "bip122",
        "reference": "000000000019d6689c085ae165831e93",
    },
]


def fetch_chainlist(url: str, timeout: float) -> list[dict[str, Any]]:
    response = httpx.get(url, timeout=timeout, follow_redirects=True)
    response.raise_for_status()
    return response.json()


def build_entries(chainlist: list[dict[str, Any]], chain_ids: list[int]) -> list[dict[str, Any]]:
    """Select the requested chains and attach ENSIP-11 coin types and CAIP-2 fields."""
    by_id = {item["chainId"]: item for item in chainlist if "chainId" in item}
    missing = [chain_id for chain_id in chain_ids if chain_id not in by_id]
    if missing:
        raise SystemExit(f"Chains not found in chainlist: {missing}")

    entries = []
    for chain_id in chain_ids:
        item = by_id[chain_id]
        entries.append(
            {
                "chainId": chain_id,
                "shortName": item["shortName"].lower(),
                "name": item["name"],
                "coinType": evm_coin_type(chain_id),
                "namespace": "eip155",
                "reference": str(chain_id),
            }
        )
    return entries + MANUAL_CHAINS


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--url", default=CHAINLIST_URL, help="chainlist JSON URL")
    parser.add_argument("--out", type=Path, default=OUT_PATH, help="output file")
    parser.add_argument("--timeout", type=float, default=30.0)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    try:
        chainlist = fetch_chainlist(args.url, args.timeout)
    except httpx.HTTPError as e:
        logger.error("Failed to fetch %s: %s", args.url, e)
        return 1

    entries = build_entries(chainlist, MAJOR_CHAIN_IDS)
    # Validate before writing: entry shape and key uniqueness
    ChainRegistry(ChainInfo.model_validate(entry) for entry in entries)

    lines = ",\n".join("  " + json.dumps(entry) for entry in entries)
    args.out.write_text(f"[\n{lines}\n]\n", encoding="utf-8")
    logger.info("Wrote %d chains to %s", len(entries), args.out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
