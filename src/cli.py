"""Command line entry point for the Aave markets reader."""

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

from config.settings import get_settings
from src.data.pipeline import MarketsPipeline, UnknownChainError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="defi-markets",
        description="Print Aave v3 market data for a chain as JSON.",
    )
    parser.add_argument("chain_id", type=int, help="EVM chain id, e.g. 1 for Ethereum mainnet")
    parser.add_argument(
        "--reserves",
        action="store_true",
        help="print every formatted reserve instead of the active markets",
    )
    return parser


async def run(chain_id: int, reserves: bool = False) -> List[dict]:
    """Fetch markets (or formatted reserves) and return JSON-ready dicts."""
    pipeline = MarketsPipeline()
    if reserves:
        return [r.to_dict() for r in await pipeline.fetch_formatted_pool_reserves(chain_id)]
    return [m.to_dict() for m in await pipeline.fetch_markets_data(chain_id)]


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    try:
        rows = asyncio.run(run(args.chain_id, reserves=args.reserves))
    except UnknownChainError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    json.dump(rows, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
