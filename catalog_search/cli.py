# catalog_search/cli.py
from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional

from loguru import logger

from ._singletons import get_catalog_df
from .api import run_search
from .catalog_build import load_catalog_snapshot
from .config import MAX_QUERY_CHARS, RATING_MAX, RATING_MIN, SearchResponse
from .query_analysis import interpret


def _non_negative(value: str) -> float:
    v = float(value)
    if v < 0:
        raise argparse.ArgumentTypeError("must be >= 0")
    return v


def _rating(value: str) -> float:
    v = float(value)
    if not RATING_MIN <= v <= RATING_MAX:
        raise argparse.ArgumentTypeError(f"must be between {RATING_MIN} and {RATING_MAX}")
    return v


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="catalog-search",
        description="Filter and rank the product catalog with a free-text query.",
    )
    ap.add_argument("query", nargs="?", default="",
                    help='Free-text query, e.g. "cheap running shoes under $80"')
    ap.add_argument("--category", default=None, help="Exact category facet, e.g. Shoes")
    ap.add_argument("--max-price", type=_non_negative, default=None)
    ap.add_argument("--min-rating", type=_rating, default=None)
    ap.add_argument("--catalog", type=Path, default=None,
                    help="Alternative catalog JSON file")
    ap.add_argument("--explain", action="store_true",
                    help="Print the interpreted constraints before the results")
    ap.add_argument("--json", action="store_true", help="Emit the response as JSON")
    ap.add_argument("--verbose", action="store_true", help="Debug logging to stderr")
    return ap


def _print_results(response: SearchResponse) -> None:
    if not response.products:
        print("No products match your filters.")
        return
    for card in response.products:
        print(f"{card.price_label:>9}  {card.name}  [{card.category}]  {card.stars} {card.rating_label}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if len(args.query) > MAX_QUERY_CHARS:
        parser.error(f"query longer than {MAX_QUERY_CHARS} characters")

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "WARNING")

    catalog_df = load_catalog_snapshot(args.catalog) if args.catalog else get_catalog_df()

    if args.explain:
        print("Constraints: " + json.dumps(asdict(interpret(args.query))))

    response = run_search(
        args.query,
        catalog_df,
        category=args.category,
        max_price=args.max_price,
        min_rating=args.min_rating,
    )

    if args.json:
        print(response.model_dump_json(indent=2))
    else:
        _print_results(response)
    return 0


if __name__ == "__main__":
    sys.exit(main())
