#!/usr/bin/env python3
"""Command-line entry point: match a listings file against a product catalog.

Usage:
    product-matcher --products products.txt --listings listings.txt \\
        --results results.txt --unmatched unmatched.txt
"""
import argparse
import sys
import time
from typing import List, Optional

import structlog
from pydantic import ValidationError

from product_matcher.config import MatcherSettings, configure_logging, get_settings
from product_matcher.errors.exceptions import ConfigurationError, ProductMatcherError
from product_matcher.parsers.jsonl_parser import load_listings, load_products
from product_matcher.services.matching.matcher import HeuristicsMatcher
from product_matcher.writers.jsonl_writer import write_match_outputs

logger = structlog.get_logger(__name__)


def build_parser(settings: MatcherSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="product-matcher",
        description="Match product listings to catalog products using title heuristics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Use the default file names in the current directory
  product-matcher

  # Explicit inputs and outputs
  product-matcher --products data/products.txt --listings data/listings.txt \\
      --results out/results.txt --unmatched out/unmatched.txt

Every option also has a MATCH_* environment variable (e.g. MATCH_PRODUCTS_PATH).
        """
    )

    parser.add_argument(
        '--products',
        type=str,
        default=settings.products_path,
        help=f'Catalog file, one JSON product per line (default: {settings.products_path})'
    )
    parser.add_argument(
        '--listings',
        type=str,
        default=settings.listings_path,
        help=f'Listings file, one JSON listing per line (default: {settings.listings_path})'
    )
    parser.add_argument(
        '--results',
        type=str,
        default=settings.results_path,
        help=f'Output file for listings grouped by model (default: {settings.results_path})'
    )
    parser.add_argument(
        '--unmatched',
        type=str,
        default=settings.unmatched_path,
        help=f'Output file for unmatched listings (default: {settings.unmatched_path})'
    )
    parser.add_argument(
        '--lenient',
        action=argparse.BooleanOptionalAction,
        default=not settings.strict_records,
        help='Skip malformed input records instead of stopping'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=f'Logging level (default: {settings.log_level})'
    )

    return parser


def load_settings() -> MatcherSettings:
    """Load settings from the environment, reporting bad values as ConfigurationError."""
    try:
        return get_settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid MATCH_* configuration: {e}") from e


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the matcher."""
    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(f"\nError: {e.message}", file=sys.stderr)
        return 1

    args = build_parser(settings).parse_args(argv)
    configure_logging(args.log_level, settings.log_format)
    strict = not args.lenient

    try:
        products = load_products(args.products, encoding=settings.encoding, strict=strict)
        listings = load_listings(args.listings, encoding=settings.encoding, strict=strict)

        matcher = HeuristicsMatcher(products, max_window=settings.max_window_tokens)

        started = time.perf_counter()
        report = matcher.match_all(listings)
        duration = time.perf_counter() - started

        logger.info(
            "matching_finished",
            duration_seconds=round(duration, 3),
            matched=len(report.matched),
            unmatched=len(report.unmatched),
            total=report.total,
        )

        write_match_outputs(
            args.results,
            report.grouped_by_model(),
            args.unmatched,
            report.unmatched,
            encoding=settings.encoding,
        )
    except ProductMatcherError as e:
        print(f"\nError: {e.message}", file=sys.stderr)
        return 1

    print(f"Matching took {duration:.3f}s")
    print(f"Matched: {len(report.matched)}")
    print(f"Not Matched: {len(report.unmatched)}")
    print(f"Total: {report.total}")
    print(f"Results saved to {args.results}")
    print(f"Unmatched listings saved to {args.unmatched}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
