"""Command-line entry point for the city catalog."""

import argparse
import json
import sys
from typing import List, Optional, Sequence

import pandas as pd

from src.data.catalog import catalog
from src.data.models import CityRecord
from src.data.quality import CatalogQualityChecker
from src.data.sampling import InvalidSampleSizeError
from src.utils.logger import setup_logger

logger = setup_logger(__name__)


def print_cities(cities: Sequence[CityRecord], output_format: str = "json") -> None:
    """Print cities as JSON lines or as a table."""
    if output_format == "table":
        df = pd.DataFrame([city.to_dict() for city in cities])
        print(df.to_string(index=False) if not df.empty else "(no cities)")
        return
    for city in cities:
        print(json.dumps(city.to_dict(), ensure_ascii=False))


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(description="Air quality city catalog")
    parser.add_argument(
        "--format",
        choices=["json", "table"],
        default="json",
        help="Output format (default: json)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List all cities")

    sample_parser = subparsers.add_parser("sample", help="Deterministic city sample")
    sample_parser.add_argument("size", type=int, help="Number of cities")

    lookup_parser = subparsers.add_parser("lookup", help="Look up a city by id")
    lookup_parser.add_argument("city_id", help="City id, e.g. delhi")

    subparsers.add_parser("tracked", help="Default tracked cities")

    search_parser = subparsers.add_parser("search", help="Search by name, country or region")
    search_parser.add_argument("query", nargs="*", help="Search keywords")
    search_parser.add_argument("--limit", type=int, default=None, help="Maximum results")

    subparsers.add_parser("validate", help="Run catalog integrity checks")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main function."""
    args = build_parser().parse_args(argv)

    if args.command == "list":
        print_cities(catalog.records, args.format)
    elif args.command == "sample":
        try:
            cities = catalog.sample(args.size)
        except InvalidSampleSizeError as e:
            logger.error(str(e))
            return 2
        print_cities(cities, args.format)
    elif args.command == "lookup":
        city = catalog.lookup(args.city_id)
        if city is None:
            logger.error(f"Unknown city id: {args.city_id}")
            return 1
        print_cities([city], args.format)
    elif args.command == "tracked":
        print_cities(catalog.resolve(catalog.default_tracked_ids), args.format)
    elif args.command == "search":
        print_cities(catalog.search(" ".join(args.query), limit=args.limit), args.format)
    elif args.command == "validate":
        report = CatalogQualityChecker().validate_catalog(catalog)
        print(json.dumps(report, indent=2, default=str))
        return 0 if report["valid"] else 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
