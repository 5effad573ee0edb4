"""Command line entry point.

Usage:
    landscout "Seattle, WA"
    landscout "Austin, TX" --output data/austin.csv --max-listings 5
    python -m landscout.cli --mock
"""

import argparse
import asyncio
import logging
import sys

from landscout.config import Settings, settings
from landscout.runner import run


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or greater, got {value}")
    return number


def build_settings(args: argparse.Namespace, base: Settings = settings) -> Settings:
    overrides = {}
    if args.output:
        overrides["output_file"] = args.output
    if args.mock:
        overrides["use_mock_data"] = True
    if args.max_listings is not None:
        overrides["max_listings"] = args.max_listings
    if args.log_level:
        overrides["log_level"] = args.log_level
    return base.model_copy(update=overrides)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Collect land listings and enrich them with AI zoning/market estimates"
    )
    parser.add_argument("location", nargs="?", help="Location to search (default: DEFAULT_LOCATION)")
    parser.add_argument("--output", help="CSV output path (default: OUTPUT_FILE)")
    parser.add_argument("--mock", action="store_true", help="Use mock listings if no live listings are found")
    parser.add_argument("--max-listings", type=non_negative_int, help="Only enrich the first N listings")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    config = build_settings(args)
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        asyncio.run(run(config, args.location))
    except Exception:
        logging.getLogger(__name__).exception("Error in main process")
        return 1
    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
