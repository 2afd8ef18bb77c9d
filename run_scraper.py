#!/usr/bin/env python3
"""
CLI script to fetch the data center page and print its locations as JSON.

With --file (-f) a saved copy of the page is parsed instead, so no
network access is needed.  URL, timeout and log level default to the
DATACENTER_* environment variables (a local .env file is loaded).
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
load_dotenv()

from datacenter_parser.config import Settings
from datacenter_parser.exceptions import DataCenterParserError
from datacenter_parser.main import DataCenterScraper


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Extract data center locations as JSON")
    parser.add_argument("--file", "-f", help="Parse a saved HTML page instead of fetching")
    parser.add_argument("--url", help="Page URL (default: DATACENTER_URL or built-in)")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument("--output", "-o", help="Output JSON file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    settings = Settings.from_env(
        url=args.url,
        timeout=args.timeout,
        log_level=logging.getLevelName(logging.DEBUG) if args.verbose else None
    )
    scraper = DataCenterScraper(settings=settings)

    try:
        if args.file:
            data_centers = scraper.parse_file(args.file)
        else:
            data_centers = scraper.scrape()
    except DataCenterParserError as e:
        print(f"✗ {type(e).__name__}: {e.message}", file=sys.stderr)
        return 1

    # ensure_ascii=False keeps non-ASCII city names readable
    output = json.dumps(
        [dc.model_dump(mode="json") for dc in data_centers],
        indent=2,
        ensure_ascii=False
    )

    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
        print(f"Saved {len(data_centers)} data centers to: {args.output}", file=sys.stderr)
    else:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
