#!/usr/bin/env python3
"""
Run the news pipeline once and print the result:
1. Fetch the listing page and discover article links
2. Extract a short excerpt from each article
3. Render the items to the terminal (or as JSON)
"""

import argparse
import logging
import sys
from typing import List, Optional

from iris_news.ingestion.discoverer import LinkDiscoverer
from iris_news.ingestion.models import NewsItem
from iris_news.report import render_items, render_json
from iris_news.utils.config import load_config, setup_logging


logger = logging.getLogger(__name__)


def run_news_routine(config: dict, listing_url: Optional[str] = None) -> List[NewsItem]:
    discoverer = LinkDiscoverer(config)
    items = discoverer.discover(listing_url)
    logger.info(f"Pipeline finished with {len(items)} items")
    return items


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Fetch the latest IRIS news articles and their content."
    )
    parser.add_argument(
        "--url",
        help="Listing page to start from (default: listing_url from the config)"
    )
    parser.add_argument(
        "--config",
        help="Path to an alternative config.yaml"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the items as JSON instead of rendering them"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    config = load_config(args.config)
    setup_logging(debug=args.verbose or config.get("debug", False))

    items = run_news_routine(config, args.url)

    if args.json:
        print(render_json(items))
    else:
        render_items(items)
    return 0


if __name__ == "__main__":
    sys.exit(main())
