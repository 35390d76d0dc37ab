"""CLI job to run a single ZIP search and print the JSON payload."""

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from solar_finder.core.errors import GeocodeFailed, InvalidInput
from solar_finder.search.query import DEFAULT_LIMIT, DEFAULT_RADIUS_MILES, build_query
from solar_finder.search.service import build_search_service

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find top-rated solar electricians near a U.S. ZIP code.")
    parser.add_argument("code", help="5-digit U.S. ZIP code, e.g. 94103")
    parser.add_argument("--radius-miles", dest="radius_miles", default=DEFAULT_RADIUS_MILES, help="Search radius in miles")
    parser.add_argument("--limit", dest="limit", default=DEFAULT_LIMIT, help="Maximum results (capped at 50)")
    return parser


def run_search(code: str, radius_miles=None, limit=None, service=None) -> dict:
    query = build_query(code, radius_miles, limit)
    service = service or build_search_service()
    return service.execute(query).to_dict()


def main(argv: Optional[Sequence[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s - %(message)s")
    args = build_parser().parse_args(argv)

    try:
        payload = run_search(args.code, args.radius_miles, args.limit)
    except InvalidInput as exc:
        logger.error("Invalid input: %s", exc)
        return 2
    except GeocodeFailed as exc:
        logger.error("Geocoding failed: %s", exc)
        return 1

    json.dump(payload, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
