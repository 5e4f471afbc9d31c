"""
CLI for checking object locations.

Usage:
  python -m object_location parse my-bucket/audio/take.wav [more ...] [--env-file .env]
  object-location parse my-bucket/audio/take.wav

Prints one JSON object per source. Exit status is 0 when every source parsed,
1 when any failed, 2 on an unknown subcommand.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from object_location.config import get_settings
from object_location.location import try_parse
from object_location.logging_config import configure_logging


def _describe(source: str) -> dict[str, object]:
    result = try_parse(source)
    if not result.success:
        return {"source": source, "success": False}
    location = result.value
    return {
        "source": source,
        "success": True,
        **location.model_dump(),
        "location": str(location),
    }


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Parse bucket/key object locations and print their parts as JSON"
    )
    parser.add_argument("subcommand", help="Subcommand (parse)")
    parser.add_argument("sources", nargs="*", help="Locations, e.g. bucket/folder/name.ext")
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Path to .env to load before reading OBJECT_LOCATION_* settings",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override OBJECT_LOCATION_LOG_LEVEL (default: WARNING)",
    )
    args = parser.parse_intermixed_args(argv)

    if args.subcommand != "parse":
        print(f"Unknown subcommand: {args.subcommand}", file=sys.stderr)
        return 2

    settings = get_settings(env_file=args.env_file, log_level=args.log_level)
    configure_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    failed = 0
    for source in args.sources:
        described = _describe(source)
        if not described["success"]:
            failed += 1
        print(json.dumps(described))

    if failed:
        logger.info("%d of %d locations could not be parsed", failed, len(args.sources))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
