"""CLI entry point for contact acquisition.

Reads CSV text from stdin and prints the India contacts as a JSON array.

Usage:
    python -m scripts.acquire_data [--on-malformed skip|raise] < contacts.csv
"""

import argparse
import json
import logging
import os
import sys

from acquisition import MalformedRowError, MalformedRowPolicy, acquire_data

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Extract India contacts from CSV text on stdin")
    parser.add_argument(
        "--on-malformed",
        choices=[policy.value for policy in MalformedRowPolicy],
        default=os.environ.get("ACQUIRE_ON_MALFORMED", MalformedRowPolicy.SKIP.value),
        help="Skip or fail on rows without exactly three fields (env: ACQUIRE_ON_MALFORMED)",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        contacts = acquire_data(sys.stdin.read(), args.on_malformed)
    except MalformedRowError as e:
        logger.error("%s. Use --on-malformed skip to ignore it.", e)
        sys.exit(1)

    logger.info("Found %d contacts", len(contacts))
    json.dump(contacts, sys.stdout, indent=2)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
