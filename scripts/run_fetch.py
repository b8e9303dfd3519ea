#!/usr/bin/env python
"""Fetch all results for a tag over a month range into per-month CSV files."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tagsearch.config import get_settings
from tagsearch.pipeline import run_tag_fetch


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Fetch tagged search results month by month")
    parser.add_argument("tag", help="Tag to search for, without the leading #")
    parser.add_argument("from_date", type=int, help="First month as YYYYMM")
    parser.add_argument("end_date", type=int, help="Last month (inclusive) as YYYYMM")
    parser.add_argument(
        "--token",
        help="Bearer token (defaults to BEARER_TOKEN from the environment)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        help="Directory for the CSV files (defaults to OUTPUT_DIR or the current directory)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    args = parser.parse_args()

    settings = get_settings()
    overrides = {}
    if args.token:
        overrides["bearer_token"] = args.token
    if args.output_dir:
        overrides["output_dir"] = args.output_dir
    if args.log_level:
        overrides["log_level"] = args.log_level
    if overrides:
        settings = settings.model_copy(update=overrides)

    # Setup logging
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    logger = logging.getLogger(__name__)

    try:
        asyncio.run(run_tag_fetch(settings, args.tag, args.from_date, args.end_date))

        logger.info("Fetch completed successfully")
        return 0

    except Exception as e:
        logger.error(f"Fetch failed: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
