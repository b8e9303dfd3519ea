"""Tag fetch pipeline orchestration."""

import logging
from typing import Optional

import httpx

from ..config import Settings
from ..search_client import SearchClient
from .range_scheduler import RangeScheduler
from .rate_limiter import RateLimiter

logger = logging.getLogger(__name__)


async def run_tag_fetch(
    settings: Settings,
    tag: str,
    from_date: int,
    end_date: int,
    client: Optional[httpx.AsyncClient] = None,
) -> dict[str, int]:
    """Run the month-by-month tag fetch.

    Steps:
    1. Validate credentials and build the rate limiter
    2. Fetch each month of the range into its own CSV file
    3. Report totals

    Args:
        settings: Application settings
        tag: Raw search tag
        from_date: First month as ``YYYYMM``
        end_date: Last month (inclusive) as ``YYYYMM``
        client: Optional HTTP client, mainly for tests

    Returns:
        Statistics dict with counts
    """
    logger.info("=" * 60)
    logger.info(f"Starting tag fetch for #{tag.lstrip('#')}: {from_date} -> {end_date}")
    logger.info(f"Output directory: {settings.output_dir}")
    logger.info("=" * 60)

    rate_limiter = RateLimiter(
        capacity=settings.rate_limit_capacity,
        refill=settings.rate_limit_refill,
        interval=settings.rate_limit_interval_seconds,
    )

    stats = {
        "windows": 0,
        "pages": 0,
        "items": 0,
    }

    try:
        async with SearchClient(settings, rate_limiter, client=client) as search_client:
            scheduler = RangeScheduler(
                search_client,
                output_dir=settings.output_dir,
                page_delay=settings.page_delay_seconds,
            )
            results = await scheduler.run(tag, from_date, end_date)

    except Exception as e:
        logger.error(f"Tag fetch failed: {e}", exc_info=True)
        raise

    for result in results:
        stats["windows"] += 1
        stats["pages"] += result.pages
        stats["items"] += result.items
        logger.info(f"{result.path}: {result.items} rows")

    logger.info("=" * 60)
    logger.info("Tag fetch completed successfully!")
    logger.info("=" * 60)
    logger.info(f"Months fetched:  {stats['windows']}")
    logger.info(f"Pages fetched:   {stats['pages']}")
    logger.info(f"Items written:   {stats['items']}")
    logger.info("=" * 60)

    return stats
