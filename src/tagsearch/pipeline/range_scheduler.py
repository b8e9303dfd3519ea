"""Month range decomposition and sequential window scheduling."""

import asyncio
import logging
from pathlib import Path
from typing import Awaitable, Callable, Iterator

from ..errors import ConfigurationError
from ..models import CalendarWindow, WindowResult
from ..search_client import SearchClient, escape_tag
from .window_fetcher import WindowFetcher

logger = logging.getLogger(__name__)


def parse_yyyymm(value: int) -> CalendarWindow:
    """Split a ``YYYYMM`` integer into a calendar window.

    Raises:
        ConfigurationError: If the month is outside 1-12 or the year is not positive
    """
    year, month = divmod(value, 100)
    if year < 1 or not 1 <= month <= 12:
        raise ConfigurationError(f"Invalid YYYYMM value: {value}")
    return CalendarWindow(year=year, month=month)


def iter_windows(from_yyyymm: int, to_yyyymm: int) -> Iterator[CalendarWindow]:
    """Yield every month from ``from_yyyymm`` to ``to_yyyymm`` inclusive, in order.

    Both bounds are validated before the first window is yielded; a reversed
    range is rejected rather than treated as empty.
    """
    first = parse_yyyymm(from_yyyymm)
    last = parse_yyyymm(to_yyyymm)
    if first.as_tuple() > last.as_tuple():
        raise ConfigurationError(
            f"Start month {from_yyyymm} is after end month {to_yyyymm}"
        )

    window = first
    while True:
        yield window
        if window == last:
            return
        window = window.next()


class RangeScheduler:
    """Runs a WindowFetcher once per month, strictly one after another."""

    def __init__(
        self,
        client: SearchClient,
        output_dir: Path = Path("."),
        page_delay: float = 1.0,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """Initialize scheduler.

        Args:
            client: Search API client shared by every window
            output_dir: Directory receiving the per-month CSV files
            page_delay: Seconds to pause between pages of a window
            sleep: Coroutine used for the inter-page pause
        """
        self.client = client
        self.output_dir = Path(output_dir)
        self.page_delay = page_delay
        self._sleep = sleep

    async def run(self, tag: str, from_yyyymm: int, to_yyyymm: int) -> list[WindowResult]:
        """Fetch every window in the range.

        Args:
            tag: Raw search tag, without the leading ``#``
            from_yyyymm: First month, e.g. 202301
            to_yyyymm: Last month (inclusive), e.g. 202312

        Returns:
            One result per window, in chronological order
        """
        windows = list(iter_windows(from_yyyymm, to_yyyymm))
        fetcher = WindowFetcher(
            self.client,
            escape_tag(tag),
            output_dir=self.output_dir,
            page_delay=self.page_delay,
            sleep=self._sleep,
        )
        logger.info(f"Current: {windows[0]}, end: {windows[-1]} ({len(windows)} months)")

        results = []
        for i, window in enumerate(windows):
            logger.info(f"Window {i+1}/{len(windows)}: {window}")
            results.append(await fetcher.fetch_window(window))

        return results
