"""Pagination over a single calendar window."""

import asyncio
import logging
from pathlib import Path
from typing import Awaitable, Callable, Optional

from ..models import CalendarWindow, WindowResult
from ..output import CsvSink
from ..search_client import SearchClient

logger = logging.getLogger(__name__)


class WindowFetcher:
    """Drains every page of one window into that window's CSV sink."""

    def __init__(
        self,
        client: SearchClient,
        query: str,
        output_dir: Path = Path("."),
        page_delay: float = 1.0,
        sink_factory: Optional[Callable[[CalendarWindow], CsvSink]] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """Initialize window fetcher.

        Args:
            client: Search API client
            query: Escaped search term sent with every request
            output_dir: Directory receiving the per-month CSV files
            page_delay: Seconds to pause before every page after the first
            sink_factory: Builds the sink for a window (defaults to CSV in output_dir)
            sleep: Coroutine used for the inter-page pause
        """
        self.client = client
        self.query = query
        self.output_dir = Path(output_dir)
        self.page_delay = page_delay
        self.sink_factory = sink_factory or (
            lambda window: CsvSink.for_window(window, self.output_dir)
        )
        self._sleep = sleep

    async def fetch_window(self, window: CalendarWindow) -> WindowResult:
        """Fetch all pages for a window, writing each page as it arrives.

        Args:
            window: Calendar month to fetch

        Returns:
            Page and item counts for the window
        """
        start_time = window.start_time
        end_time = window.end_time
        logger.info(f"Fetching {window} ({start_time} -> {end_time})")

        sink = self.sink_factory(window)
        result = WindowResult(window=window, path=sink.path)

        with sink:
            cursor = ""
            while True:
                if result.pages > 0:
                    await self._sleep(self.page_delay)

                envelope = await self.client.search(self.query, start_time, end_time, cursor)
                result.pages += 1

                if envelope.items:
                    result.items += sink.write_items(envelope.items)
                logger.debug(
                    f"{window} page {result.pages}: {len(envelope.items or [])} items"
                )

                cursor = envelope.next_cursor
                if not cursor:
                    break

        logger.info(
            f"Finished fetching {window}: {result.items} items in {result.pages} pages"
        )
        return result
