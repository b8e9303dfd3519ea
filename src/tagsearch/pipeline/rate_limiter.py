"""Rate limiting utilities."""

import asyncio
import logging
import time
from typing import Awaitable, Callable, Optional

from ..errors import ConfigurationError

logger = logging.getLogger(__name__)


class RateLimiter:
    """Token bucket rate limiter with fixed-interval refill."""

    def __init__(
        self,
        capacity: int,
        refill: int,
        interval: float,
        initial: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """Initialize rate limiter.

        Args:
            capacity: Maximum number of tokens held
            refill: Tokens added at the end of every interval
            interval: Refill interval in seconds
            initial: Tokens available at start (defaults to capacity)
            clock: Monotonic time source
            sleep: Coroutine used to wait for the next refill
        """
        if capacity <= 0 or refill <= 0 or interval <= 0:
            raise ConfigurationError(
                f"Invalid rate limit: capacity={capacity} refill={refill} interval={interval}"
            )
        if initial is not None and initial < 0:
            raise ConfigurationError(f"Invalid initial token count: {initial}")

        self.capacity = capacity
        self.refill = refill
        self.interval = interval
        self.tokens = capacity if initial is None else min(initial, capacity)
        self._clock = clock
        self._sleep = sleep
        self.last_refill = clock()
        self.lock = asyncio.Lock()

    def _refill(self) -> None:
        """Add tokens for every interval boundary passed since the last refill."""
        elapsed = self._clock() - self.last_refill
        intervals = int(elapsed // self.interval)
        if intervals > 0:
            self.tokens = min(self.capacity, self.tokens + intervals * self.refill)
            self.last_refill += intervals * self.interval

    async def acquire(self) -> None:
        """Acquire permission to make a request (blocking)."""
        async with self.lock:
            while True:
                self._refill()

                if self.tokens >= 1:
                    self.tokens -= 1
                    return

                # Wait for the next interval boundary
                wait_time = max(0.0, self.last_refill + self.interval - self._clock())
                logger.info(f"Rate limit reached, waiting {wait_time:.1f}s for refill")
                await self._sleep(wait_time)
