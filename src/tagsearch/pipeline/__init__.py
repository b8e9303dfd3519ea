"""Pipeline module for tagsearch."""

from .range_scheduler import RangeScheduler, iter_windows, parse_yyyymm
from .rate_limiter import RateLimiter
from .runner import run_tag_fetch
from .window_fetcher import WindowFetcher

__all__ = [
    "RangeScheduler",
    "RateLimiter",
    "WindowFetcher",
    "iter_windows",
    "parse_yyyymm",
    "run_tag_fetch",
]
