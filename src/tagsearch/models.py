"""Pydantic models for tagsearch data structures."""

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

WIRE_TIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class CalendarWindow(BaseModel):
    """One calendar month used as a single fetch unit.

    The window covers the half-open interval ``[start, end)`` where ``end`` is
    the first instant of the following month.
    """

    model_config = ConfigDict(frozen=True)

    year: int = Field(ge=1)
    month: int = Field(ge=1, le=12)

    @property
    def start(self) -> datetime:
        """First instant of the month (UTC)."""
        return datetime(self.year, self.month, 1, tzinfo=timezone.utc)

    @property
    def end(self) -> datetime:
        """First instant of the next month (UTC), exclusive."""
        return self.next().start

    @property
    def start_time(self) -> str:
        return self.start.strftime(WIRE_TIME_FORMAT)

    @property
    def end_time(self) -> str:
        return self.end.strftime(WIRE_TIME_FORMAT)

    @property
    def filename(self) -> str:
        return f"{self.year}-{self.month:02d}.csv"

    def next(self) -> "CalendarWindow":
        """Get the window for the following month."""
        if self.month == 12:
            return CalendarWindow(year=self.year + 1, month=1)
        return CalendarWindow(year=self.year, month=self.month + 1)

    def as_tuple(self) -> tuple[int, int]:
        return (self.year, self.month)

    def __str__(self) -> str:
        return f"{self.year}-{self.month:02d}"


class ResultItem(BaseModel):
    """A single search result.

    Only ``id``, ``created_at`` and ``text`` are persisted.
    """

    model_config = ConfigDict(extra="ignore")

    id: str
    created_at: str
    text: str
    edit_history_tweet_ids: list[str] = Field(default_factory=list)

    def to_row(self) -> tuple[str, str, str]:
        return (self.id, self.created_at, self.text)


class Pagination(BaseModel):
    """Pagination metadata returned alongside a page of results."""

    model_config = ConfigDict(extra="ignore")

    next_token: str = ""
    result_count: Optional[int] = None
    newest_id: Optional[str] = None
    oldest_id: Optional[str] = None


class ResponseEnvelope(BaseModel):
    """Parsed search response.

    Both fields are optional and independent: a missing ``meta`` block ends
    the window even when ``data`` carried results.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    items: Optional[list[ResultItem]] = Field(default=None, alias="data")
    pagination: Optional[Pagination] = Field(default=None, alias="meta")

    @property
    def next_cursor(self) -> str:
        """Continuation token for the next page, empty when exhausted."""
        if self.pagination is None:
            return ""
        return self.pagination.next_token


class WindowResult(BaseModel):
    """Summary of one fully drained window."""

    window: CalendarWindow
    pages: int = 0
    items: int = 0
    path: Path
