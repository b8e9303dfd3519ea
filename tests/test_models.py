"""Tests for data models."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from tagsearch.models import CalendarWindow, ResponseEnvelope


def test_window_bounds():
    """Window covers the first instant of the month up to the next month."""
    window = CalendarWindow(year=2023, month=3)

    assert window.start == datetime(2023, 3, 1, tzinfo=timezone.utc)
    assert window.end == datetime(2023, 4, 1, tzinfo=timezone.utc)
    assert window.start_time == "2023-03-01T00:00:00Z"
    assert window.end_time == "2023-04-01T00:00:00Z"
    assert window.filename == "2023-03.csv"


def test_december_rolls_over_to_january():
    window = CalendarWindow(year=2022, month=12)

    assert window.next() == CalendarWindow(year=2023, month=1)
    assert window.end_time == "2023-01-01T00:00:00Z"


def test_window_rejects_invalid_month():
    with pytest.raises(ValidationError):
        CalendarWindow(year=2023, month=13)


def test_envelope_with_items_and_meta():
    envelope = ResponseEnvelope.model_validate(
        {
            "data": [
                {
                    "id": "1",
                    "created_at": "2023-01-01T00:00:01.000Z",
                    "text": "hello",
                    "edit_history_tweet_ids": ["1"],
                    "lang": "en",
                }
            ],
            "meta": {"newest_id": "1", "oldest_id": "1", "result_count": 1, "next_token": "abc"},
        }
    )

    assert len(envelope.items) == 1
    assert envelope.items[0].to_row() == ("1", "2023-01-01T00:00:01.000Z", "hello")
    assert envelope.pagination.result_count == 1
    assert envelope.next_cursor == "abc"


def test_envelope_fields_are_independently_optional():
    """Missing data or meta blocks parse without error."""
    empty = ResponseEnvelope.model_validate({})
    assert empty.items is None
    assert empty.next_cursor == ""

    cursor_only = ResponseEnvelope.model_validate({"meta": {"result_count": 0, "next_token": "X"}})
    assert cursor_only.items is None
    assert cursor_only.next_cursor == "X"


def test_meta_without_next_token_ends_pagination():
    envelope = ResponseEnvelope.model_validate({"meta": {"result_count": 3}})

    assert envelope.pagination is not None
    assert envelope.next_cursor == ""
