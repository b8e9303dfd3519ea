"""Output sinks for tagsearch."""

from .csv_sink import CsvSink

__all__ = [
    "CsvSink",
]
