"""Per-window CSV output."""

import csv
import logging
from pathlib import Path
from typing import Iterable, Optional, TextIO

from ..models import CalendarWindow, ResultItem

logger = logging.getLogger(__name__)


class CsvSink:
    """Append-only CSV file holding the results of one calendar window.

    Rows are ``(id, created_at, text)`` with no header. The file is truncated
    when opened, so re-running a window replaces its previous output.
    """

    def __init__(self, path: Path):
        """Initialize sink.

        Args:
            path: Destination CSV file
        """
        self.path = path
        self.rows_written = 0
        self._file: Optional[TextIO] = None
        self._writer = None

    @classmethod
    def for_window(cls, window: CalendarWindow, output_dir: Path) -> "CsvSink":
        """Create the sink for a window, named ``{year}-{month:02d}.csv``."""
        return cls(Path(output_dir) / window.filename)

    def open(self) -> None:
        """Create (or truncate) the destination file."""
        if self._file is not None:
            raise RuntimeError(f"Sink already open: {self.path}")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.path, "w", newline="", encoding="utf-8")
        self._writer = csv.writer(self._file)
        logger.debug(f"Opened {self.path}")

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
            self._writer = None

    def __enter__(self) -> "CsvSink":
        self.open()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def write_items(self, items: Iterable[ResultItem]) -> int:
        """Append one row per item in order, then flush.

        Args:
            items: Results from one page

        Returns:
            Number of rows written
        """
        if self._writer is None:
            raise RuntimeError(f"Sink is not open: {self.path}")

        count = 0
        for item in items:
            self._writer.writerow(item.to_row())
            count += 1

        self._file.flush()
        self.rows_written += count
        return count
