"""Log file entry source.

Reads two kinds of lines:

- numeric, ``year month day hour minute`` with a 1-based month, e.g.
  ``2024 03 30 14 05``;
- Common or Combined Log Format, using the bracketed request timestamp, e.g.
  ``127.0.0.1 - - [30/Mar/2024:14:05:09 +0000] "GET / HTTP/1.1" 200 512``.

Blank lines and lines starting with ``#`` are ignored. Anything else is
skipped with a warning.
"""

import datetime
import logging
import os
import re

from accesstally.adapters.sources.in_memory import InMemoryEntrySource
from accesstally.core.exceptions import InitializationError
from accesstally.core.models import LogEntry

logger = logging.getLogger(__name__)

NUMERIC_LINE_PATTERN = re.compile(
    r"^(?P<year>\d{4})\s+(?P<month>\d{1,2})\s+(?P<day>\d{1,2})"
    r"\s+(?P<hour>\d{1,2})\s+(?P<minute>\d{1,2})\s*$"
)
COMMON_LOG_TIME_PATTERN = re.compile(r"\[(?P<time>[^\]\s]+)(?:\s[^\]]*)?\]")


def parse_line(line: str) -> LogEntry | None:
    """Parse one log line into an entry.

    Returns:
        The entry, or None if the line is in neither supported format.
    """
    m = NUMERIC_LINE_PATTERN.match(line)
    if m:
        return LogEntry(
            hour=int(m["hour"]),
            day=int(m["day"]),
            month=int(m["month"]) - 1,
            year=int(m["year"]),
            minute=int(m["minute"]),
        )
    m = COMMON_LOG_TIME_PATTERN.search(line)
    if not m:
        return None
    try:
        dt = datetime.datetime.strptime(m["time"], "%d/%b/%Y:%H:%M:%S")
    except ValueError:
        return None
    return LogEntry(
        hour=dt.hour,
        day=dt.day,
        month=dt.month - 1,
        year=dt.year,
        minute=dt.minute,
    )


class LogfileReader(InMemoryEntrySource):
    """Entry source backed by a log file.

    The whole file is read and closed at construction, so reset() only
    rewinds the in-memory cursor and never reopens the file.

    Args:
        path: Path of the log file.

    Raises:
        InitializationError: If the file cannot be opened or decoded.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        super().__init__()
        self.path = os.fspath(path)
        self.skipped = 0
        try:
            with open(self.path, encoding="utf-8") as f:
                for lineno, raw in enumerate(f, start=1):
                    self._read_line(lineno, raw)
        except (OSError, UnicodeDecodeError) as e:
            raise InitializationError(f"cannot read log file {self.path}: {e}") from e
        logger.debug(
            "Read %d entries from %s (%d skipped)", len(self), self.path, self.skipped
        )

    def _read_line(self, lineno: int, raw: str) -> None:
        line = raw.strip()
        if not line or line.startswith("#"):
            return
        entry = parse_line(line)
        if entry is None:
            self.skipped += 1
            logger.warning("Skipping unrecognised line %d in %s", lineno, self.path)
            return
        self.append(entry)
