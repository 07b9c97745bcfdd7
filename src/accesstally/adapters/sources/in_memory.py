"""In-memory entry source."""

from collections.abc import Iterable

from accesstally.core.exceptions import ExhaustedError
from accesstally.core.models import LogEntry


class InMemoryEntrySource:
    """In-memory implementation of EntrySourcePort.

    Holds entries in a list behind a cursor. Suitable for testing and for
    feeding entries collected elsewhere, e.g. by AccessLogHandler.
    """

    def __init__(self, entries: Iterable[LogEntry] = ()) -> None:
        self._entries: list[LogEntry] = list(entries)
        self._position = 0

    def __len__(self) -> int:
        return len(self._entries)

    def append(self, entry: LogEntry) -> None:
        """Add an entry after the last one."""
        self._entries.append(entry)

    def has_next(self) -> bool:
        return self._position < len(self._entries)

    def next(self) -> LogEntry:
        if not self.has_next():
            raise ExhaustedError("no more log entries")
        entry = self._entries[self._position]
        self._position += 1
        return entry

    def reset(self) -> None:
        self._position = 0

    def print_data(self) -> None:
        for entry in self._entries:
            print(entry)
