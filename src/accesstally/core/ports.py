"""Port interface for entry sources.

The analyzer depends only on this protocol, not on where entries come from.
"""

from typing import Protocol, runtime_checkable

from accesstally.core.models import LogEntry


@runtime_checkable
class EntrySourcePort(Protocol):
    """Port for a forward-only cursor over parsed log entries.

    One cursor is shared by every accumulation pass bound to it, so a
    drained source yields nothing more until reset() is called.
    Examples: InMemoryEntrySource, LogfileReader.
    """

    def has_next(self) -> bool:
        """Return True if next() would return an entry."""
        ...

    def next(self) -> LogEntry:
        """Return the entry under the cursor and advance past it.

        Raises:
            ExhaustedError: If has_next() is False.
        """
        ...

    def reset(self) -> None:
        """Move the cursor back to the first entry."""
        ...

    def print_data(self) -> None:
        """Print every entry, one per line, without moving the cursor."""
        ...
