"""Entry source adapters implementing EntrySourcePort."""

from accesstally.adapters.sources.in_memory import InMemoryEntrySource
from accesstally.adapters.sources.logfile import LogfileReader

__all__ = [
    "InMemoryEntrySource",
    "LogfileReader",
]
