"""Hour, day and month access histograms for web-server logs."""

from accesstally.adapters.logging import AccessLogHandler
from accesstally.adapters.sources import InMemoryEntrySource, LogfileReader
from accesstally.core.analyzer import LogAnalyzer
from accesstally.core.calendar import determine_month
from accesstally.core.exceptions import (
    AccessTallyError,
    ExhaustedError,
    InitializationError,
    OutOfRangeError,
    UninitializedHistogramError,
)
from accesstally.core.models import LogEntry
from accesstally.core.ports import EntrySourcePort

__all__ = [
    "AccessLogHandler",
    "AccessTallyError",
    "EntrySourcePort",
    "ExhaustedError",
    "InMemoryEntrySource",
    "InitializationError",
    "LogAnalyzer",
    "LogEntry",
    "LogfileReader",
    "OutOfRangeError",
    "UninitializedHistogramError",
    "determine_month",
]
