"""Python logging handler adapter for accesstally.

This adapter lets a running web server feed the analyzer directly: attach
the handler to the server's access logger and every record becomes a
LogEntry on an in-memory entry source.
"""

import logging
import time

from accesstally.adapters.sources.in_memory import InMemoryEntrySource
from accesstally.core.models import LogEntry


class AccessLogHandler(logging.Handler):
    """Logging handler that records each log record as an access.

    The entry's hour, day and month come from the record's creation time
    in local time. The message itself is not inspected.

    Example:
        ```python
        from accesstally import AccessLogHandler, LogAnalyzer

        handler = AccessLogHandler()
        logging.getLogger("uvicorn.access").addHandler(handler)
        ...
        analyzer = LogAnalyzer(handler.source)
        analyzer.analyze_all_data()
        ```
    """

    def __init__(
        self,
        source: InMemoryEntrySource | None = None,
        level: int = logging.NOTSET,
    ) -> None:
        """Initialize the handler with the source entries are appended to.

        Args:
            source: Entry source to append to. A new empty one is created
                when omitted.
            level: Minimum record level to count.
        """
        super().__init__(level)
        self.source = source if source is not None else InMemoryEntrySource()

    def emit(self, record: logging.LogRecord) -> None:
        """Append an entry for the record's creation time.

        Args:
            record: The log record to emit.
        """
        try:
            created = time.localtime(record.created)
            entry = LogEntry(
                hour=created.tm_hour,
                day=created.tm_mday,
                month=created.tm_mon - 1,
                year=created.tm_year,
                minute=created.tm_min,
            )
            self.source.append(entry)
        except Exception:
            self.handleError(record)
