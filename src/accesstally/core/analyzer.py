"""Access analyzer: hour, day and month histograms over an entry source."""

import logging
import os
from collections.abc import Iterable

from accesstally.core.calendar import HOURS_PER_DAY, MAX_DAY_OF_MONTH, MONTHS_PER_YEAR
from accesstally.core.exceptions import InitializationError, UninitializedHistogramError
from accesstally.core.histogram import Histogram
from accesstally.core.ports import EntrySourcePort

logger = logging.getLogger(__name__)

HISTOGRAM_NAMES = ("hour", "day", "month")

# Valid values for the out_of_range keyword
OUT_OF_RANGE_POLICIES = {"raise", "wrap"}


def _allocate(name: str) -> Histogram:
    if name == "hour":
        return Histogram("hour", HOURS_PER_DAY)
    if name == "day":
        return Histogram("day", MAX_DAY_OF_MONTH, first=1)
    return Histogram("month", MONTHS_PER_YEAR)


def _open_source(source: EntrySourcePort | str | os.PathLike[str]) -> EntrySourcePort:
    if isinstance(source, (str, os.PathLike)):
        from accesstally.adapters.sources.logfile import LogfileReader

        return LogfileReader(source)
    if not isinstance(source, EntrySourcePort):
        raise InitializationError(
            f"expected a file path or an entry source, got {type(source).__name__}"
        )
    return source


class LogAnalyzer:
    """Analyze web accesses by hour of day, day of month and month of year.

    Every accumulation pass drains the same source cursor. Once one pass
    has run, the others see an exhausted source and count nothing; call
    reset_source() between passes, or use analyze_all_data() to fill every
    histogram in one pass.

    Example:
        ```python
        analyzer = LogAnalyzer("weblog.txt")
        analyzer.analyze_all_data()
        analyzer.busiest_hour()
        ```
    """

    def __init__(
        self,
        source: EntrySourcePort | str | os.PathLike[str],
        *,
        track: Iterable[str] = HISTOGRAM_NAMES,
        out_of_range: str = "raise",
    ) -> None:
        """Bind the analyzer to an entry source and allocate its histograms.

        Args:
            source: An entry source, or the path of a log file to read with
                LogfileReader.
            track: Histograms to allocate. Queries against any other
                histogram raise UninitializedHistogramError.
            out_of_range: "raise" to fail with OutOfRangeError on an entry
                field outside its domain, "wrap" to coerce it by modulo.

        Raises:
            InitializationError: If the source cannot be opened.
            ValueError: If track or out_of_range is not recognised.
        """
        if out_of_range not in OUT_OF_RANGE_POLICIES:
            raise ValueError(f"unknown out_of_range policy: {out_of_range!r}")
        tracked = set(track)
        unknown = tracked.difference(HISTOGRAM_NAMES)
        if unknown:
            raise ValueError(f"unknown histograms: {', '.join(sorted(unknown))}")

        self._wrap = out_of_range == "wrap"
        self._histograms: dict[str, Histogram | None] = {
            name: _allocate(name) if name in tracked else None
            for name in HISTOGRAM_NAMES
        }
        self._source = _open_source(source)

    def _histogram(self, name: str) -> Histogram:
        histogram = self._histograms[name]
        if histogram is None:
            raise UninitializedHistogramError(name)
        return histogram

    def _drain(self, names: tuple[str, ...]) -> None:
        histograms = [(name, self._histogram(name)) for name in names]
        consumed = 0
        while self._source.has_next():
            entry = self._source.next()
            # Every field is checked before any histogram is touched.
            slots = [
                (histogram, histogram.slot_for(getattr(entry, name), self._wrap))
                for name, histogram in histograms
            ]
            for histogram, slot in slots:
                histogram.increment(slot)
            consumed += 1
        logger.debug("Accumulated %d entries into %s", consumed, ", ".join(names))

    def analyze_hourly_data(self) -> None:
        """Count the remaining entries of the source by hour."""
        self._drain(("hour",))

    def analyze_daily_data(self) -> None:
        """Count the remaining entries of the source by day of month."""
        self._drain(("day",))

    def analyze_monthly_data(self) -> None:
        """Count the remaining entries of the source by month."""
        self._drain(("month",))

    def analyze_all_data(self) -> None:
        """Count the remaining entries into every tracked histogram at once."""
        names = tuple(n for n in HISTOGRAM_NAMES if self._histograms[n] is not None)
        self._drain(names)

    def reset_source(self) -> None:
        """Rewind the source so another pass sees every entry again."""
        self._source.reset()

    @property
    def hour_counts(self) -> tuple[int, ...]:
        """Counts for hours 0-23."""
        return self._histogram("hour").counts

    @property
    def day_counts(self) -> tuple[int, ...]:
        """Counts for days 1-31; element 0 is the 1st."""
        return self._histogram("day").counts

    @property
    def month_counts(self) -> tuple[int, ...]:
        """Counts for months 0-11; element 0 is January."""
        return self._histogram("month").counts

    def number_of_accesses(self) -> int:
        """Return the total of the hourly counts."""
        return self._histogram("hour").total()

    def busiest_hour(self) -> int:
        """Return the hour with the most accesses; the earliest wins ties."""
        return self._histogram("hour").busiest()

    def quietest_hour(self) -> int:
        """Return the hour with the fewest accesses; the earliest wins ties."""
        return self._histogram("hour").quietest()

    def busiest_two_hour(self) -> int:
        """Return the starting hour of the busiest two-hour period.

        The period starting at 23 covers 23:00 and 00:00.
        """
        return self._histogram("hour").busiest_window(2)

    def busiest_day(self) -> int:
        """Return the day of the month (1-31) with the most accesses."""
        return self._histogram("day").busiest()

    def quietest_day(self) -> int:
        """Return the day of the month (1-31) with the fewest accesses."""
        return self._histogram("day").quietest()

    def busiest_month(self) -> int:
        """Return the month index (0 for January) with the most accesses."""
        return self._histogram("month").busiest()

    def quietest_month(self) -> int:
        """Return the month index (0 for January) with the fewest accesses."""
        return self._histogram("month").quietest()

    def summary(self) -> dict[str, int]:
        """Collect every statistic available from the tracked histograms."""
        result: dict[str, int] = {}
        if self._histograms["hour"] is not None:
            result["number_of_accesses"] = self.number_of_accesses()
            result["busiest_hour"] = self.busiest_hour()
            result["quietest_hour"] = self.quietest_hour()
            result["busiest_two_hour"] = self.busiest_two_hour()
        if self._histograms["day"] is not None:
            result["busiest_day"] = self.busiest_day()
            result["quietest_day"] = self.quietest_day()
        if self._histograms["month"] is not None:
            result["busiest_month"] = self.busiest_month()
            result["quietest_month"] = self.quietest_month()
        return result

    def histograms(self) -> list[Histogram]:
        """Return the tracked histograms in hour, day, month order."""
        return [h for h in self._histograms.values() if h is not None]

    def print_hourly_counts(self) -> None:
        """Print the hourly counts set by a prior analyze_hourly_data()."""
        histogram = self._histogram("hour")
        print("Hr: Count")
        for hour, count in enumerate(histogram.counts):
            print(f"{hour}: {count}")

    def print_data(self) -> None:
        """Print the entries held by the source."""
        self._source.print_data()
