"""Core domain models for access log analysis."""

from dataclasses import dataclass

from accesstally.core.calendar import DAYS_PER_MONTH, MONTHS_PER_YEAR, determine_month
from accesstally.core.exceptions import OutOfRangeError


@dataclass(frozen=True)
class LogEntry:
    """A single parsed web-server access.

    Attributes:
        hour: Hour of the day (0-23).
        day: Day of the month (1-31).
        month: Month index (0-11, 0 is January).
        year: Calendar year, informational only.
        minute: Minute of the hour, informational only.
    """

    hour: int
    day: int
    month: int
    year: int = 0
    minute: int = 0

    @classmethod
    def from_day_of_year(cls, hour: int, day_of_year: int) -> "LogEntry":
        """Build an entry from a 1-based day of the year.

        Uses the 30-day month model, so day 31 is the 1st of month 1.

        Raises:
            OutOfRangeError: If day_of_year is outside 1-360.
        """
        last = DAYS_PER_MONTH * MONTHS_PER_YEAR
        if not 1 <= day_of_year <= last:
            raise OutOfRangeError("day_of_year", day_of_year, 1, last)
        month = determine_month(day_of_year)
        day = day_of_year - month * DAYS_PER_MONTH
        return cls(hour=hour, day=day, month=month)

    def __str__(self) -> str:
        return (
            f"{self.year:04d} {self.month + 1:02d} {self.day:02d} "
            f"{self.hour:02d} {self.minute:02d}"
        )
