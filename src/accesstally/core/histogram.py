"""Fixed-length counter arrays indexed by a bounded domain value."""

import sys

from accesstally.core.exceptions import OutOfRangeError


class Histogram:
    """Counts of entries per domain value.

    Values ``first`` through ``first + size - 1`` map onto ``size`` slots.
    Every query reports domain values, so a day histogram with ``first=1``
    answers with day numbers rather than slot numbers.

    Args:
        name: Field the histogram counts (used in error messages).
        size: Number of slots.
        first: Domain value stored in slot 0.
    """

    def __init__(self, name: str, size: int, first: int = 0) -> None:
        if size <= 0:
            raise ValueError("histogram size must be positive")
        self.name = name
        self.first = first
        self._counts: list[int] = [0] * size

    def __len__(self) -> int:
        return len(self._counts)

    def __getitem__(self, value: int) -> int:
        return self._counts[self._slot(value)]

    @property
    def last(self) -> int:
        return self.first + len(self._counts) - 1

    @property
    def counts(self) -> tuple[int, ...]:
        """Snapshot of the counters in slot order."""
        return tuple(self._counts)

    def _slot(self, value: int) -> int:
        if not self.first <= value <= self.last:
            raise OutOfRangeError(self.name, value, self.first, self.last)
        return value - self.first

    def wrap(self, value: int) -> int:
        """Coerce a value into the domain by modulo."""
        return (value - self.first) % len(self._counts) + self.first

    def slot_for(self, value: int, wrap: bool = False) -> int:
        """Return the slot value would be counted in, without counting it.

        Raises:
            OutOfRangeError: If value is outside the domain and wrap is False.
        """
        if wrap:
            value = self.wrap(value)
        return self._slot(value)

    def increment(self, slot: int) -> None:
        self._counts[slot] += 1

    def add(self, value: int, wrap: bool = False) -> None:
        """Count one occurrence of value.

        Raises:
            OutOfRangeError: If value is outside the domain and wrap is False.
        """
        self.increment(self.slot_for(value, wrap))

    def total(self) -> int:
        return sum(self._counts)

    def busiest(self) -> int:
        """Return the value with the highest count; the first one wins ties."""
        busiest = 0
        max_count = 0
        for slot, count in enumerate(self._counts):
            if count > max_count:
                max_count = count
                busiest = slot
        return busiest + self.first

    def quietest(self) -> int:
        """Return the value with the lowest count; the first one wins ties."""
        quietest = 0
        min_count = sys.maxsize
        for slot, count in enumerate(self._counts):
            if count < min_count:
                min_count = count
                quietest = slot
        return quietest + self.first

    def busiest_window(self, width: int) -> int:
        """Return the start of the busiest run of ``width`` adjacent values.

        Windows wrap past the last value back to the first, so the last
        window of an hour histogram covers 23:00 and 00:00.
        """
        size = len(self._counts)
        busiest = 0
        max_count = 0
        for start in range(size):
            count = sum(self._counts[(start + i) % size] for i in range(width))
            if count > max_count:
                max_count = count
                busiest = start
        return busiest + self.first
