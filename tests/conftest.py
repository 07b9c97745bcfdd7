"""Shared test fixtures for all test modules."""

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

from accesstally.adapters.sources.in_memory import InMemoryEntrySource
from accesstally.core.models import LogEntry


@pytest.fixture
def make_source() -> Callable[..., InMemoryEntrySource]:
    """Factory fixture for in-memory sources built from hour/day/month tuples.

    Usage:
        source = make_source([(0, 1, 0), (23, 15, 6)])
    """

    def _source(fields: Iterable[tuple[int, int, int]]) -> InMemoryEntrySource:
        return InMemoryEntrySource(
            LogEntry(hour=hour, day=day, month=month) for hour, day, month in fields
        )

    return _source


@pytest.fixture
def hours_source() -> Callable[[Iterable[int]], InMemoryEntrySource]:
    """Factory fixture for sources where only the hour matters."""

    def _source(hours: Iterable[int]) -> InMemoryEntrySource:
        return InMemoryEntrySource(LogEntry(hour=h, day=1, month=0) for h in hours)

    return _source


@pytest.fixture
def log_path(tmp_path: Path) -> Path:
    """Provide a small numeric-format log file."""
    path = tmp_path / "weblog.txt"
    path.write_text(
        "2024 03 30 14 05\n"
        "2024 03 30 14 47\n"
        "2024 03 31 15 02\n"
        "2024 04 01 23 59\n"
        "2024 04 02 00 10\n",
        encoding="utf-8",
    )
    return path
