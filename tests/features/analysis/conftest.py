"""BDD step definitions for access analysis features."""

from dataclasses import dataclass, field

import pytest
from pytest_bdd import given, parsers, then, when

from accesstally.adapters.sources.in_memory import InMemoryEntrySource
from accesstally.core.analyzer import LogAnalyzer
from accesstally.core.models import LogEntry


@dataclass
class AnalysisScenarioContext:
    """Shared state between steps in an analysis scenario."""

    source: InMemoryEntrySource = field(default_factory=InMemoryEntrySource)
    analyzer: LogAnalyzer | None = None


@pytest.fixture
def ctx() -> AnalysisScenarioContext:
    """Fresh scenario context for each test."""
    return AnalysisScenarioContext()


def _analyzer(ctx: AnalysisScenarioContext) -> LogAnalyzer:
    assert ctx.analyzer is not None, "analyzer was not created"
    return ctx.analyzer


def _ints(text: str) -> list[int]:
    return [int(part) for part in text.split(",")]


# === Given ===
@given("an analyzer tracking hour, day and month")
def step_analyzer(ctx: AnalysisScenarioContext) -> None:
    ctx.analyzer = LogAnalyzer(ctx.source)


@given(parsers.parse("log entries at hours {hours}"))
def step_entries_at_hours(ctx: AnalysisScenarioContext, hours: str) -> None:
    for hour in _ints(hours):
        ctx.source.append(LogEntry(hour=hour, day=1, month=0))


@given(parsers.parse("{n:d} log entries at hour {hour:d}"))
def step_n_entries_at_hour(ctx: AnalysisScenarioContext, n: int, hour: int) -> None:
    for _ in range(n):
        ctx.source.append(LogEntry(hour=hour, day=1, month=0))


@given(parsers.parse("log entries on days {days}"))
def step_entries_on_days(ctx: AnalysisScenarioContext, days: str) -> None:
    for day in _ints(days):
        ctx.source.append(LogEntry(hour=12, day=day, month=0))


# === When ===
@when("the hourly data is analyzed")
def step_analyze_hourly(ctx: AnalysisScenarioContext) -> None:
    _analyzer(ctx).analyze_hourly_data()


@when("the daily data is analyzed")
def step_analyze_daily(ctx: AnalysisScenarioContext) -> None:
    _analyzer(ctx).analyze_daily_data()


@when("the source is reset")
def step_reset(ctx: AnalysisScenarioContext) -> None:
    _analyzer(ctx).reset_source()


# === Then ===
@then(parsers.parse("the number of accesses is {n:d}"))
def step_number_of_accesses(ctx: AnalysisScenarioContext, n: int) -> None:
    assert _analyzer(ctx).number_of_accesses() == n


@then(parsers.parse("the busiest hour is {hour:d}"))
def step_busiest_hour(ctx: AnalysisScenarioContext, hour: int) -> None:
    assert _analyzer(ctx).busiest_hour() == hour


@then(parsers.parse("the quietest hour is {hour:d}"))
def step_quietest_hour(ctx: AnalysisScenarioContext, hour: int) -> None:
    assert _analyzer(ctx).quietest_hour() == hour


@then(parsers.parse("the busiest two-hour period starts at hour {hour:d}"))
def step_busiest_two_hour(ctx: AnalysisScenarioContext, hour: int) -> None:
    assert _analyzer(ctx).busiest_two_hour() == hour


@then(parsers.parse("the busiest day is {day:d}"))
def step_busiest_day(ctx: AnalysisScenarioContext, day: int) -> None:
    assert _analyzer(ctx).busiest_day() == day


@then(parsers.parse("the quietest day is {day:d}"))
def step_quietest_day(ctx: AnalysisScenarioContext, day: int) -> None:
    assert _analyzer(ctx).quietest_day() == day


@then("the day histogram is empty")
def step_day_histogram_empty(ctx: AnalysisScenarioContext) -> None:
    assert sum(_analyzer(ctx).day_counts) == 0
