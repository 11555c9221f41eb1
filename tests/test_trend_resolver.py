"""Tests for trend window resolution and series building."""

from datetime import date

import pytest

from lifepattern.services.errors import AnalysisError, InvalidRangeSpecification
from lifepattern.services.score_engine import DailyMetrics
from lifepattern.services.trend_resolver import TrendPoint, TrendWindow, build_series, resolve_window

TODAY = date(2024, 3, 10)


def _log(d: date, sleep: float, stress: int) -> DailyMetrics:
    return DailyMetrics(
        date=d,
        sleep_hours=sleep,
        work_hours=8,
        study_hours=0,
        entertainment_hours=1,
        energy_level=6,
        stress_level=stress,
    )


def test_days_gives_inclusive_window_ending_today():
    w = resolve_window(days=7, today=TODAY)
    assert w == TrendWindow(start_date=date(2024, 3, 4), end_date=date(2024, 3, 10))
    assert (w.end_date - w.start_date).days + 1 == 7


def test_single_day_window():
    w = resolve_window(days=1, today=TODAY)
    assert w.start_date == w.end_date == TODAY


def test_days_window_crosses_month_boundary():
    w = resolve_window(days=30, today=TODAY)
    assert w.start_date == date(2024, 2, 10)


@pytest.mark.parametrize("days", [800_000, 10**9])
def test_huge_days_window_starts_at_date_min(days):
    w = resolve_window(days=days, today=TODAY)
    assert w == TrendWindow(start_date=date.min, end_date=TODAY)


def test_days_window_reaching_exactly_date_min():
    w = resolve_window(days=(TODAY - date.min).days + 1, today=TODAY)
    assert w.start_date == date.min


def test_explicit_range_passes_through():
    w = resolve_window(start=date(2024, 1, 1), end=date(2024, 1, 5), today=TODAY)
    assert w.start_date == date(2024, 1, 1)
    assert w.end_date == date(2024, 1, 5)


def test_reversed_explicit_range_is_not_corrected():
    w = resolve_window(start=date(2024, 1, 5), end=date(2024, 1, 1), today=TODAY)
    assert w.start_date == date(2024, 1, 5)
    assert w.end_date == date(2024, 1, 1)


def test_explicit_range_wins_over_days():
    w = resolve_window(days=7, start=date(2023, 12, 1), end=date(2023, 12, 31), today=TODAY)
    assert w == TrendWindow(start_date=date(2023, 12, 1), end_date=date(2023, 12, 31))


def test_lone_start_falls_back_to_days():
    w = resolve_window(days=3, start=date(2023, 12, 1), today=TODAY)
    assert w == TrendWindow(start_date=date(2024, 3, 8), end_date=TODAY)


@pytest.mark.parametrize("kwargs", [
    {},
    {"days": 0},
    {"days": -3},
    {"start": date(2024, 1, 1)},
    {"end": date(2024, 1, 5)},
    {"days": 0, "end": date(2024, 1, 5)},
])
def test_invalid_range_specification(kwargs):
    with pytest.raises(InvalidRangeSpecification) as exc:
        resolve_window(today=TODAY, **kwargs)
    assert isinstance(exc.value, AnalysisError)
    assert exc.value.message == "Please provide either 'days' or both 'start' and 'end' dates"


def test_build_series_empty():
    assert build_series([]) == []


def test_build_series_maps_and_keeps_order():
    logs = [
        _log(date(2024, 3, 8), 6.5, 7),
        _log(date(2024, 3, 9), 8.0, 3),
        _log(date(2024, 3, 10), 5.0, 9),
    ]
    series = build_series(logs)
    assert series == [
        TrendPoint(date="2024-03-08", sleep_hours=6.5, stress_level=7),
        TrendPoint(date="2024-03-09", sleep_hours=8.0, stress_level=3),
        TrendPoint(date="2024-03-10", sleep_hours=5.0, stress_level=9),
    ]


def test_build_series_does_not_resort():
    """Input order is the caller's responsibility; it is preserved as given."""
    logs = [_log(date(2024, 3, 10), 5.0, 9), _log(date(2024, 3, 1), 7.0, 2)]
    assert [p.date for p in build_series(logs)] == ["2024-03-10", "2024-03-01"]


def test_build_series_accepts_generator():
    series = build_series(_log(date(2024, 3, d), 7.0, 4) for d in (1, 2))
    assert len(series) == 2
