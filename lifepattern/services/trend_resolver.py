"""Trend window resolution (days or explicit start/end) and sleep/stress series for charts."""

from collections.abc import Iterable
from datetime import date, timedelta

from pydantic import BaseModel, ConfigDict

from lifepattern.services.errors import InvalidRangeSpecification
from lifepattern.services.score_engine import DailyMetrics


class TrendWindow(BaseModel):
    model_config = ConfigDict(frozen=True)

    start_date: date
    end_date: date


class TrendPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: str  # ISO YYYY-MM-DD
    sleep_hours: float
    stress_level: int


def resolve_window(
    days: int | None = None,
    start: date | None = None,
    end: date | None = None,
    *,
    today: date,
) -> TrendWindow:
    """
    Explicit start+end wins and is passed through as-is (start > end is not checked here).
    Otherwise days > 0 gives the inclusive range [today - (days - 1), today].
    days <= 0 counts as missing. Raises InvalidRangeSpecification when nothing usable was given.
    A span reaching past date.min starts at date.min.
    """
    if start is not None and end is not None:
        return TrendWindow(start_date=start, end_date=end)
    if days is not None and days > 0:
        span = min(days - 1, (today - date.min).days)
        return TrendWindow(start_date=today - timedelta(days=span), end_date=today)
    raise InvalidRangeSpecification()


def build_series(logs: Iterable[DailyMetrics]) -> list[TrendPoint]:
    """One point per log, input order kept. Logs must already be filtered to the window and sorted ascending."""
    return [
        TrendPoint(
            date=log.date.isoformat(),
            sleep_hours=log.sleep_hours,
            stress_level=log.stress_level,
        )
        for log in logs
    ]
