"""
Analysis use cases: latest assessment, trends, regenerate.
Fetches through metrics_store, delegates to the pure engine, persists the result.
"""

import logging
from datetime import date, datetime

from prometheus_client import Counter
from sqlalchemy.ext.asyncio import AsyncSession

from lifepattern.services import metrics_store
from lifepattern.services.errors import NoDataAvailable
from lifepattern.services.score_engine import BurnoutAssessment, compute_assessment
from lifepattern.services.trend_resolver import TrendPoint, TrendWindow, build_series, resolve_window

logger = logging.getLogger(__name__)

ASSESSMENTS_TOTAL = Counter(
    "lifepattern_assessments_total",
    "Burnout assessments computed by regenerate, by risk tier",
    ["risk_tier"],
)


async def get_latest_analysis(session: AsyncSession, user_id: int) -> BurnoutAssessment:
    assessment = await metrics_store.get_latest_assessment(session, user_id)
    if assessment is None:
        raise NoDataAvailable("No analysis found. Please create a daily log first.")
    return assessment


async def get_trends(
    session: AsyncSession,
    user_id: int,
    days: int | None = None,
    start: date | None = None,
    end: date | None = None,
    *,
    today: date | None = None,
) -> tuple[TrendWindow, list[TrendPoint]]:
    """Resolve the window (raises InvalidRangeSpecification) and return it with the sleep/stress series."""
    window = resolve_window(days, start, end, today=today or date.today())
    logs = await metrics_store.get_metrics_in_range(session, user_id, window.start_date, window.end_date)
    logger.debug(
        "Trends for user %s: %s..%s, %d points", user_id, window.start_date, window.end_date, len(logs)
    )
    return window, build_series(logs)


async def regenerate_analysis(
    session: AsyncSession,
    user_id: int,
    *,
    now: datetime | None = None,
) -> BurnoutAssessment:
    """Score the most recent daily log and store a new assessment. Raises NoDataAvailable without logs."""
    latest = await metrics_store.get_most_recent_metrics(session, user_id)
    if latest is None:
        raise NoDataAvailable("No daily logs found. Please create a log first.")
    assessment = compute_assessment(user_id, latest, now=now)
    await metrics_store.save_assessment(session, assessment)
    ASSESSMENTS_TOTAL.labels(risk_tier=assessment.risk_tier.value).inc()
    logger.info(
        "Regenerated analysis for user %s from log %s: score=%d tier=%s",
        user_id,
        latest.date,
        assessment.score,
        assessment.risk_tier.value,
    )
    return assessment
