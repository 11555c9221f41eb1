"""Data store for the analysis engine: daily logs in, assessments out. Rows are converted to immutable values."""

from datetime import date, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from lifepattern.models.burnout_analysis import BurnoutAnalysis
from lifepattern.models.daily_log import DailyLog
from lifepattern.services.score_engine import BurnoutAssessment, DailyMetrics, RiskTier


def to_metrics(row: DailyLog) -> DailyMetrics:
    return DailyMetrics(
        date=row.date,
        sleep_hours=row.sleep_hours,
        work_hours=row.work_hours,
        study_hours=row.study_hours,
        entertainment_hours=row.entertainment_hours,
        energy_level=row.energy_level,
        stress_level=row.stress_level,
        notes=row.notes,
    )


def to_assessment(row: BurnoutAnalysis) -> BurnoutAssessment:
    analyzed_at = row.analyzed_at
    # SQLite drops tzinfo; stored values are always UTC
    if analyzed_at.tzinfo is None:
        analyzed_at = analyzed_at.replace(tzinfo=timezone.utc)
    return BurnoutAssessment(
        subject_id=row.user_id,
        score=row.burnout_score,
        risk_tier=RiskTier(row.risk_level),
        suggestion_text=row.suggestion_text,
        computed_at=analyzed_at,
    )


async def get_most_recent_metrics(session: AsyncSession, user_id: int) -> DailyMetrics | None:
    """Latest log by date, or None if the user has no logs."""
    r = await session.execute(
        select(DailyLog)
        .where(DailyLog.user_id == user_id)
        .order_by(DailyLog.date.desc())
        .limit(1)
    )
    row = r.scalar_one_or_none()
    return to_metrics(row) if row else None


async def get_metrics_in_range(
    session: AsyncSession,
    user_id: int,
    start_date: date,
    end_date: date,
) -> list[DailyMetrics]:
    """Logs with start_date <= date <= end_date, ascending by date. Empty when start_date > end_date."""
    r = await session.execute(
        select(DailyLog)
        .where(
            DailyLog.user_id == user_id,
            DailyLog.date >= start_date,
            DailyLog.date <= end_date,
        )
        .order_by(DailyLog.date.asc())
    )
    return [to_metrics(row) for row in r.scalars().all()]


async def save_assessment(session: AsyncSession, assessment: BurnoutAssessment) -> BurnoutAnalysis:
    row = BurnoutAnalysis(
        user_id=assessment.subject_id,
        burnout_score=assessment.score,
        risk_level=assessment.risk_tier.value,
        suggestion_text=assessment.suggestion_text,
        analyzed_at=assessment.computed_at,
    )
    session.add(row)
    await session.flush()
    return row


async def get_latest_assessment(session: AsyncSession, user_id: int) -> BurnoutAssessment | None:
    r = await session.execute(
        select(BurnoutAnalysis)
        .where(BurnoutAnalysis.user_id == user_id)
        .order_by(BurnoutAnalysis.analyzed_at.desc(), BurnoutAnalysis.id.desc())
        .limit(1)
    )
    row = r.scalar_one_or_none()
    return to_assessment(row) if row else None
