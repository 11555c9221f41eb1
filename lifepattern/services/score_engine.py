"""
Burnout scoring: latest daily metrics -> score (0-100), risk tier, suggestion text.
Fixed linear rule on a single data point; no I/O, no state.
"""

from datetime import date, datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict

WORK_WEIGHT = 5
STRESS_WEIGHT = 5
SLEEP_CREDIT = 3

SCORE_MIN = 0
SCORE_MAX = 100

# Lower bound (inclusive) of each tier above LOW
MEDIUM_THRESHOLD = 40
HIGH_THRESHOLD = 70


class RiskTier(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class DailyMetrics(BaseModel):
    """One day of lifestyle metrics as seen by the engine. Hours are not re-validated here."""

    model_config = ConfigDict(frozen=True)

    date: date
    sleep_hours: float
    work_hours: float
    study_hours: float
    entertainment_hours: float
    energy_level: int
    stress_level: int
    notes: str | None = None


class BurnoutAssessment(BaseModel):
    model_config = ConfigDict(frozen=True)

    subject_id: int
    score: int
    risk_tier: RiskTier
    suggestion_text: str
    computed_at: datetime


def raw_score(metrics: DailyMetrics) -> float:
    return (
        metrics.work_hours * WORK_WEIGHT
        + metrics.stress_level * STRESS_WEIGHT
        - metrics.sleep_hours * SLEEP_CREDIT
    )


def clamp_score(raw: float) -> int:
    """Clamp to [0, 100] and truncate toward zero (not rounded)."""
    return int(max(SCORE_MIN, min(SCORE_MAX, raw)))


def classify_risk(score: int) -> RiskTier:
    if score < MEDIUM_THRESHOLD:
        return RiskTier.LOW
    if score < HIGH_THRESHOLD:
        return RiskTier.MEDIUM
    return RiskTier.HIGH


def _hours(value: float) -> str:
    # Hours always render with a decimal part: 8 -> "8.0", 7.5 -> "7.5"
    return str(float(value))


def build_suggestion(tier: RiskTier, metrics: DailyMetrics) -> str:
    if tier is RiskTier.LOW:
        return (
            "Great job maintaining balance! Your current routine shows healthy work-life balance. "
            f"Keep prioritizing {_hours(metrics.sleep_hours)} hours of sleep and managing stress effectively."
        )
    if tier is RiskTier.MEDIUM:
        return (
            "You're showing moderate signs of stress. Consider reducing work hours "
            f"({_hours(metrics.work_hours)}h currently) and increasing sleep time. "
            "Try relaxation techniques and ensure you're taking regular breaks."
        )
    return (
        f"Warning: High burnout risk detected! Your work hours ({_hours(metrics.work_hours)}h) "
        f"and stress level ({metrics.stress_level}/10) are concerning. "
        f"Prioritize rest (current: {_hours(metrics.sleep_hours)}h sleep). "
        "Consider speaking with a healthcare professional and adjusting your schedule."
    )


def compute_assessment(
    subject_id: int,
    latest: DailyMetrics,
    *,
    now: datetime | None = None,
) -> BurnoutAssessment:
    """
    Score the subject's most recent metrics.
    The caller guarantees `latest` exists; a missing record is NoDataAvailable upstream.
    """
    score = clamp_score(raw_score(latest))
    tier = classify_risk(score)
    return BurnoutAssessment(
        subject_id=subject_id,
        score=score,
        risk_tier=tier,
        suggestion_text=build_suggestion(tier, latest),
        computed_at=now or datetime.now(timezone.utc),
    )
