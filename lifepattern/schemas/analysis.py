"""Pydantic schemas for the analysis API: burnout assessment and trend points."""

from datetime import datetime

from pydantic import BaseModel

from lifepattern.services.score_engine import BurnoutAssessment
from lifepattern.services.trend_resolver import TrendPoint


class AnalysisResponse(BaseModel):
    user_id: str
    burnout_score: int
    risk_level: str  # LOW | MEDIUM | HIGH
    suggestion_text: str
    analyzed_at: datetime

    @classmethod
    def from_assessment(cls, assessment: BurnoutAssessment) -> "AnalysisResponse":
        return cls(
            user_id=str(assessment.subject_id),
            burnout_score=assessment.score,
            risk_level=assessment.risk_tier.value,
            suggestion_text=assessment.suggestion_text,
            analyzed_at=assessment.computed_at,
        )


class TrendPointResponse(BaseModel):
    """One chart point: ISO date, sleep hours, stress level."""

    date: str
    sleep: float
    stress: int

    @classmethod
    def from_point(cls, point: TrendPoint) -> "TrendPointResponse":
        return cls(date=point.date, sleep=point.sleep_hours, stress=point.stress_level)
