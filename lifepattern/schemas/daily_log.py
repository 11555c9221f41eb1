"""Pydantic schemas for daily log API (user-entered lifestyle metrics)."""

from datetime import date

from pydantic import BaseModel, Field

MAX_HOURS_PER_DAY = 24.0


class DailyLogRequest(BaseModel):
    """Body for creating or replacing one day of metrics. Every field except notes is required."""

    date: date
    sleep_hours: float = Field(..., ge=0, le=24)
    work_hours: float = Field(..., ge=0, le=24)
    study_hours: float = Field(..., ge=0, le=24)
    entertainment_hours: float = Field(..., ge=0, le=24)
    energy_level: int = Field(..., ge=1, le=10)
    stress_level: int = Field(..., ge=1, le=10)
    notes: str | None = None

    @property
    def total_hours(self) -> float:
        return self.sleep_hours + self.work_hours + self.study_hours + self.entertainment_hours


class DailyLogResponse(BaseModel):
    """Single daily log as returned by the API."""

    id: str
    date: date
    sleep_hours: float
    work_hours: float
    study_hours: float
    entertainment_hours: float
    energy_level: int
    stress_level: int
    notes: str | None = None
