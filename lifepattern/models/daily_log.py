"""One day of user-entered lifestyle metrics. At most one row per user and date."""

from datetime import date
from sqlalchemy import Date, Float, ForeignKey, Integer, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from lifepattern.db.base import Base


class DailyLog(Base):
    __tablename__ = "daily_logs"
    __table_args__ = (UniqueConstraint("user_id", "date", name="uq_daily_logs_user_date"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    sleep_hours: Mapped[float] = mapped_column(Float, nullable=False)
    work_hours: Mapped[float] = mapped_column(Float, nullable=False)
    study_hours: Mapped[float] = mapped_column(Float, nullable=False)
    entertainment_hours: Mapped[float] = mapped_column(Float, nullable=False)
    energy_level: Mapped[int] = mapped_column(Integer, nullable=False)  # 1-10
    stress_level: Mapped[int] = mapped_column(Integer, nullable=False)  # 1-10
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    user: Mapped["User"] = relationship("User", back_populates="daily_logs")
