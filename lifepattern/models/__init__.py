from lifepattern.models.user import User
from lifepattern.models.daily_log import DailyLog
from lifepattern.models.burnout_analysis import BurnoutAnalysis

__all__ = [
    "User",
    "DailyLog",
    "BurnoutAnalysis",
]
