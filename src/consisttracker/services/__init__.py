"""Service layer: the pure analytics core plus the tracking workflow."""

from .analytics import AnalyticsSummary, summarize, top_habits
from .calendar import DayData, generate_calendar
from .dates import day_difference, day_id, subtract_days, today_id
from .habits import HabitStreak, calculate_streak, completion_rate, is_completed_today, weekly_progress
from .milestones import is_milestone, milestone_message

__all__ = [
    "AnalyticsSummary",
    "DayData",
    "HabitStreak",
    "calculate_streak",
    "completion_rate",
    "day_difference",
    "day_id",
    "generate_calendar",
    "is_completed_today",
    "is_milestone",
    "milestone_message",
    "subtract_days",
    "summarize",
    "today_id",
    "top_habits",
    "weekly_progress",
]
