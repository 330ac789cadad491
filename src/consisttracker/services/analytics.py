"""Dashboard analytics composed from the streak, rate and calendar services."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable

from ..constants import MONTH_DAYS, WEEK_DAYS
from ..models.habit import Habit, HabitLog
from .calendar import DayData, generate_calendar
from .habits import active_habits, calculate_streak, completion_rate, percent, round_half_up

Today = str | date | datetime | None


@dataclass(slots=True, frozen=True)
class AnalyticsSummary:
    """Aggregate figures shown on the analytics screen."""

    total_habits: int
    total_logs: int
    average_completion: int
    best_streak: int
    current_streaks: int
    weekly_progress: int
    monthly_progress: int
    consistency_score: int


@dataclass(slots=True, frozen=True)
class HabitRanking:
    habit: Habit
    current_streak: int
    completion_rate: int


def _mean_percentage(days: list[DayData]) -> int:
    if not days:
        return 0
    return round_half_up(sum(day.completion_percentage for day in days) / len(days))


def summarize(
    habits: Iterable[Habit],
    logs: Iterable[HabitLog],
    *,
    calendar_days: int = 365,
    window_days: int = MONTH_DAYS,
    today: Today = None,
) -> AnalyticsSummary:
    """Compute the analytics summary over non-archived habits."""

    habits = active_habits(habits)
    logs = list(logs)

    streaks = [calculate_streak(habit.id, logs, today=today) for habit in habits]
    rates = [completion_rate(habit.id, logs, window_days, today=today) for habit in habits]
    calendar = generate_calendar(habits, logs, calendar_days, today=today)

    last_month = calendar[-MONTH_DAYS:]
    active_days = sum(1 for day in last_month if day.completion_percentage > 0)
    consistency = percent(active_days, len(last_month))

    return AnalyticsSummary(
        total_habits=len(habits),
        total_logs=len(logs),
        average_completion=round_half_up(sum(rates) / len(rates)) if rates else 0,
        best_streak=max((s.longest_streak for s in streaks), default=0),
        current_streaks=sum(s.current_streak for s in streaks),
        weekly_progress=_mean_percentage(calendar[-WEEK_DAYS:]),
        monthly_progress=_mean_percentage(last_month),
        consistency_score=consistency,
    )


def top_habits(
    habits: Iterable[Habit],
    logs: Iterable[HabitLog],
    *,
    limit: int = 3,
    window_days: int = MONTH_DAYS,
    today: Today = None,
) -> list[HabitRanking]:
    """Active habits ranked by completion rate, best first."""

    logs = list(logs)
    rankings = [
        HabitRanking(
            habit=habit,
            current_streak=calculate_streak(habit.id, logs, today=today).current_streak,
            completion_rate=completion_rate(habit.id, logs, window_days, today=today),
        )
        for habit in active_habits(habits)
    ]
    # sorted() is stable, so ties keep the input order
    rankings = sorted(rankings, key=lambda r: r.completion_rate, reverse=True)
    return rankings[:limit]


def consistency_message(score: int) -> str:
    if score >= 90:
        return "Exceptional consistency! 🏆"
    if score >= 75:
        return "Great consistency! 🌟"
    if score >= 60:
        return "Good progress! 👍"
    if score >= 40:
        return "Keep building! 💪"
    return "Just getting started! 🌱"


def insights(summary: AnalyticsSummary) -> list[str]:
    """Short encouragement lines derived from the summary."""

    lines: list[str] = []
    if summary.best_streak >= 30:
        lines.append("🔥 You've built some amazing long-term habits!")
    if summary.weekly_progress > summary.monthly_progress:
        lines.append("📈 You're on an upward trend this week!")
    if summary.consistency_score >= 80:
        lines.append("⭐ Your consistency is inspiring!")
    if summary.total_habits >= 5:
        lines.append("🎯 You're tracking multiple habits - great commitment!")
    if not lines:
        lines.append("🌱 Keep building your habits - every day counts!")
    return lines


__all__ = [
    "AnalyticsSummary",
    "HabitRanking",
    "consistency_message",
    "insights",
    "summarize",
    "top_habits",
]
