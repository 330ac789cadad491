"""Habit streak and completion-rate calculations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, Optional

from ..constants import MAX_TARGET_FREQUENCY, MIN_TARGET_FREQUENCY, WEEK_DAYS
from ..errors import InvalidHabitError
from ..models.habit import Habit, HabitLog, HabitType
from .dates import day_difference, is_day_id, resolve_today, subtract_days

Today = str | date | datetime | None


def round_half_up(value: float) -> int:
    """Round halves away from zero for positive values (12.5 -> 13)."""

    return math.floor(value + 0.5)


def percent(part: float, whole: float) -> int:
    """Integer percentage of part over whole, 0 when whole is not positive."""

    if whole <= 0:
        return 0
    return round_half_up(part / whole * 100)


@dataclass(slots=True, frozen=True)
class HabitStreak:
    """Derived streak figures for a single habit."""

    habit_id: str
    current_streak: int
    longest_streak: int
    last_log_date: Optional[str] = None


def _habit_days(habit_id: str, logs: Iterable[HabitLog]) -> list[str]:
    """Day identifiers logged for ``habit_id``, newest first."""

    days = [log.log_date for log in logs if log.habit_id == habit_id and is_day_id(log.log_date)]
    days.sort(reverse=True)
    return days


def calculate_streak(habit_id: str, logs: Iterable[HabitLog], *, today: Today = None) -> HabitStreak:
    """Return current and longest streaks for ``habit_id``.

    The current streak counts consecutive days ending today, so it is zero
    when today has no log. ``last_log_date`` is only reported while the
    current streak is alive.
    """

    days = _habit_days(habit_id, logs)
    if not days:
        return HabitStreak(habit_id=habit_id, current_streak=0, longest_streak=0)

    today_key = resolve_today(today)

    # Current streak: position i must be exactly today - i.
    current = 0
    last_log_date: Optional[str] = None
    for i, day in enumerate(days):
        if day != subtract_days(today_key, i):
            break
        current += 1
        if last_log_date is None:
            last_log_date = day

    # Longest streak: sweep the descending list counting 1-day steps.
    longest = 0
    run = 0
    for i, day in enumerate(days):
        if i > 0 and day_difference(days[i - 1], day) == 1:
            run += 1
        else:
            longest = max(longest, run)
            run = 1
    longest = max(longest, run)

    return HabitStreak(
        habit_id=habit_id,
        current_streak=current,
        longest_streak=longest,
        last_log_date=last_log_date,
    )


def completion_rate(
    habit_id: str,
    logs: Iterable[HabitLog],
    window_days: int = 30,
    *,
    today: Today = None,
) -> int:
    """Percentage of the trailing ``window_days`` (ending today) with a log.

    The result is not clamped, so back-filled duplicates can push it past 100.
    """

    if window_days <= 0:
        return 0

    end = resolve_today(today)
    start = subtract_days(end, window_days - 1)
    count = sum(
        1
        for log in logs
        if log.habit_id == habit_id and is_day_id(log.log_date) and start <= log.log_date <= end
    )
    return percent(count, window_days)


def is_completed_today(habit_id: str, logs: Iterable[HabitLog], *, today: Today = None) -> bool:
    today_key = resolve_today(today)
    return any(log.habit_id == habit_id and log.log_date == today_key for log in logs)


def weekly_progress(
    habits: Iterable[Habit], logs: Iterable[HabitLog], *, today: Today = None
) -> dict[str, int]:
    """Map habit id to the share of the last seven days it was logged."""

    logs = list(logs)
    return {
        habit.id: completion_rate(habit.id, logs, WEEK_DAYS, today=today) for habit in habits
    }


def active_habits(habits: Iterable[Habit]) -> list[Habit]:
    """Habits that have not been archived."""

    return [habit for habit in habits if habit.archived_at is None]


def validate_habit(habit: Habit) -> None:
    """Raise ``InvalidHabitError`` when a habit violates its type constraints."""

    if not habit.name or not habit.name.strip():
        raise InvalidHabitError("Habit name must not be empty")
    if habit.habit_type == HabitType.WEEKLY and habit.target_frequency is not None:
        if not MIN_TARGET_FREQUENCY <= habit.target_frequency <= MAX_TARGET_FREQUENCY:
            raise InvalidHabitError(
                f"Weekly target frequency must be between {MIN_TARGET_FREQUENCY} and "
                f"{MAX_TARGET_FREQUENCY}, got {habit.target_frequency}"
            )
    if habit.habit_type == HabitType.QUANTITY and habit.target_value is not None:
        if habit.target_value <= 0:
            raise InvalidHabitError("Quantity target value must be positive")


def validate_log(log: HabitLog) -> None:
    if not is_day_id(log.log_date):
        raise InvalidHabitError(f"Log date must be YYYY-MM-DD, got {log.log_date!r}")


__all__ = [
    "HabitStreak",
    "active_habits",
    "calculate_streak",
    "completion_rate",
    "is_completed_today",
    "percent",
    "round_half_up",
    "validate_habit",
    "validate_log",
    "weekly_progress",
]
