"""Contribution-graph data: one aggregate record per day."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable

from ..models.habit import Habit, HabitLog
from .dates import day_id, resolve_today, subtract_days
from .habits import percent


@dataclass(slots=True, frozen=True)
class DayData:
    """Completion figures for a single calendar day."""

    date: str
    completion_percentage: int
    habits_completed: int
    total_habits: int


def _created_day(habit: Habit) -> str:
    created = habit.created_at
    if isinstance(created, (date, datetime)):
        return day_id(created)
    return str(created)[:10]


def generate_calendar(
    habits: Iterable[Habit],
    logs: Iterable[HabitLog],
    days: int = 365,
    *,
    today: str | date | datetime | None = None,
) -> list[DayData]:
    """Build ``days`` records ending today, oldest first.

    A habit counts toward a day when it is not archived and was created on or
    before that day. The completed count includes every log for the day,
    regardless of which habit it belongs to.
    """

    if days <= 0:
        return []

    today_key = resolve_today(today)
    created_days = [_created_day(habit) for habit in habits if habit.archived_at is None]
    logs_per_day = Counter(log.log_date for log in logs)

    data: list[DayData] = []
    for offset in range(days - 1, -1, -1):
        key = subtract_days(today_key, offset)
        total = sum(1 for created in created_days if created <= key)
        completed = logs_per_day.get(key, 0)
        data.append(
            DayData(
                date=key,
                completion_percentage=percent(completed, total),
                habits_completed=completed,
                total_habits=total,
            )
        )
    return data


__all__ = ["DayData", "generate_calendar"]
