"""Toggle today's completion and surface streak milestones."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..constants import ACHIEVEMENT_STREAK_MILESTONE
from ..domain.repositories import HabitRepository
from ..errors import HabitNotFoundError
from ..logging_config import get_logger
from ..models.achievement import Achievement
from ..models.habit import HabitLog
from .dates import resolve_today
from .habits import HabitStreak, calculate_streak
from .milestones import is_milestone, milestone_message

logger = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class ToggleResult:
    """Outcome of flipping a habit's completion for today."""

    habit_id: str
    completed: bool
    streak: HabitStreak
    milestone_message: Optional[str] = None


def _record_milestone(repo: HabitRepository, habit_id: str, habit_name: str, streak: int) -> None:
    title = f"{streak}-day streak"
    already = any(
        a.habit_id == habit_id
        and a.achievement_type == ACHIEVEMENT_STREAK_MILESTONE
        and a.title == title
        for a in repo.list_achievements()
    )
    if already:
        return
    repo.add_achievement(
        Achievement(
            habit_id=habit_id,
            achievement_type=ACHIEVEMENT_STREAK_MILESTONE,
            title=title,
            description=f"Completed {habit_name} {streak} days in a row",
            icon="flame",
        )
    )


def log_completion(
    repo: HabitRepository,
    habit_id: str,
    *,
    value: float = 1.0,
    notes: str | None = None,
    today: str | date | datetime | None = None,
) -> ToggleResult:
    """Record (or overwrite) today's log for a habit and report the new streak."""

    habit = repo.get_habit(habit_id)
    if habit is None:
        raise HabitNotFoundError(habit_id)

    today_key = resolve_today(today)
    repo.upsert_habit_log(HabitLog(habit_id=habit_id, log_date=today_key, value=value, notes=notes))

    streak = calculate_streak(habit_id, repo.logs_for_habit(habit_id), today=today_key)
    message = None
    if is_milestone(streak.current_streak):
        message = milestone_message(streak.current_streak)
        _record_milestone(repo, habit_id, habit.name, streak.current_streak)
        logger.info(
            "Streak milestone reached",
            extra={"habit_id": habit_id, "streak": streak.current_streak},
        )
    return ToggleResult(habit_id=habit_id, completed=True, streak=streak, milestone_message=message)


def toggle_today(
    repo: HabitRepository,
    habit_id: str,
    *,
    today: str | date | datetime | None = None,
) -> ToggleResult:
    """Mark a habit done for today, or undo it when it is already done."""

    if repo.get_habit(habit_id) is None:
        raise HabitNotFoundError(habit_id)

    today_key = resolve_today(today)
    if repo.delete_habit_log(habit_id, today_key):
        streak = calculate_streak(habit_id, repo.logs_for_habit(habit_id), today=today_key)
        return ToggleResult(habit_id=habit_id, completed=False, streak=streak)
    return log_completion(repo, habit_id, today=today_key)


__all__ = ["ToggleResult", "log_completion", "toggle_today"]
