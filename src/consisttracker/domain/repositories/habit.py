"""Habit repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.achievement import Achievement
from ...models.habit import Habit, HabitLog


class HabitRepository(Protocol):
    """Repository for habits, their daily logs and unlocked achievements.

    Every read returns detached snapshots; callers never share session state.
    """

    def get_habit(self, habit_id: str) -> Optional[Habit]:
        """Retrieve a habit by ID."""
        ...

    def list_habits(self, include_archived: bool = True) -> list[Habit]:
        """List habits, optionally excluding archived ones."""
        ...

    def list_active(self) -> list[Habit]:
        """List habits that are not archived."""
        ...

    def upsert_habit(self, habit: Habit) -> Habit:
        """Create a habit or replace the stored habit with the same ID."""
        ...

    def archive_habit(self, habit_id: str) -> Habit:
        """Stamp a habit as archived."""
        ...

    def delete_habit(self, habit_id: str) -> None:
        """Delete a habit and every log that references it."""
        ...

    # Habit log operations
    def list_habit_logs(self) -> list[HabitLog]:
        """List every stored log."""
        ...

    def logs_for_date(self, log_date: str) -> list[HabitLog]:
        """Logs recorded on one day identifier."""
        ...

    def logs_for_habit(self, habit_id: str) -> list[HabitLog]:
        """Logs recorded for one habit, oldest first."""
        ...

    def upsert_habit_log(self, log: HabitLog) -> HabitLog:
        """Store a log, replacing any prior log for the same habit and day."""
        ...

    def delete_habit_log(self, habit_id: str, log_date: str) -> bool:
        """Remove the log for a habit and day; False when none existed."""
        ...

    # Achievements
    def list_achievements(self) -> list[Achievement]:
        ...

    def add_achievement(self, achievement: Achievement) -> Achievement:
        ...

    def clear_all(self) -> None:
        """Remove every habit, log and achievement."""
        ...
