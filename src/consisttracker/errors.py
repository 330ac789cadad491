"""Exception types raised outside the pure analytics core."""

from __future__ import annotations


class ConsistTrackerError(Exception):
    """Base class for application errors."""


class HabitNotFoundError(ConsistTrackerError):
    """Raised when a habit id does not match any stored habit."""

    def __init__(self, habit_id: str):
        super().__init__(f"Habit {habit_id!r} not found")
        self.habit_id = habit_id


class InvalidHabitError(ConsistTrackerError):
    """Raised when a habit or log fails validation before it is stored."""


class StorageError(ConsistTrackerError):
    """Raised when the database cannot load or save records."""


__all__ = [
    "ConsistTrackerError",
    "HabitNotFoundError",
    "InvalidHabitError",
    "StorageError",
]
