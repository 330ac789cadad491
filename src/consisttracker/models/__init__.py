"""SQLModel table exports."""

from .achievement import Achievement
from .habit import Habit, HabitCategory, HabitLog, HabitType
from .settings import AppSetting

__all__ = [
    "Achievement",
    "AppSetting",
    "Habit",
    "HabitCategory",
    "HabitLog",
    "HabitType",
]
