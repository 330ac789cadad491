"""Repository protocol definitions for domain layer."""

from .habit import HabitRepository
from .settings import SettingsRepository

__all__ = [
    "HabitRepository",
    "SettingsRepository",
]
