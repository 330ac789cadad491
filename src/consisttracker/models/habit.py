"""Habit tracking data structures."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import ClassVar, Optional
from uuid import uuid4

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel

from ..constants import DEFAULT_HABIT_COLOR, DEFAULT_HABIT_ICON


def new_id() -> str:
    return uuid4().hex


class HabitCategory(str, Enum):
    """Fixed set of categories a habit can belong to."""

    HEALTH = "Health"
    PRODUCTIVITY = "Productivity"
    LEARNING = "Learning"
    RELATIONSHIPS = "Relationships"
    FINANCE = "Finance"
    CREATIVITY = "Creativity"


class HabitType(str, Enum):
    """How completion of a habit is measured."""

    DAILY = "daily"
    WEEKLY = "weekly"
    QUANTITY = "quantity"


class Habit(SQLModel, table=True):
    """A user-defined habit the app tracks."""

    __tablename__: ClassVar[str] = "habit"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)
    name: str = Field(nullable=False, max_length=80, index=True)
    description: Optional[str] = Field(default=None, max_length=255)
    category: HabitCategory = Field(default=HabitCategory.HEALTH)
    habit_type: HabitType = Field(default=HabitType.DAILY)
    target_value: Optional[float] = Field(default=None)
    target_frequency: Optional[int] = Field(default=None)
    color: str = Field(default=DEFAULT_HABIT_COLOR, max_length=32)
    icon: str = Field(default=DEFAULT_HABIT_ICON, max_length=32)
    created_at: datetime = Field(default_factory=datetime.now, nullable=False)
    archived_at: Optional[datetime] = Field(default=None)

    @property
    def is_archived(self) -> bool:
        return self.archived_at is not None


class HabitLog(SQLModel, table=True):
    """Completion record for a habit on one calendar day."""

    __tablename__: ClassVar[str] = "habit_log"
    __table_args__ = (UniqueConstraint("habit_id", "log_date", name="uq_habit_log_day"),)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)
    habit_id: str = Field(foreign_key="habit.id", nullable=False, index=True, max_length=64)
    # YYYY-MM-DD day identifier
    log_date: str = Field(nullable=False, index=True, max_length=10)
    value: float = Field(default=1.0, nullable=False)
    notes: Optional[str] = Field(default=None, max_length=500)
    created_at: datetime = Field(default_factory=datetime.now, nullable=False)
