"""Unlocked achievements."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel

from .habit import new_id


class Achievement(SQLModel, table=True):
    """A celebration record, e.g. reaching a streak milestone."""

    __tablename__: ClassVar[str] = "achievement"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)
    habit_id: Optional[str] = Field(default=None, index=True, max_length=64)
    achievement_type: str = Field(nullable=False, max_length=32)
    title: str = Field(nullable=False, max_length=120)
    description: str = Field(default="", max_length=255)
    unlocked_at: datetime = Field(default_factory=datetime.now, nullable=False)
    icon: str = Field(default="award", max_length=32)
