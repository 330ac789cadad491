"""Application context for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from sqlmodel import Session

from .config import BaseConfig
from .domain.repositories import HabitRepository, SettingsRepository
from .infra.database import bootstrap_database
from .infra.repositories import SQLModelHabitRepository, SQLModelSettingsRepository


@dataclass
class AppContext:
    """Configuration plus the repositories callers need."""

    config: BaseConfig
    session_factory: Callable[[], Session]
    habit_repo: HabitRepository
    settings_repo: SettingsRepository


def create_app_context(config: Optional[BaseConfig] = None) -> AppContext:
    """Create and initialize the application context."""

    if config is None:
        config = BaseConfig()

    _, session_factory = bootstrap_database(config)

    return AppContext(
        config=config,
        session_factory=session_factory,
        habit_repo=SQLModelHabitRepository(session_factory),
        settings_repo=SQLModelSettingsRepository(session_factory),
    )
