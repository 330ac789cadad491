"""Pytest configuration and shared fixtures for ConsistTracker tests.

Provides an isolated SQLite database per test plus factories for habits and
logs, so repository and service tests never touch the real data directory.
"""

from __future__ import annotations

import tempfile
from datetime import datetime
from pathlib import Path

import pytest
from sqlmodel import Session, SQLModel, create_engine

# Import all models to ensure they're registered with SQLModel metadata
from consisttracker.models import Achievement, AppSetting, Habit, HabitCategory, HabitLog, HabitType  # noqa: F401
from consisttracker.infra.database import create_session_factory
from consisttracker.infra.repositories import SQLModelHabitRepository, SQLModelSettingsRepository

# Fixed "today" so streak and calendar expectations do not depend on the clock
TODAY = "2024-03-15"


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine connected to test database
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def db_session(db_engine):
    """Database session for arranging test data directly."""
    session = Session(db_engine, expire_on_commit=False)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """The production session factory bound to the test database."""
    return create_session_factory(db_engine)


@pytest.fixture
def habit_repo(session_factory) -> SQLModelHabitRepository:
    return SQLModelHabitRepository(session_factory)


@pytest.fixture
def settings_repo(session_factory) -> SQLModelSettingsRepository:
    return SQLModelSettingsRepository(session_factory)


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def today() -> str:
    return TODAY


@pytest.fixture
def habit_factory(db_session):
    """Factory for creating and persisting habits.

    Returns:
        Callable: Function that creates Habit instances
    """

    def _create_habit(
        name: str = "Test Habit",
        category: HabitCategory = HabitCategory.HEALTH,
        habit_type: HabitType = HabitType.DAILY,
        created_at: datetime | None = None,
        archived_at: datetime | None = None,
        **kwargs,
    ) -> Habit:
        habit = Habit(
            name=name,
            category=category,
            habit_type=habit_type,
            created_at=created_at or datetime(2024, 1, 1, 9, 0),
            archived_at=archived_at,
            **kwargs,
        )
        db_session.add(habit)
        db_session.commit()
        db_session.refresh(habit)
        return habit

    return _create_habit


@pytest.fixture
def log_factory(db_session):
    """Factory for persisting habit logs on given day identifiers."""

    def _create_log(habit_id: str, log_date: str, value: float = 1.0, notes: str | None = None) -> HabitLog:
        log = HabitLog(habit_id=habit_id, log_date=log_date, value=value, notes=notes)
        db_session.add(log)
        db_session.commit()
        db_session.refresh(log)
        return log

    return _create_log


@pytest.fixture
def make_logs():
    """Build unsaved logs for pure-function tests."""

    def _make(habit_id: str, days: list[str]) -> list[HabitLog]:
        return [HabitLog(habit_id=habit_id, log_date=day) for day in days]

    return _make
