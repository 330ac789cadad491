"""SQLModel implementation of Habit repository."""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

from sqlmodel import Session, select

from ...errors import HabitNotFoundError
from ...logging_config import get_logger
from ...models.achievement import Achievement
from ...models.habit import Habit, HabitLog
from ...services.habits import validate_habit, validate_log

logger = get_logger(__name__)


class SQLModelHabitRepository:
    """SQLModel-based habit repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get_habit(self, habit_id: str) -> Optional[Habit]:
        """Retrieve a habit by ID."""
        with self.session_factory() as session:
            obj = session.get(Habit, habit_id)
            if obj:
                session.expunge(obj)
            return obj

    def list_habits(self, include_archived: bool = True) -> list[Habit]:
        """List habits, oldest first."""
        with self.session_factory() as session:
            statement = select(Habit).order_by(Habit.created_at)  # type: ignore[arg-type]
            if not include_archived:
                statement = statement.where(Habit.archived_at == None)  # noqa: E711
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def list_active(self) -> list[Habit]:
        """List habits that are not archived."""
        return self.list_habits(include_archived=False)

    def upsert_habit(self, habit: Habit) -> Habit:
        """Create a habit or replace the stored habit with the same ID."""
        validate_habit(habit)
        with self.session_factory() as session:
            merged = session.merge(habit)
            session.commit()
            session.refresh(merged)
            session.expunge(merged)
        logger.info("Habit saved", extra={"habit_id": merged.id, "habit_name": merged.name})
        return merged

    def archive_habit(self, habit_id: str) -> Habit:
        """Stamp a habit as archived; archiving twice keeps the first timestamp."""
        with self.session_factory() as session:
            habit = session.get(Habit, habit_id)
            if habit is None:
                raise HabitNotFoundError(habit_id)
            if habit.archived_at is None:
                habit.archived_at = datetime.now()
                session.add(habit)
                session.commit()
                session.refresh(habit)
                logger.info("Habit archived", extra={"habit_id": habit_id})
            session.expunge(habit)
            return habit

    def delete_habit(self, habit_id: str) -> None:
        """Delete a habit and its logs."""
        with self.session_factory() as session:
            habit = session.get(Habit, habit_id)
            if habit is None:
                return
            logs = session.exec(select(HabitLog).where(HabitLog.habit_id == habit_id)).all()
            for log in logs:
                session.delete(log)
            # Logs must be gone before the habit row because of the foreign key
            session.flush()
            session.delete(habit)
            session.commit()
        logger.info("Habit deleted", extra={"habit_id": habit_id, "logs_deleted": len(logs)})

    # Habit log operations
    def list_habit_logs(self) -> list[HabitLog]:
        """List every stored log ordered by day."""
        with self.session_factory() as session:
            statement = select(HabitLog).order_by(HabitLog.log_date, HabitLog.habit_id)  # type: ignore[arg-type]
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def logs_for_date(self, log_date: str) -> list[HabitLog]:
        """Logs recorded on one day identifier."""
        with self.session_factory() as session:
            rows = list(session.exec(select(HabitLog).where(HabitLog.log_date == log_date)).all())
            session.expunge_all()
            return rows

    def logs_for_habit(self, habit_id: str) -> list[HabitLog]:
        """Logs recorded for one habit, oldest first."""
        with self.session_factory() as session:
            statement = (
                select(HabitLog)
                .where(HabitLog.habit_id == habit_id)
                .order_by(HabitLog.log_date)  # type: ignore[arg-type]
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def upsert_habit_log(self, log: HabitLog) -> HabitLog:
        """Insert a log or overwrite the one already stored for that habit and day."""
        validate_log(log)
        with self.session_factory() as session:
            if session.get(Habit, log.habit_id) is None:
                raise HabitNotFoundError(log.habit_id)

            existing = session.exec(
                select(HabitLog)
                .where(HabitLog.habit_id == log.habit_id)
                .where(HabitLog.log_date == log.log_date)
            ).first()

            if existing:
                existing.value = log.value
                existing.notes = log.notes
                existing.created_at = log.created_at
                target = existing
            else:
                target = log
            session.add(target)
            session.commit()
            session.refresh(target)
            session.expunge(target)

        logger.debug(
            "Habit log saved",
            extra={"habit_id": target.habit_id, "log_date": target.log_date, "replaced": bool(existing)},
        )
        return target

    def delete_habit_log(self, habit_id: str, log_date: str) -> bool:
        """Remove the log for a habit and day."""
        with self.session_factory() as session:
            log = session.exec(
                select(HabitLog)
                .where(HabitLog.habit_id == habit_id)
                .where(HabitLog.log_date == log_date)
            ).first()
            if log is None:
                return False
            session.delete(log)
            session.commit()
        logger.debug("Habit log deleted", extra={"habit_id": habit_id, "log_date": log_date})
        return True

    # Achievements
    def list_achievements(self) -> list[Achievement]:
        with self.session_factory() as session:
            statement = select(Achievement).order_by(Achievement.unlocked_at)  # type: ignore[arg-type]
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def add_achievement(self, achievement: Achievement) -> Achievement:
        with self.session_factory() as session:
            session.add(achievement)
            session.commit()
            session.refresh(achievement)
            session.expunge(achievement)
        logger.info(
            "Achievement unlocked",
            extra={"habit_id": achievement.habit_id, "title": achievement.title},
        )
        return achievement

    def clear_all(self) -> None:
        """Remove every habit, log and achievement."""
        with self.session_factory() as session:
            for model in (HabitLog, Achievement):
                for row in session.exec(select(model)).all():
                    session.delete(row)
            session.flush()
            for habit in session.exec(select(Habit)).all():
                session.delete(habit)
            session.commit()
        logger.warning("All habit data cleared")


__all__ = ["SQLModelHabitRepository"]
