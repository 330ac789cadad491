"""Database infrastructure for the habit store."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Tuple

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, create_engine

from ..config import BaseConfig
from ..errors import StorageError
from ..logging_config import get_logger

logger = get_logger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:  # pragma: no cover - driver hook
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(config: BaseConfig) -> Engine:
    """Create SQLModel engine from configuration."""
    engine = create_engine(config.DATABASE_URL, **config.sqlalchemy_engine_options())
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def init_database(engine: Engine) -> None:
    """Initialize database schema.

    Raises ``StorageError`` when the database cannot be opened or migrated,
    for example when the SQLite file is not a database.
    """
    # Import all models to ensure they're registered
    from .. import models  # noqa: F401

    try:
        SQLModel.metadata.create_all(engine)
    except SQLAlchemyError as exc:
        logger.error("Database initialization failed", exc_info=True)
        raise StorageError(f"Cannot open database: {exc}") from exc


def create_session_factory(engine: Engine):
    """Create a session factory function.

    Database failures surface as ``StorageError`` after the transaction is
    rolled back.
    """

    @contextmanager
    def factory() -> Iterator[Session]:
        session = Session(engine, expire_on_commit=False)
        try:
            yield session
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            logger.error("Database operation failed", exc_info=True)
            raise StorageError(str(exc)) from exc
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    return factory


def bootstrap_database(config: BaseConfig | None = None) -> Tuple:
    """Convenience bootstrap for engine + session_factory with schema init.

    Returns (engine, session_factory).
    """

    cfg = config or BaseConfig()
    engine = create_db_engine(cfg)
    init_database(engine)
    logger.info("Database ready", extra={"database_url": cfg.DATABASE_URL})
    return engine, create_session_factory(engine)
