"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_positive_int(name: str, default: int) -> int:
    """Read a strictly positive integer from the environment."""

    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}.") from exc
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}.")
    return value


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "ConsistTracker"
    DB_FILENAME = "consisttracker.db"
    DEFAULT_CALENDAR_DAYS = 365
    DEFAULT_COMPLETION_WINDOW = 30

    def __init__(self) -> None:
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("CONSISTTRACKER_DEV_MODE", default=True)
        self.DATABASE_URL = os.getenv("CONSISTTRACKER_DATABASE_URL", self._build_sqlite_url())
        self.CALENDAR_DAYS = _env_positive_int(
            "CONSISTTRACKER_CALENDAR_DAYS", self.DEFAULT_CALENDAR_DAYS
        )
        self.COMPLETION_WINDOW = _env_positive_int(
            "CONSISTTRACKER_COMPLETION_WINDOW", self.DEFAULT_COMPLETION_WINDOW
        )

    def _resolve_data_dir(self) -> Path:
        """Return the directory where the SQLite file and logs live."""

        data_root = os.getenv("CONSISTTRACKER_DATA_DIR", "instance")
        base_path = Path(data_root).expanduser()
        try:
            path = base_path.resolve()
            path.mkdir(parents=True, exist_ok=True)
            return path
        except PermissionError:
            # Protected install locations fall back to user-local storage.
            fallback_path = Path.home() / f".{self.APP_NAME.lower()}"
            fallback_path.mkdir(parents=True, exist_ok=True)
            return fallback_path.resolve()

    def _build_sqlite_url(self) -> str:
        """Construct the default SQLite URL inside the data directory."""

        db_path = self.DATA_DIR / self.DB_FILENAME
        return f"sqlite:///{db_path}"

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        """Expose engine kwargs for SQLModel to consume."""

        connect_args: dict[str, Any] = {}
        if self.DATABASE_URL.startswith("sqlite"):
            connect_args["check_same_thread"] = False
        return {"connect_args": connect_args}
