"""Tests for environment-driven configuration."""

from __future__ import annotations

import pytest

from consisttracker.config import BaseConfig


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    for name in (
        "CONSISTTRACKER_DATABASE_URL",
        "CONSISTTRACKER_DEV_MODE",
        "CONSISTTRACKER_CALENDAR_DAYS",
        "CONSISTTRACKER_COMPLETION_WINDOW",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("CONSISTTRACKER_DATA_DIR", str(tmp_path / "data"))


def test_defaults(tmp_path):
    config = BaseConfig()

    assert config.DATA_DIR == (tmp_path / "data").resolve()
    assert config.DATA_DIR.is_dir()
    assert config.DATABASE_URL == f"sqlite:///{config.DATA_DIR / 'consisttracker.db'}"
    assert config.DEV_MODE is True
    assert config.CALENDAR_DAYS == 365
    assert config.COMPLETION_WINDOW == 30


def test_overrides(monkeypatch):
    monkeypatch.setenv("CONSISTTRACKER_DATABASE_URL", "sqlite://")
    monkeypatch.setenv("CONSISTTRACKER_DEV_MODE", "off")
    monkeypatch.setenv("CONSISTTRACKER_CALENDAR_DAYS", "90")
    monkeypatch.setenv("CONSISTTRACKER_COMPLETION_WINDOW", "7")

    config = BaseConfig()

    assert config.DATABASE_URL == "sqlite://"
    assert config.DEV_MODE is False
    assert config.CALENDAR_DAYS == 90
    assert config.COMPLETION_WINDOW == 7


@pytest.mark.parametrize("value", ["0", "-3", "abc"])
def test_invalid_window_rejected(monkeypatch, value):
    monkeypatch.setenv("CONSISTTRACKER_COMPLETION_WINDOW", value)
    with pytest.raises(ValueError):
        BaseConfig()


def test_sqlite_engine_options():
    options = BaseConfig().sqlalchemy_engine_options()
    assert options["connect_args"]["check_same_thread"] is False
