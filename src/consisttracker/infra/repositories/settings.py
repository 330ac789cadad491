"""Settings repository for app-level key/value pairs."""

from __future__ import annotations

from typing import Callable, Optional

from sqlmodel import Session

from ...constants import ONBOARDING_COMPLETED_KEY
from ...models.settings import AppSetting


class SQLModelSettingsRepository:
    """SQLModel-based settings repository."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def get(self, key: str) -> Optional[AppSetting]:
        with self.session_factory() as session:
            setting = session.get(AppSetting, key)
            if setting:
                session.expunge(setting)
            return setting

    def set(self, key: str, value: str, description: str | None = None) -> AppSetting:
        with self.session_factory() as session:
            setting = session.get(AppSetting, key)
            if setting:
                setting.value = value
                setting.description = description
            else:
                setting = AppSetting(key=key, value=value, description=description)
            session.add(setting)
            session.commit()
            session.refresh(setting)
            session.expunge(setting)
            return setting

    def delete(self, key: str) -> None:
        with self.session_factory() as session:
            setting = session.get(AppSetting, key)
            if setting:
                session.delete(setting)
                session.commit()

    def onboarding_completed(self) -> bool:
        setting = self.get(ONBOARDING_COMPLETED_KEY)
        return setting is not None and setting.value == "true"

    def mark_onboarding_completed(self) -> None:
        self.set(ONBOARDING_COMPLETED_KEY, "true", "First-run walkthrough finished")


__all__ = ["SQLModelSettingsRepository"]
