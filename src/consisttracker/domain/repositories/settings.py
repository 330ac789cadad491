"""Settings repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.settings import AppSetting


class SettingsRepository(Protocol):
    """Key/value store for application flags."""

    def get(self, key: str) -> Optional[AppSetting]:
        ...

    def set(self, key: str, value: str, description: str | None = None) -> AppSetting:
        ...

    def delete(self, key: str) -> None:
        ...

    def onboarding_completed(self) -> bool:
        """Whether the first-run walkthrough has been finished."""
        ...

    def mark_onboarding_completed(self) -> None:
        ...
