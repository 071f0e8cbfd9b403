from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from expense_dashboard.config import settings

logger = logging.getLogger(__name__)

USER_SETTINGS_KEY = "userSettings"
THEME_KEY = "theme"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NotificationPreferences(_CamelModel):
    email: bool = True
    push: bool = True
    sms: bool = False
    budget_alerts: bool = True
    unusual_activity: bool = True
    weekly_summary: bool = True


class UserSettings(_CamelModel):
    theme: str = "light"
    currency: str = "USD"
    date_format: str = "MM/DD/YYYY"
    dashboard_view: str = "summary"
    show_recent_transactions: bool = True
    notifications: NotificationPreferences = NotificationPreferences()


class PreferencesStore:
    """Key-value preferences kept in a single JSON file.

    Plain last-write-wins storage with no schema versioning: an unreadable
    file or entry is ignored and the defaults are used instead.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path or settings.PREFERENCES_PATH)

    def _read(self) -> dict[str, Any]:
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable preferences file %s: %s", self.path, exc)
            return {}
        return payload if isinstance(payload, dict) else {}

    def _write(self, key: str, value: Any) -> None:
        payload = self._read()
        payload[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def load_settings(self) -> UserSettings:
        raw = self._read().get(USER_SETTINGS_KEY)
        if raw is None:
            return UserSettings()
        try:
            return UserSettings.model_validate(raw)
        except ValidationError as exc:
            logger.warning("Stored user settings are invalid, using defaults: %s", exc)
            return UserSettings()

    def save_settings(self, user_settings: UserSettings) -> None:
        self._write(USER_SETTINGS_KEY, user_settings.model_dump(mode="json", by_alias=True))

    def theme(self) -> str | None:
        value = self._read().get(THEME_KEY)
        return value if isinstance(value, str) else None

    def apply_theme(self, theme: str) -> None:
        self._write(THEME_KEY, theme)
