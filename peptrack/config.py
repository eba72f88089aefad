"""Application settings loaded from environment variables."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _env_file() -> str | None:
    if os.getenv("PYTEST_CURRENT_TEST"):
        return None
    return ".env"


class Settings(BaseSettings):
    """PepTrack reminder configuration. All values come from environment variables."""

    # Reminder polling
    reminders_enabled: bool = Field(default=True)
    reminder_check_interval_minutes: float = Field(default=5.0, gt=0)
    reminder_retention_minutes: float = Field(default=60.0, gt=0)

    # Backend (source of due reminders)
    reminder_backend_url: str = Field(default="http://127.0.0.1:8765")
    reminder_request_timeout_seconds: float = Field(default=10.0, gt=0)

    # Notifications
    app_name: str = Field(default="PepTrack")
    desktop_notifications_enabled: bool = Field(default=True)
    toast_with_native: bool = Field(default=True)

    # Logging
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(env_file=_env_file(), env_file_encoding="utf-8")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        if os.getenv("PYTEST_CURRENT_TEST"):
            return (init_settings,)
        return (init_settings, env_settings, dotenv_settings, file_secret_settings)

    def reminder_check_interval_seconds(self) -> float:
        """Poll interval converted to seconds."""
        return self.reminder_check_interval_minutes * 60

    def reminder_retention_seconds(self) -> float:
        """Dedup retention window converted to seconds."""
        return self.reminder_retention_minutes * 60


settings = Settings()
