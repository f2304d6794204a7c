"""Application configuration with startup validation.

All config is validated at import time via pydantic-settings.
Environment variables use the SLEEP_TRACKER_ prefix; CLI flags
override the storage URL and log format per run.
"""

from pydantic import model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "SLEEP_TRACKER_", "env_file": ".env"}

    # Storage
    database_url: str = "sqlite:///tracker.sqlite"

    # Logging
    log_level: str = "WARNING"
    log_json: bool = False

    # Reporting windows
    short_window_days: int = 7
    long_window_days: int = 30
    recent_entries_limit: int = 5

    @model_validator(mode="after")
    def validate_windows(self) -> "Settings":
        """Fail fast at startup if the reporting windows make no sense."""
        if self.short_window_days <= 0 or self.long_window_days <= 0:
            raise ValueError(
                "Reporting windows must be positive. "
                f"Got short={self.short_window_days}, long={self.long_window_days}"
            )
        if self.short_window_days > self.long_window_days:
            raise ValueError(
                f"short_window_days ({self.short_window_days}) must not exceed "
                f"long_window_days ({self.long_window_days})"
            )
        return self


settings = Settings()
