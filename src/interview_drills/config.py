from __future__ import annotations

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DRILLS_",
        extra="ignore",
    )

    # Rate limiter
    rate_limit_max_calls: int = 3
    rate_limit_window_ms: float = 1000.0

    # Task runner
    concurrency_limit: int = 2

    # Logging
    log_level: str = "INFO"
    log_dir: Path | None = None
    max_log_size_mb: int = 10

    @field_validator("rate_limit_window_ms")
    @classmethod
    def _positive_window(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("rate_limit_window_ms must be > 0")
        return v

    @field_validator("rate_limit_max_calls")
    @classmethod
    def _non_negative_calls(cls, v: int) -> int:
        if v < 0:
            raise ValueError("rate_limit_max_calls must be >= 0")
        return v

    @field_validator("concurrency_limit")
    @classmethod
    def _positive_concurrency(cls, v: int) -> int:
        if v < 1:
            raise ValueError("concurrency_limit must be >= 1")
        return v


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
