from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from humanerr.common import AppInfo, LoggingConfig
from humanerr.constants import ENV_PREFIX


class Settings(BaseSettings):
    app: AppInfo = AppInfo()
    logging: LoggingConfig = LoggingConfig()
    messages_file: Path | None = None

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        nested_model_default_partial_update=True,
    )


__all__ = [
    "AppInfo",
    "LoggingConfig",
    "Settings",
]
