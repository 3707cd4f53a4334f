"""Runtime settings for the box defaults tooling."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .observability import DEFAULT_LOG_LEVEL


def env_field(default, env_name: str):
    return Field(default, validation_alias=env_name)


class BoxDefaultsSettings(BaseSettings):
    """Environment overrides for where box defaults are read from and how loudly."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    defaults_path: Optional[Path] = env_field(None, "BOXDEFAULTS_PATH")
    log_level: str = env_field(DEFAULT_LOG_LEVEL, "BOXDEFAULTS_LOG_LEVEL")
