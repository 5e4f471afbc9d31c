"""
Settings for the object-location CLI.

Env vars and defaults in one place; CLI args override after loading .env.
Uses pydantic-settings so env-derived values are validated and documented.
"""

from __future__ import annotations

from pathlib import Path

import dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def load_dotenv(path: Path) -> None:
    """Load .env from path into os.environ if the file exists."""
    if path.exists():
        dotenv.load_dotenv(path.resolve())


class ObjectLocationSettings(BaseSettings):
    """
    Env-derived values for the CLI.
    Env vars are read from os.environ with the OBJECT_LOCATION_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="OBJECT_LOCATION_",
        extra="ignore",
    )

    log_level: str = Field(
        default="WARNING",
        description="Root log level (OBJECT_LOCATION_LOG_LEVEL)",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> str:
        s = v.strip().upper() if isinstance(v, str) else ""
        return s if s in _LOG_LEVELS else "WARNING"


def get_settings(
    env_file: Path | None = None,
    log_level: str | None = None,
) -> ObjectLocationSettings:
    """
    Load .env from env_file (if set), build settings from env, apply overrides.

    Call after parsing CLI: pass args.env_file and args.log_level.
    """
    if env_file is not None:
        load_dotenv(Path(env_file).resolve())

    if log_level is not None:
        return ObjectLocationSettings(log_level=log_level)
    return ObjectLocationSettings()
