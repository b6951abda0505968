"""
Settings/secret loading helpers for the command line front-end.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from ..api.client import DEFAULT_TIMEOUT_SECONDS
from ..util.uri import API_URL

LEGACY_TOKEN_VAR = "FORECAST_TOKEN"


class ConfigError(RuntimeError):
    """Raised when settings are missing or invalid."""


def _load_dotenv() -> None:
    cwd_env = Path.cwd() / ".env"
    if cwd_env.exists():
        load_dotenv(dotenv_path=cwd_env, override=True)


_load_dotenv()


class Settings(BaseModel):
    """
    Values loaded from environment variables.

    Attributes:
        token: DarkSky API token.
        api_url: API root, overridable for proxies and test servers.
        timeout: Request timeout in seconds.
        log_level: Logging level name used by the CLI.
    """
    token: Optional[str] = Field(default=None, alias="DARKSKY_TOKEN")
    api_url: str = Field(default=API_URL, alias="DARKSKY_API_URL")
    timeout: float = Field(default=DEFAULT_TIMEOUT_SECONDS, alias="DARKSKY_TIMEOUT", gt=0)
    log_level: Optional[str] = Field(default=None, alias="DARKSKY_LOG_LEVEL")

    model_config = {
        "populate_by_name": True,
    }

    def require_token(self) -> str:
        if not self.token:
            raise ConfigError(f"No API token configured. Set DARKSKY_TOKEN (or {LEGACY_TOKEN_VAR}) or pass --token.")
        return self.token


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Load settings from environment/.env exactly once.

    Returns:
        A Settings object populated from environment variables.

    Raises:
        ConfigError: If a variable holds an invalid value.
    """
    values = {field.alias: os.getenv(field.alias) for field in Settings.model_fields.values()}
    if not values.get("DARKSKY_TOKEN"):
        values["DARKSKY_TOKEN"] = os.getenv(LEGACY_TOKEN_VAR)
    values = {key: value for key, value in values.items() if value not in (None, "")}
    try:
        return Settings(**values)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
