"""Configuration loader for the screenboard client.

The client itself takes its credentials as constructor arguments; this
module is the opt-in path for applications that keep them in the
environment (or a `.env` file loaded via `src.common.env`).

Exports:
    - ConfigError: Exception for configuration errors
    - ScreenboardSettings: Credentials and endpoint settings
    - load_settings: Load settings from environment
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


DEFAULT_SCREENBOARD_URL = "https://app.datadoghq.com/api/v1/screen"
DEFAULT_TIMEOUT_SEC = 30.0


class ConfigError(Exception):
    """Raised when required configuration is missing or invalid."""


def _get_env(key: str, default: Optional[str] = None, required: bool = False) -> str:
    value = os.getenv(key, default)
    if required and (value is None or value == ""):
        raise ConfigError(f"Missing required environment variable: {key}")
    if value is None:
        raise ConfigError(f"Environment variable {key} is not set and no default provided")
    if value == "" and default is None:
        raise ConfigError(f"Environment variable {key} is empty and no default provided")
    return value


def _float_env(key: str, default: float) -> float:
    raw = os.getenv(key)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigError(f"Invalid float for {key}: {raw}") from exc


@dataclass
class ScreenboardSettings:
    """Credentials and endpoint for the screenboard API.

    Attributes:
        application_key: Datadog application key.
        api_key: Datadog API key.
        api_url: Base URL of the screen endpoints.
        timeout_sec: Per-request timeout handed to the HTTP transport.
    """

    application_key: str
    api_key: str
    api_url: str = DEFAULT_SCREENBOARD_URL
    timeout_sec: float = DEFAULT_TIMEOUT_SEC


def load_settings() -> ScreenboardSettings:
    """Load screenboard settings from environment variables.

    Raises:
        ConfigError: If a key is missing or the timeout is not a number.
    """
    return ScreenboardSettings(
        application_key=_get_env("DATADOG_APP_KEY", required=True),
        api_key=_get_env("DATADOG_API_KEY", required=True),
        api_url=_get_env("DATADOG_SCREENBOARD_URL", default=DEFAULT_SCREENBOARD_URL),
        timeout_sec=_float_env("DATADOG_TIMEOUT_SEC", default=DEFAULT_TIMEOUT_SEC),
    )
