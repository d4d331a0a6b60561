"""Process configuration, read once at startup."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from dotenv import load_dotenv

from gpt5_mcp.core.errors import ConfigError

API_KEY_ENV = "OPENAI_API_KEY"
LOG_LEVEL_ENV = "GPT5_MCP_LOG_LEVEL"
TIMEOUT_ENV = "GPT5_MCP_REQUEST_TIMEOUT"


@dataclass(slots=True)
class Settings:
    api_key: str
    log_level: str = "INFO"
    request_timeout: float | None = None


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from the environment.

    A ``.env`` file in the working directory is loaded first when reading the
    real process environment. Raises :class:`ConfigError` when the API key is
    missing or an optional value cannot be parsed.
    """

    if environ is None:
        load_dotenv()
        environ = os.environ

    api_key = environ.get(API_KEY_ENV, "").strip()
    if not api_key:
        raise ConfigError(f"{API_KEY_ENV} environment variable is required")

    return Settings(
        api_key=api_key,
        log_level=environ.get(LOG_LEVEL_ENV, "INFO").strip() or "INFO",
        request_timeout=_parse_timeout(environ.get(TIMEOUT_ENV)),
    )


def _parse_timeout(raw: str | None) -> float | None:
    if raw is None or not raw.strip():
        return None

    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigError(f"{TIMEOUT_ENV} must be a number of seconds, got {raw!r}") from exc

    if value <= 0:
        raise ConfigError(f"{TIMEOUT_ENV} must be positive, got {raw!r}")
    return value
