"""Configuration: default API log threshold, read from the environment."""

import os

from pydantic import BaseModel, ValidationError, field_validator

from .constants import LogLevel

# --- Configuration ---

LOG_LEVEL_ENV_VAR = "SCORM_API_LOG_LEVEL"
DEFAULT_LOG_LEVEL = LogLevel.ERROR

_LEVEL_NAMES = {level.name.lower(): level for level in LogLevel}


class ConfigurationError(ValueError):
    """Raised when a configuration value cannot be parsed."""


def parse_log_level(raw) -> LogLevel:
    """Accept a LogLevel, an int 1-5, or a level name / number as a string.

    ``None`` and blank strings fall back to DEFAULT_LOG_LEVEL.
    """
    if raw is None:
        return DEFAULT_LOG_LEVEL
    if isinstance(raw, LogLevel):
        return raw
    if isinstance(raw, str):
        text = raw.strip().lower()
        if not text:
            return DEFAULT_LOG_LEVEL
        if text in _LEVEL_NAMES:
            return _LEVEL_NAMES[text]
        try:
            raw = int(text)
        except ValueError:
            raise ConfigurationError(f"Unknown log level: {raw!r}") from None
    try:
        return LogLevel(raw)
    except ValueError:
        raise ConfigurationError(f"Log level out of range: {raw!r}") from None


class ApiSettings(BaseModel):
    api_log_level: LogLevel = DEFAULT_LOG_LEVEL

    @field_validator("api_log_level", mode="before")
    @classmethod
    def _coerce_log_level(cls, value):
        return parse_log_level(value)

    @classmethod
    def from_env(cls) -> "ApiSettings":
        raw = os.environ.get(LOG_LEVEL_ENV_VAR)
        try:
            return cls(api_log_level=raw)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid {LOG_LEVEL_ENV_VAR}: {raw!r}") from exc
