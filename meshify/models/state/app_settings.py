"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from meshify.constants.defaults import (
    BACKEND_URL_DEFAULT,
    LOG_FILE_DEFAULT,
    LOG_LEVEL_DEFAULT,
    PERFORMANCE_WINDOW_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
    REQUEST_TIMEOUT_DEFAULT,
    THEME_DEFAULT,
)
from meshify.constants.limits import (
    PERFORMANCE_WINDOW_MAX,
    PERFORMANCE_WINDOW_MIN,
    REFRESH_INTERVAL_MIN,
    REQUEST_TIMEOUT_MAX,
    REQUEST_TIMEOUT_MIN,
)


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    # Backend
    backend_url: str = BACKEND_URL_DEFAULT
    request_timeout: float = Field(
        default=REQUEST_TIMEOUT_DEFAULT,
        ge=REQUEST_TIMEOUT_MIN,
        le=REQUEST_TIMEOUT_MAX,
    )

    # Polling
    refresh_interval: int = Field(default=REFRESH_INTERVAL_DEFAULT, ge=REFRESH_INTERVAL_MIN)  # seconds
    performance_window: int = Field(
        default=PERFORMANCE_WINDOW_DEFAULT,
        ge=PERFORMANCE_WINDOW_MIN,
        le=PERFORMANCE_WINDOW_MAX,
    )

    # UI preferences
    theme: str = THEME_DEFAULT

    # Logging
    log_level: str = LOG_LEVEL_DEFAULT
    log_file: str = LOG_FILE_DEFAULT

    @field_validator("backend_url")
    @classmethod
    def _strip_backend_url(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value.startswith(("http://", "https://")):
            raise ValueError("backend_url must start with http:// or https://")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.strip().upper() or LOG_LEVEL_DEFAULT


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""
