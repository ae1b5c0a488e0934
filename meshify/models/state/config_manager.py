"""Settings persistence (YAML file validated through AppSettings)."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from meshify.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "MESHIFY_CONFIG"
BACKEND_URL_ENV = "MESHIFY_BACKEND_URL"


class ConfigManager:
    """Load and save AppSettings as YAML.

    The file location defaults to ``~/.config/meshify/settings.yaml`` and can
    be overridden with the ``MESHIFY_CONFIG`` environment variable.
    """

    DEFAULT_PATH = Path("~/.config/meshify/settings.yaml")

    @classmethod
    def config_path(cls) -> Path:
        override = os.environ.get(CONFIG_PATH_ENV, "").strip()
        return Path(override or cls.DEFAULT_PATH).expanduser()

    @classmethod
    def load(cls, path: Path | None = None) -> AppSettings:
        """Load settings, falling back to defaults when no file exists.

        Raises:
            ConfigLoadError: the file exists but cannot be read or validated.
        """
        config_path = path or cls.config_path()
        raw: dict[str, Any] = {}
        if config_path.exists():
            try:
                loaded = yaml.safe_load(config_path.read_text(encoding="utf-8"))
            except (OSError, yaml.YAMLError) as exc:
                raise ConfigLoadError(f"Cannot read {config_path}: {exc}") from exc
            if loaded is not None and not isinstance(loaded, dict):
                raise ConfigLoadError(f"{config_path} must contain a mapping")
            raw = loaded or {}
        else:
            logger.debug("No settings file at %s, using defaults", config_path)

        env_backend_url = os.environ.get(BACKEND_URL_ENV, "").strip()
        if env_backend_url:
            raw["backend_url"] = env_backend_url

        try:
            return AppSettings.model_validate(raw)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings in {config_path}: {exc}") from exc

    @classmethod
    def save(cls, settings: AppSettings, path: Path | None = None) -> Path:
        """Persist settings and return the written path.

        Raises:
            ConfigSaveError: the file cannot be written.
        """
        config_path = path or cls.config_path()
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            config_path.write_text(
                yaml.safe_dump(settings.model_dump(mode="json"), sort_keys=True),
                encoding="utf-8",
            )
        except OSError as exc:
            raise ConfigSaveError(f"Cannot write {config_path}: {exc}") from exc
        logger.info("Saved settings to %s", config_path)
        return config_path


__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
]
