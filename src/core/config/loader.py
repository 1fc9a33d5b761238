# src/core/config/loader.py
"""
Settings loading for the operator backend.

Values are layered as: environment > .env > config.yml > defaults.
``OPERATOR_ROOT`` relocates the project root and ``OPERATOR_CONFIG_PATH``
points at a different YAML file.
"""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, YamlConfigSettingsSource

from .schema import OperatorSettings

logger = logging.getLogger(__name__)

# src/core/config/loader.py -> repository root
PROJECT_ROOT = Path(os.getenv("OPERATOR_ROOT") or Path(__file__).resolve().parents[3])
LOG_DIR = Path(os.getenv("OPERATOR_LOG_DIR", str(PROJECT_ROOT / "logs")))

load_dotenv(dotenv_path=PROJECT_ROOT / ".env")


def resolve_config_path() -> Path:
    """OPERATOR_CONFIG_PATH if set, otherwise PROJECT_ROOT / config.yml."""
    return Path(os.getenv("OPERATOR_CONFIG_PATH") or PROJECT_ROOT / "config.yml")


def _settings_class(config_path: Path) -> type[OperatorSettings]:
    """OperatorSettings with ``config_path`` layered under the env sources."""

    class FileBackedSettings(OperatorSettings):
        @classmethod
        def settings_customise_sources(
            cls,
            settings_cls: type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,
            file_secret_settings: PydanticBaseSettingsSource,
        ) -> tuple[PydanticBaseSettingsSource, ...]:
            return (
                init_settings,
                env_settings,
                dotenv_settings,
                YamlConfigSettingsSource(settings_cls, yaml_file=config_path, yaml_file_encoding="utf-8"),
                file_secret_settings,
            )

    return FileBackedSettings


class ConfigManager:
    _instance = None
    _settings: Optional[OperatorSettings] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def load_config(self, force_reload: bool = False) -> None:
        if self._settings is not None and not force_reload:
            return

        config_path = resolve_config_path()
        try:
            self._settings = _settings_class(config_path)()
            logger.info("Settings loaded (config file: %s)", config_path)
        except (ValidationError, yaml.YAMLError) as e:
            logger.error("Invalid configuration in %s, using defaults: %s", config_path, e)
            self._settings = OperatorSettings()

    @property
    def settings(self) -> OperatorSettings:
        if self._settings is None:
            self.load_config()
        return self._settings


config_manager = ConfigManager()


class SettingsProxy:
    """Module-level ``settings`` that always reflects the latest load."""

    def __getattr__(self, name):
        return getattr(config_manager.settings, name)


settings = SettingsProxy()
