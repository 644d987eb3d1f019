"""Configuration management for the example programs."""
from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from vehicle_patterns.config.schemas import AppConfig, LoggingConfig
from vehicle_patterns.config.utils import expand_env_vars
from vehicle_patterns.domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "VEHICLE_PATTERNS_"


class ConfigurationManager:
    """
    Single source of truth for example configuration.

    Sources, lowest precedence first:
    - schema defaults
    - an optional JSON or YAML file
    - VEHICLE_PATTERNS_* environment variables

    The configuration is loaded lazily on first access.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file or os.environ.get(f"{ENV_PREFIX}CONFIG")
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def get_app_config(self) -> AppConfig:
        """Get the validated application configuration."""
        return self.app_config

    def get_logging_config(self) -> LoggingConfig:
        """Get the logging section."""
        return self.app_config.logging

    def reload(self) -> AppConfig:
        """Drop the cached configuration and load it again."""
        with self._lock:
            self._app_config = None
        return self.app_config

    def _load_app_config(self) -> AppConfig:
        data = self._read_file() if self._config_file else {}
        data = expand_env_vars(data)
        self._apply_env_overrides(data)
        try:
            return AppConfig.model_validate(data)
        except PydanticValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e.error_count()} error(s)",
                missing_fields=[".".join(str(p) for p in err["loc"]) for err in e.errors()],
            ) from e

    def _read_file(self) -> Dict[str, Any]:
        path = Path(self._config_file)
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                if path.suffix in (".yml", ".yaml"):
                    data = yaml.safe_load(f) or {}
                else:
                    data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Could not parse configuration file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")
        logger.debug("Loaded configuration from %s", path)
        return data

    @staticmethod
    def _apply_env_overrides(data: Dict[str, Any]) -> None:
        level = os.environ.get(f"{ENV_PREFIX}LOG_LEVEL")
        if level:
            data.setdefault("logging", {})["level"] = level

        destination = os.environ.get(f"{ENV_PREFIX}LOG_DESTINATION")
        if destination:
            data.setdefault("logging", {})["destination"] = destination

        output_format = os.environ.get(f"{ENV_PREFIX}OUTPUT_FORMAT")
        if output_format:
            data["output_format"] = output_format
