"""Configuration package."""

from vehicle_patterns.config.manager import ConfigurationManager
from vehicle_patterns.config.schemas import AppConfig, LoggingConfig
from vehicle_patterns.config.utils import expand_env_vars

__all__ = ["AppConfig", "LoggingConfig", "ConfigurationManager", "expand_env_vars"]
