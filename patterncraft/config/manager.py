"""Unified configuration management for the application."""
from __future__ import annotations

import json
import os
import threading
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from patterncraft.config.schemas import AppConfig, LoggingConfig, PoolConfig, ServiceConfig
from patterncraft.domain.core.exceptions import ConfigurationError
from patterncraft.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

ENV_PREFIX = "PATTERNCRAFT_"
CONFIG_FILE_ENV = "PATTERNCRAFT_CONFIG_FILE"


class ConfigurationManager:
    """
    Single source of truth for application configuration.

    Configuration is assembled lazily on first access from, in order of
    precedence:
    - environment variables named ``PATTERNCRAFT_<SECTION>_<KEY>``
      (for example ``PATTERNCRAFT_SERVICE_TIMEOUT``)
    - an optional JSON file
    - schema defaults

    One instance is normally obtained through ``get_singleton``; tests and
    callers that want isolation construct their own and pass it explicitly.
    """

    def __init__(
        self,
        config_file: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._environ = environ
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def config_file(self) -> Optional[str]:
        if self._config_file:
            return self._config_file
        return self._env().get(CONFIG_FILE_ENV) or None

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def get_config(self) -> AppConfig:
        return self.app_config

    def get_service_config(self) -> ServiceConfig:
        return self.app_config.service

    def get_pool_config(self) -> PoolConfig:
        return self.app_config.pool

    def get_logging_config(self) -> LoggingConfig:
        return self.app_config.logging

    def update_config(self, config: AppConfig) -> None:
        """Replace the active configuration."""
        if not isinstance(config, AppConfig):
            raise ConfigurationError(
                f"Expected AppConfig, got {type(config).__name__}"
            )
        with self._lock:
            self._app_config = config
        logger.info("Configuration updated", version=config.version)

    def reload(self) -> None:
        """Reload configuration from sources on next access."""
        with self._lock:
            self._app_config = None

    def _env(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def _load_app_config(self) -> AppConfig:
        config_data: Dict[str, Any] = {}
        path = self.config_file
        if path:
            if os.path.exists(path):
                config_data = self._load_from_file(path)
            else:
                logger.warning("Configuration file not found, using defaults", path=path)

        config_data = self._apply_environment_overrides(config_data)

        try:
            config = AppConfig.from_dict(config_data)
        except PydanticValidationError as e:
            raise ConfigurationError(
                "Invalid configuration", {"errors": e.errors(include_url=False)}
            ) from e

        logger.debug("Configuration loaded", source=path or "defaults")
        return config

    def _load_from_file(self, path: str) -> Dict[str, Any]:
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Failed to read configuration file {path}: {e}", {"path": path}
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {path} must contain a JSON object", {"path": path}
            )
        return data

    def _apply_environment_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Overlay PATTERNCRAFT_<SECTION>_<KEY> variables onto ``config_data``."""
        result = {k: dict(v) if isinstance(v, dict) else v for k, v in config_data.items()}
        sections = [
            name
            for name, info in AppConfig.model_fields.items()
            if isinstance(info.annotation, type) and issubclass(info.annotation, BaseModel)
        ]

        for env_name, value in self._env().items():
            if not env_name.startswith(ENV_PREFIX) or env_name == CONFIG_FILE_ENV:
                continue
            remainder = env_name[len(ENV_PREFIX):].lower()
            for section in sections:
                if remainder.startswith(section + "_"):
                    key = remainder[len(section) + 1:]
                    result.setdefault(section, {})[key] = value
                    logger.debug("Applied environment override", variable=env_name)
                    break
        return result
