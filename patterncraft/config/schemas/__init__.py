"""Configuration schemas."""

from .app_schema import AppConfig
from .logging_schema import LoggingConfig
from .service_schema import PoolConfig, ServiceConfig

__all__ = ["AppConfig", "LoggingConfig", "PoolConfig", "ServiceConfig"]
