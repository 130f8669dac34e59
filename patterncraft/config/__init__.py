"""Configuration package.

Schemas are exported here; the manager lives in ``patterncraft.config.manager``.
"""

from patterncraft.config.schemas import AppConfig, LoggingConfig, PoolConfig, ServiceConfig

__all__ = ["AppConfig", "LoggingConfig", "PoolConfig", "ServiceConfig"]
