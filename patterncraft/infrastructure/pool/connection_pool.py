"""Database connection pool manager."""

import time
from typing import Optional

from patterncraft.config.schemas import PoolConfig
from patterncraft.domain.core.exceptions import OutOfRangeError
from patterncraft.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class DatabaseConnectionPool:
    """
    Simulated connection pool.

    Meant to exist once per process; obtain it with
    ``get_singleton(DatabaseConnectionPool)`` or construct one and register it.
    """

    def __init__(self, config: Optional[PoolConfig] = None):
        config = config or PoolConfig()
        if config.max_connections < 1:
            raise OutOfRangeError("max_connections", config.max_connections, ">= 1")
        self._max_connections = config.max_connections
        logger.info("Database pool initialized", max_connections=self._max_connections)

    @property
    def max_connections(self) -> int:
        return self._max_connections

    def acquire_connection(self) -> str:
        return f"conn-{time.time_ns()}"
