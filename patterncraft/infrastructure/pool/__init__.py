"""Connection pooling."""

from .connection_pool import DatabaseConnectionPool

__all__ = ["DatabaseConnectionPool"]
