"""Service and connection pool configuration schemas."""

from pydantic import BaseModel, ConfigDict, Field


class ServiceConfig(BaseModel):
    """Connection settings for the backing service."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field("api-key-123", description="API key sent to the service")
    db_url: str = Field("jdbc:postgresql://localhost", description="Database URL")
    timeout: int = Field(30, ge=0, description="Timeout in seconds")


class PoolConfig(BaseModel):
    """Connection pool sizing."""

    model_config = ConfigDict(frozen=True)

    max_connections: int = Field(10, ge=1, description="Maximum pooled connections")
