"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

from .logging_schema import LoggingConfig
from .service_schema import PoolConfig, ServiceConfig


class AppConfig(BaseModel):
    """Application configuration."""

    model_config = ConfigDict(frozen=True)

    version: str = Field("1.0.0", description="Configuration version")
    service: ServiceConfig = Field(default_factory=lambda: ServiceConfig())
    pool: PoolConfig = Field(default_factory=lambda: PoolConfig())
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Create configuration from a nested dictionary."""
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a nested dictionary."""
        return self.model_dump()
