"""Storage backend configuration models."""

from typing import Literal

from pydantic import BaseModel, Field

BackendType = Literal["inmemory", "mongodb"]


class StoreBackendConfig(BaseModel):
    """Configuration for a single store backend."""

    backend: BackendType = Field(
        default="inmemory",
        description="Backend type",
    )
    connection_url: str | None = Field(
        default=None,
        description="Connection URL (from env var)",
    )
    database: str = Field(
        default="test",
        min_length=1,
        description="Database holding the audit collections",
    )
    timeout_ms: int = Field(
        default=10_000,
        gt=0,
        description="Server selection and write timeout in milliseconds",
    )


class StorageConfig(BaseModel):
    """Storage configuration for all stores."""

    audit: StoreBackendConfig = Field(
        default_factory=StoreBackendConfig,
        description="Audit store backend",
    )
