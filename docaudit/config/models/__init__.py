"""Configuration model exports.

    from docaudit.config.models import AuditConfig, StorageConfig
"""

from docaudit.config.models.audit import (
    AuditConfig,
    AuditMode,
    MissingPreImagePolicy,
    SnapshotConfig,
)
from docaudit.config.models.observability import (
    LoggingConfig,
    ObservabilityConfig,
)
from docaudit.config.models.storage import StorageConfig, StoreBackendConfig

__all__ = [
    # Audit
    "AuditConfig",
    "AuditMode",
    "MissingPreImagePolicy",
    "SnapshotConfig",
    # Observability
    "LoggingConfig",
    "ObservabilityConfig",
    # Storage
    "StorageConfig",
    "StoreBackendConfig",
]
