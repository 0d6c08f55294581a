"""Audit domain models.

- ChangeEvent for inbound change stream notifications
- FieldChangeRecord and SnapshotAuditRecord for persisted audit data
- AuditResult for the outcome reported to the host
"""

from docaudit.audit.models.event import (
    ChangeEvent,
    LegacyNamespace,
    Namespace,
    OperationType,
)
from docaudit.audit.models.records import (
    AuditRecord,
    FieldChangeRecord,
    SnapshotAuditRecord,
    utc_now,
)
from docaudit.audit.models.result import NO_CHANGES, AuditResult
from docaudit.audit.models.values import Document, is_plain_object, values_equal

__all__ = [
    "AuditRecord",
    "AuditResult",
    "ChangeEvent",
    "Document",
    "FieldChangeRecord",
    "LegacyNamespace",
    "NO_CHANGES",
    "Namespace",
    "OperationType",
    "SnapshotAuditRecord",
    "is_plain_object",
    "utc_now",
    "values_equal",
]
