"""Change event auditing.

Two strategies share one ChangeEventGate:
- FieldDiffAuditor: one record per changed leaf field, in `{collection}_logs`
- SnapshotAuditor: one pre/post image record per event, in a fixed collection
"""

from docaudit.audit.auditor import Auditor
from docaudit.audit.classifier import is_meaningful
from docaudit.audit.differ import FieldChange, diff, expand_delete, expand_insert
from docaudit.audit.emitter import AuditRecordEmitter
from docaudit.audit.field_diff import FieldDiffAuditor
from docaudit.audit.gate import ChangeEventGate
from docaudit.audit.handler import ChangeAuditHandler, parse_change_event
from docaudit.audit.snapshot import SnapshotAuditor
from docaudit.audit.strategy import DEFAULT_EXCLUDED_FIELDS, OperationStrategySelector

__all__ = [
    "AuditRecordEmitter",
    "Auditor",
    "ChangeAuditHandler",
    "ChangeEventGate",
    "DEFAULT_EXCLUDED_FIELDS",
    "FieldChange",
    "FieldDiffAuditor",
    "OperationStrategySelector",
    "SnapshotAuditor",
    "diff",
    "expand_delete",
    "expand_insert",
    "is_meaningful",
    "parse_change_event",
]
