"""Audit stores for field change and snapshot records."""

from docaudit.audit.store import AuditStore
from docaudit.audit.stores.inmemory import InMemoryAuditStore
from docaudit.audit.stores.mongodb import MongoAuditStore

__all__ = [
    "AuditStore",
    "InMemoryAuditStore",
    "MongoAuditStore",
]
