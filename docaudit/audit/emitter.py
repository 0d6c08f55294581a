"""Turns field changes into persisted FieldChangeRecords."""

from collections.abc import Iterable
from datetime import datetime

from docaudit.audit.differ import FieldChange
from docaudit.audit.models import AuditResult, FieldChangeRecord
from docaudit.audit.store import AuditStore
from docaudit.errors import StoreWriteError
from docaudit.observability.logging import get_logger
from docaudit.observability.metrics import (
    RECORDS_PER_EVENT,
    RECORDS_WRITTEN,
    WRITE_FAILURES,
)

logger = get_logger(__name__)


class AuditRecordEmitter:
    """Writes the records of one change event as a single batch.

    Store failures stop here: they are logged and returned as an error
    result so the hosting event processor keeps running.
    """

    def __init__(self, store: AuditStore, *, mode: str = "field_diff") -> None:
        self._store = store
        self._mode = mode

    async def emit(
        self,
        changes: Iterable[FieldChange],
        *,
        collection: str,
        document_id: str,
        operation_type: str,
        actor: str,
        timestamp: datetime,
    ) -> AuditResult:
        """Persist one record per change.

        Args:
            changes: Field changes of a single event
            collection: Audit collection receiving the records
            document_id: Affected document
            operation_type: Operation kind of the event
            actor: Attributed actor
            timestamp: Shared by every record of the batch

        Returns:
            AuditResult with the number of entries created, "no changes"
            when there was nothing to write, or the write error
        """
        records = [
            FieldChangeRecord(
                document_id=document_id,
                operation_type=operation_type,
                changed_field=change.path,
                old_value=change.old_value,
                new_value=change.new_value,
                updated_by=actor,
                timestamp=timestamp,
            )
            for change in changes
        ]
        RECORDS_PER_EVENT.labels(operation_type=operation_type).observe(len(records))

        if not records:
            logger.info("audit_no_changes", collection=collection)
            return AuditResult.no_changes()

        try:
            written = await self._store.append_batch(collection, records)
        except Exception as e:
            logger.error(
                "audit_write_failed",
                collection=collection,
                record_count=len(records),
                committed=e.written if isinstance(e, StoreWriteError) else 0,
                error=str(e),
            )
            WRITE_FAILURES.labels(collection=collection, mode=self._mode).inc()
            return AuditResult.failed(str(e))

        RECORDS_WRITTEN.labels(collection=collection, mode=self._mode).inc(written)
        logger.info("audit_entries_created", collection=collection, count=written)
        return AuditResult.created(written)
