"""Whole-document snapshot audit strategy.

Stores the pre-image and post-image of every change event in a single
audit collection without field-level diffing. Every processed event
produces exactly one record, whether or not any field changed.
"""

from collections.abc import Callable
from datetime import datetime
from typing import Any

from docaudit.audit.auditor import Auditor
from docaudit.audit.differ import DEFAULT_MAX_DEPTH, diff
from docaudit.audit.gate import ChangeEventGate
from docaudit.audit.models import (
    AuditResult,
    ChangeEvent,
    OperationType,
    SnapshotAuditRecord,
    utc_now,
)
from docaudit.audit.store import AuditStore
from docaudit.observability.logging import get_logger
from docaudit.observability.metrics import RECORDS_WRITTEN, WRITE_FAILURES

logger = get_logger(__name__)

ID_FIELD = "_id"


class SnapshotAuditor(Auditor):
    """Writes pre/post images to one fixed audit collection."""

    mode = "snapshot"

    def __init__(
        self,
        store: AuditStore,
        gate: ChangeEventGate,
        *,
        trim_unchanged: bool = False,
        max_depth: int = DEFAULT_MAX_DEPTH,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize the auditor.

        Args:
            store: Audit store receiving the records
            gate: Shared gate; its snapshot collection is the target
            trim_unchanged: Keep only changed top-level keys in the
                images of update/replace events
            max_depth: Nesting bound for computing changed paths
            clock: Source of record timestamps
        """
        self._store = store
        self._gate = gate
        self._trim_unchanged = trim_unchanged
        self._max_depth = max_depth
        self._clock = clock

    def build_record(self, event: ChangeEvent, timestamp: datetime) -> SnapshotAuditRecord:
        """Build the snapshot record of one event."""
        operation = event.operation_type
        before = event.full_document_before_change
        after = event.full_document
        pre_image: dict[str, Any] | None = None
        post_image: dict[str, Any] | None = None
        changed_fields: list[str] = []

        if operation == OperationType.INSERT:
            post_image = after
            changed_fields = _document_fields(after)
        elif operation in (OperationType.UPDATE, OperationType.REPLACE):
            pre_image, post_image = before, after
            if before is not None and after is not None:
                changed = self._changed_paths_by_key(before, after)
                changed_fields = [path for paths in changed.values() for path in paths]
                if self._trim_unchanged:
                    pre_image = _select(before, changed)
                    post_image = _select(after, changed)
        elif operation == OperationType.DELETE:
            pre_image = before
            changed_fields = _document_fields(before)

        return SnapshotAuditRecord(
            operation_type=operation,
            collection_name=self._gate.resolve_collection_name(event),
            document_id=self._gate.resolve_document_id(event),
            timestamp=timestamp,
            changed_fields=changed_fields,
            pre_image=pre_image,
            post_image=post_image,
        )

    def _changed_paths_by_key(
        self, before: dict[str, Any], after: dict[str, Any]
    ) -> dict[str, list[str]]:
        """Changed paths grouped by the top-level key they belong to.

        Trimmed images and `changed_fields` are both derived from this
        mapping. A key present on only one side is a change even when
        its value is empty.
        """
        keys = list(before)
        keys.extend(key for key in after if key not in before)

        changed: dict[str, list[str]] = {}
        for key in keys:
            if key == ID_FIELD:
                continue
            old = {key: before[key]} if key in before else {}
            new = {key: after[key]} if key in after else {}
            paths = [change.path for change in diff(old, new, max_depth=self._max_depth)]
            if not paths and (key in before) != (key in after):
                paths = [str(key)]
            if paths:
                changed[key] = paths
        return changed

    async def audit(self, event: ChangeEvent) -> AuditResult:
        if not self._gate.should_process(event):
            logger.debug("audit_collection_skipped", mode=self.mode)
            return AuditResult.no_changes("audit collection skipped")

        record = self.build_record(event, self._clock())
        collection = self._gate.snapshot_collection
        try:
            written = await self._store.append_batch(collection, [record])
        except Exception as e:
            logger.error("snapshot_write_failed", collection=collection, error=str(e))
            WRITE_FAILURES.labels(collection=collection, mode=self.mode).inc()
            return AuditResult.failed(str(e))

        RECORDS_WRITTEN.labels(collection=collection, mode=self.mode).inc(written)
        logger.info(
            "snapshot_created",
            collection=collection,
            changed_field_count=len(record.changed_fields),
        )
        return AuditResult.created(written)


def _document_fields(document: dict[str, Any] | None) -> list[str]:
    if document is None:
        return []
    return [key for key in document if key != ID_FIELD]


def _select(document: dict[str, Any], keys: dict[str, list[str]]) -> dict[str, Any]:
    return {key: document[key] for key in keys if key in document}
