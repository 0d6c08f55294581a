"""Field-level diff audit strategy."""

from collections.abc import Callable
from datetime import datetime

from docaudit.audit.auditor import Auditor
from docaudit.audit.emitter import AuditRecordEmitter
from docaudit.audit.gate import ChangeEventGate
from docaudit.audit.models import AuditResult, ChangeEvent, utc_now
from docaudit.audit.store import AuditStore
from docaudit.audit.strategy import OperationStrategySelector
from docaudit.observability.logging import get_logger

logger = get_logger(__name__)


class FieldDiffAuditor(Auditor):
    """Writes one record per changed leaf field to `{collection}_logs`."""

    mode = "field_diff"

    def __init__(
        self,
        store: AuditStore,
        gate: ChangeEventGate,
        selector: OperationStrategySelector,
        *,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._gate = gate
        self._selector = selector
        self._emitter = AuditRecordEmitter(store, mode=self.mode)
        self._clock = clock

    async def audit(self, event: ChangeEvent) -> AuditResult:
        collection = self._gate.resolve_collection_name(event)
        if self._gate.is_audit_collection(collection):
            logger.debug("audit_collection_skipped", collection=collection)
            return AuditResult.no_changes("audit collection skipped")

        # Without a source collection there is no log collection to write to
        if collection == self._gate.unknown_sentinel:
            logger.warning("collection_unresolved", mode=self.mode)
            return AuditResult.no_changes("collection unresolved")

        return await self._emitter.emit(
            self._selector.changes_for(event),
            collection=self._gate.log_collection_for(collection),
            document_id=self._gate.resolve_document_id(event),
            operation_type=event.operation_type,
            actor=self._gate.resolve_actor(event),
            timestamp=self._clock(),
        )
