"""Host-facing entry point for change event auditing.

The event-delivery host calls `handle` once per change event, possibly
concurrently for different documents. The handler keeps no state
between calls and always returns a result, never an exception.
"""

from collections.abc import Mapping, Sequence
from typing import Any

import structlog
from pydantic import ValidationError

from docaudit.audit.auditor import Auditor
from docaudit.audit.gate import ChangeEventGate
from docaudit.audit.models import AuditResult, ChangeEvent
from docaudit.errors import InvalidChangeEventError
from docaudit.observability.logging import get_logger
from docaudit.observability.metrics import EVENTS_PROCESSED

logger = get_logger(__name__)


def parse_change_event(payload: ChangeEvent | Mapping[str, Any]) -> ChangeEvent:
    """Validate a raw change event payload.

    Raises:
        InvalidChangeEventError: If the payload is not a change event
    """
    if isinstance(payload, ChangeEvent):
        return payload
    if not isinstance(payload, Mapping):
        raise InvalidChangeEventError(
            f"Change event must be a mapping, got {type(payload).__name__}"
        )
    try:
        return ChangeEvent.model_validate(dict(payload))
    except ValidationError as e:
        raise InvalidChangeEventError(
            f"Invalid change event: {e.error_count()} validation error(s)"
        ) from e


class ChangeAuditHandler:
    """Dispatches each change event to the configured audit strategies."""

    def __init__(self, gate: ChangeEventGate, auditors: Sequence[Auditor]) -> None:
        """Initialize the handler.

        Args:
            gate: Gate shared with the auditors, used for log context
            auditors: Strategies run in order for every event
        """
        self._gate = gate
        self._auditors = list(auditors)

    @property
    def modes(self) -> list[str]:
        return [auditor.mode for auditor in self._auditors]

    async def handle(self, payload: ChangeEvent | Mapping[str, Any]) -> AuditResult:
        """Audit one change event.

        Returns:
            Combined AuditResult of all strategies; call `to_dict()` for
            the host representation
        """
        try:
            event = parse_change_event(payload)
        except InvalidChangeEventError as e:
            logger.error("change_event_invalid", error=e.message)
            return AuditResult.failed(e.message)

        collection = self._gate.resolve_collection_name(event)
        with structlog.contextvars.bound_contextvars(
            collection=collection,
            document_id=self._gate.resolve_document_id(event),
            operation_type=event.operation_type,
        ):
            results = []
            for auditor in self._auditors:
                try:
                    result = await auditor.audit(event)
                except Exception as e:
                    logger.exception("audit_failed", mode=auditor.mode)
                    result = AuditResult.failed(str(e))
                EVENTS_PROCESSED.labels(
                    collection=collection,
                    mode=auditor.mode,
                    outcome=_outcome(result),
                ).inc()
                results.append(result)

        return AuditResult.combine(results)


def _outcome(result: AuditResult) -> str:
    if result.error is not None:
        return "error"
    return "written" if result.entries_created else "skipped"
