"""Wires a ChangeAuditHandler from configuration.

Example usage:

    from docaudit.bootstrap import bootstrap

    handler = bootstrap()

    async def on_change(change_event: dict) -> dict:
        result = await handler.handle(change_event)
        return result.to_dict()
"""

from collections.abc import Callable
from datetime import datetime

from docaudit.audit.auditor import Auditor
from docaudit.audit.field_diff import FieldDiffAuditor
from docaudit.audit.gate import ChangeEventGate
from docaudit.audit.handler import ChangeAuditHandler
from docaudit.audit.models import utc_now
from docaudit.audit.snapshot import SnapshotAuditor
from docaudit.audit.store import AuditStore
from docaudit.audit.stores import InMemoryAuditStore, MongoAuditStore
from docaudit.audit.strategy import OperationStrategySelector
from docaudit.config import Settings, get_settings
from docaudit.config.models.storage import StoreBackendConfig
from docaudit.observability.logging import get_logger, setup_logging

logger = get_logger(__name__)


def create_audit_store(config: StoreBackendConfig) -> AuditStore:
    """Create the audit store selected by `storage.audit.backend`."""
    if config.backend == "inmemory":
        return InMemoryAuditStore()

    if not config.connection_url:
        raise ValueError(
            "storage.audit.connection_url is required for the mongodb backend "
            "(set DOCAUDIT_STORAGE__AUDIT__CONNECTION_URL)"
        )
    return MongoAuditStore.from_url(
        config.connection_url,
        config.database,
        timeout_ms=config.timeout_ms,
    )


def create_handler(
    settings: Settings,
    store: AuditStore | None = None,
    *,
    clock: Callable[[], datetime] = utc_now,
) -> ChangeAuditHandler:
    """Build the handler with the strategies listed in `audit.modes`.

    Args:
        settings: Loaded settings
        store: Audit store; created from `storage.audit` when omitted
        clock: Source of record timestamps
    """
    audit = settings.audit
    store = store if store is not None else create_audit_store(settings.storage.audit)
    gate = ChangeEventGate(
        snapshot_collection=audit.snapshot_collection,
        log_collection_suffix=audit.log_collection_suffix,
        unknown_sentinel=audit.unknown_sentinel,
        actor_fallback=audit.actor_fallback,
    )

    auditors: list[Auditor] = []
    for mode in audit.modes:
        if mode == "field_diff":
            selector = OperationStrategySelector(
                audit.excluded_fields,
                missing_pre_image=audit.missing_pre_image,
                max_depth=audit.max_depth,
            )
            auditors.append(FieldDiffAuditor(store, gate, selector, clock=clock))
        else:
            auditors.append(
                SnapshotAuditor(
                    store,
                    gate,
                    trim_unchanged=audit.snapshot.trim_unchanged,
                    max_depth=audit.max_depth,
                    clock=clock,
                )
            )

    logger.info(
        "audit_handler_created",
        modes=[auditor.mode for auditor in auditors],
        backend=type(store).__name__,
    )
    return ChangeAuditHandler(gate, auditors)


def bootstrap(store: AuditStore | None = None) -> ChangeAuditHandler:
    """Load configuration, configure logging and build the handler."""
    settings = get_settings()
    logging_config = settings.observability.logging
    setup_logging(
        level=logging_config.level,
        format=logging_config.format,
        redact_pii=logging_config.redact_pii,
    )
    return create_handler(settings, store)
