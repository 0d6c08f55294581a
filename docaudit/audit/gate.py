"""Entry checks shared by every audit strategy.

Resolves the collection, document id and actor of a change event and
rejects events raised by writes to the audit collections themselves,
which would otherwise audit their own output forever.
"""

from typing import Any

from docaudit.audit.models.event import ChangeEvent


class ChangeEventGate:
    """Collection, id and actor resolution plus self-audit prevention.

    One gate knows every audit collection (the snapshot collection by
    exact name, field diff logs by suffix) so that neither strategy
    audits the other's writes.
    """

    def __init__(
        self,
        *,
        snapshot_collection: str = "auditLogs",
        log_collection_suffix: str = "_logs",
        unknown_sentinel: str = "unknown",
        actor_fallback: str = "System",
    ) -> None:
        self.snapshot_collection = snapshot_collection
        self.log_collection_suffix = log_collection_suffix
        self.unknown_sentinel = unknown_sentinel
        self.actor_fallback = actor_fallback

    def resolve_collection_name(self, event: ChangeEvent) -> str:
        """Collection from `ns.coll`, then `namespace.collection`."""
        if event.ns is not None and event.ns.coll:
            return event.ns.coll
        if event.namespace is not None and event.namespace.collection:
            return event.namespace.collection
        return self.unknown_sentinel

    def is_audit_collection(self, collection: str) -> bool:
        return collection == self.snapshot_collection or collection.endswith(
            self.log_collection_suffix
        )

    def should_process(self, event: ChangeEvent) -> bool:
        return not self.is_audit_collection(self.resolve_collection_name(event))

    def log_collection_for(self, collection: str) -> str:
        """Field diff log collection of a source collection."""
        return f"{collection}{self.log_collection_suffix}"

    def resolve_document_id(self, event: ChangeEvent) -> str:
        """Document id from the key, then the post-image, then the pre-image."""
        for source in (
            event.document_key,
            event.full_document,
            event.full_document_before_change,
        ):
            if source is not None and source.get("_id") is not None:
                return str(source["_id"])
        return self.unknown_sentinel

    def resolve_actor(self, event: ChangeEvent) -> str:
        """Actor from `updatedBy`, then `name`, of whichever image is present."""
        document = event.full_document
        if document is None:
            document = event.full_document_before_change or {}
        actor: Any = document.get("updatedBy") or document.get("name")
        if not actor:
            return self.actor_fallback
        return actor if isinstance(actor, str) else str(actor)
