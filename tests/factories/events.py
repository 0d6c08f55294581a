"""Test factories for change events."""

from datetime import UTC, datetime
from typing import Any

from docaudit.audit.models import ChangeEvent


class ChangeEventFactory:
    """Factory for creating change stream payloads and ChangeEvents."""

    @staticmethod
    def payload(
        operation_type: str,
        *,
        collection: str | None = "users",
        document_id: Any = "doc-1",
        full_document: dict[str, Any] | None = None,
        full_document_before_change: dict[str, Any] | None = None,
        legacy_namespace: bool = False,
    ) -> dict[str, Any]:
        """Create a raw change event payload.

        Args:
            operation_type: insert, update, replace, delete or anything else
            collection: Source collection (None omits the namespace)
            document_id: `_id` placed in documentKey (None omits the key)
            full_document: Post-image
            full_document_before_change: Pre-image
            legacy_namespace: Use `namespace.collection` instead of `ns.coll`
        """
        payload: dict[str, Any] = {"operationType": operation_type}
        if collection is not None:
            if legacy_namespace:
                payload["namespace"] = {"database": "test", "collection": collection}
            else:
                payload["ns"] = {"db": "test", "coll": collection}
        if document_id is not None:
            payload["documentKey"] = {"_id": document_id}
        if full_document is not None:
            payload["fullDocument"] = full_document
        if full_document_before_change is not None:
            payload["fullDocumentBeforeChange"] = full_document_before_change
        return payload

    @staticmethod
    def create(operation_type: str, **kwargs: Any) -> ChangeEvent:
        """Create a validated ChangeEvent; accepts the `payload` arguments."""
        return ChangeEvent.model_validate(
            ChangeEventFactory.payload(operation_type, **kwargs)
        )

    @staticmethod
    def insert(document: dict[str, Any], **kwargs: Any) -> ChangeEvent:
        return ChangeEventFactory.create("insert", full_document=document, **kwargs)

    @staticmethod
    def update(
        before: dict[str, Any] | None,
        after: dict[str, Any] | None,
        *,
        operation_type: str = "update",
        **kwargs: Any,
    ) -> ChangeEvent:
        return ChangeEventFactory.create(
            operation_type,
            full_document=after,
            full_document_before_change=before,
            **kwargs,
        )

    @staticmethod
    def delete(document: dict[str, Any] | None, **kwargs: Any) -> ChangeEvent:
        return ChangeEventFactory.create(
            "delete", full_document_before_change=document, **kwargs
        )


FIXED_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)
