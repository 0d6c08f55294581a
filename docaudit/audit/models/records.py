"""Audit record models written to the audit store."""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    """Return current UTC time."""
    return datetime.now(UTC)


class FieldChangeRecord(BaseModel):
    """One changed leaf field of one document.

    Immutable; written once as part of the batch for its change event.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    document_id: str = Field(..., alias="documentId", description="Affected document")
    operation_type: str = Field(..., alias="operationType", description="Operation kind")
    changed_field: str = Field(
        ..., alias="changedFields", description="Dot-delimited leaf path"
    )
    old_value: Any = Field(default=None, alias="oldValue", description="Value before")
    new_value: Any = Field(default=None, alias="newValue", description="Value after")
    updated_by: str = Field(..., alias="updatedBy", description="Attributed actor")
    timestamp: datetime = Field(default_factory=utc_now, description="Record time")

    def to_document(self) -> dict[str, Any]:
        """Storage representation with camelCase keys."""
        return self.model_dump(by_alias=True)


class SnapshotAuditRecord(BaseModel):
    """Whole-document audit record holding the pre- and post-image."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    operation_type: str = Field(..., alias="operationType", description="Operation kind")
    collection_name: str = Field(
        ..., alias="collectionName", description="Source collection"
    )
    document_id: str = Field(..., alias="documentId", description="Affected document")
    timestamp: datetime = Field(default_factory=utc_now, description="Record time")
    changed_fields: list[str] = Field(
        default_factory=list, alias="changedFields", description="Changed paths"
    )
    pre_image: dict[str, Any] | None = Field(
        default=None, alias="preImage", description="Document before the change"
    )
    post_image: dict[str, Any] | None = Field(
        default=None, alias="postImage", description="Document after the change"
    )

    def to_document(self) -> dict[str, Any]:
        """Storage representation with camelCase keys."""
        return self.model_dump(by_alias=True)


AuditRecord = FieldChangeRecord | SnapshotAuditRecord
