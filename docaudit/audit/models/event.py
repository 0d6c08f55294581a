"""ChangeEvent model for change stream notifications."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class OperationType(str, Enum):
    """Operation kinds the audit strategies understand."""

    INSERT = "insert"
    UPDATE = "update"
    REPLACE = "replace"
    DELETE = "delete"


class Namespace(BaseModel):
    """Change stream namespace (`ns`)."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    db: str | None = Field(default=None, description="Database name")
    coll: str | None = Field(default=None, description="Collection name")


class LegacyNamespace(BaseModel):
    """Older trigger payload namespace (`namespace`)."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    database: str | None = Field(default=None, description="Database name")
    collection: str | None = Field(default=None, description="Collection name")


class ChangeEvent(BaseModel):
    """One insert/update/replace/delete notification.

    Field names follow the change stream payload. Operation types other
    than the four in OperationType are accepted and treated as
    unsupported by the audit strategies.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    operation_type: str = Field(
        default="", alias="operationType", description="Operation kind"
    )
    ns: Namespace | None = Field(default=None, description="Namespace")
    namespace: LegacyNamespace | None = Field(
        default=None, description="Legacy namespace"
    )
    document_key: dict[str, Any] | None = Field(
        default=None, alias="documentKey", description="Affected document key"
    )
    full_document: dict[str, Any] | None = Field(
        default=None, alias="fullDocument", description="Post-image"
    )
    full_document_before_change: dict[str, Any] | None = Field(
        default=None,
        alias="fullDocumentBeforeChange",
        description="Pre-image, when the source retained it",
    )
