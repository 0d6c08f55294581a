"""Audit engine configuration models."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

AuditMode = Literal["field_diff", "snapshot"]
MissingPreImagePolicy = Literal["skip", "as_insert"]


class SnapshotConfig(BaseModel):
    """Snapshot audit path configuration."""

    trim_unchanged: bool = Field(
        default=False,
        description="Keep only changed keys in update/replace images",
    )


class AuditConfig(BaseModel):
    """Change event auditing configuration."""

    modes: list[AuditMode] = Field(
        default_factory=lambda: ["field_diff"],
        min_length=1,
        description="Audit strategies to run for each change event",
    )
    excluded_fields: list[str] = Field(
        default_factory=lambda: ["_id", "__v", "updatedAt"],
        description="Top-level fields never audited by the field diff mode",
    )
    log_collection_suffix: str = Field(
        default="_logs",
        min_length=1,
        description="Suffix of per-collection field diff logs",
    )
    snapshot_collection: str = Field(
        default="auditLogs",
        min_length=1,
        description="Collection receiving snapshot audit records",
    )
    actor_fallback: str = Field(
        default="System",
        description="Actor recorded when no document names one",
    )
    unknown_sentinel: str = Field(
        default="unknown",
        description="Placeholder for unresolvable collection names and ids",
    )
    max_depth: int = Field(
        default=32,
        gt=0,
        description="Nesting depth beyond which sub-documents compare atomically",
    )
    missing_pre_image: MissingPreImagePolicy = Field(
        default="skip",
        description="Update/replace handling when no pre-image was retained",
    )
    snapshot: SnapshotConfig = Field(
        default_factory=SnapshotConfig,
        description="Snapshot audit path settings",
    )

    @field_validator("modes")
    @classmethod
    def _dedupe_modes(cls, modes: list[AuditMode]) -> list[AuditMode]:
        return list(dict.fromkeys(modes))
