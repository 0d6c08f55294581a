"""AuditResult model returned to the event-delivery host."""

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

NO_CHANGES = "no changes"


class AuditResult(BaseModel):
    """Outcome of auditing one change event.

    Exactly one of three shapes reaches the host: entries created,
    a success message (nothing to write), or an error.
    """

    model_config = ConfigDict(frozen=True)

    success: bool = Field(..., description="False only on a caught failure")
    entries_created: int = Field(default=0, ge=0, description="Records written")
    message: str | None = Field(default=None, description="Why nothing was written")
    error: str | None = Field(default=None, description="Failure message")

    @classmethod
    def created(cls, count: int) -> "AuditResult":
        return cls(success=True, entries_created=count)

    @classmethod
    def no_changes(cls, message: str = NO_CHANGES) -> "AuditResult":
        return cls(success=True, message=message)

    @classmethod
    def failed(cls, error: str) -> "AuditResult":
        return cls(success=False, error=error)

    @classmethod
    def combine(cls, results: Sequence["AuditResult"]) -> "AuditResult":
        """Fold the results of several audit strategies into one.

        Any failure wins; otherwise created counts are summed; otherwise
        the first message is kept.
        """
        if not results:
            return cls.no_changes()
        errors = [r.error for r in results if r.error is not None]
        if errors:
            return cls.failed("; ".join(errors))
        created = sum(r.entries_created for r in results)
        if created:
            return cls.created(created)
        return results[0]

    def to_dict(self) -> dict[str, Any]:
        """Host-facing representation."""
        if self.error is not None:
            return {"error": self.error}
        if self.message is not None:
            return {"success": True, "message": self.message}
        return {"success": True, "entriesCreated": self.entries_created}
