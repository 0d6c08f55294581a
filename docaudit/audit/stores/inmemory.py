"""In-memory implementation of AuditStore."""

from collections.abc import Sequence

from docaudit.audit.models import AuditRecord
from docaudit.audit.store import AuditStore


class InMemoryAuditStore(AuditStore):
    """In-memory implementation of AuditStore for testing and development.

    Keeps a list of records per collection.
    Not suitable for production use.
    """

    def __init__(self) -> None:
        self._collections: dict[str, list[AuditRecord]] = {}
        self.batch_count = 0

    async def append_batch(
        self,
        collection: str,
        records: Sequence[AuditRecord],
    ) -> int:
        """Append records to a collection."""
        self._collections.setdefault(collection, []).extend(records)
        self.batch_count += 1
        return len(records)

    def list_records(self, collection: str) -> list[AuditRecord]:
        """Records of a collection in insertion order."""
        return list(self._collections.get(collection, []))

    def collection_names(self) -> list[str]:
        return sorted(self._collections)
