"""AuditStore abstract interface."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from docaudit.audit.models import AuditRecord


class AuditStore(ABC):
    """Abstract interface for append-only audit storage.

    The only write is a batch append: all records of one change event
    land in a single call, never one call per record.
    """

    @abstractmethod
    async def append_batch(
        self,
        collection: str,
        records: Sequence[AuditRecord],
    ) -> int:
        """Append records to a collection, returning how many were written.

        Raises:
            StoreWriteError: If the backend rejected the write
        """
        pass
