"""MongoDB implementation of AuditStore.

Audit records land next to the audited collections, in the same
database, one `insert_many` per change event.
"""

from collections.abc import Sequence

from pymongo import AsyncMongoClient
from pymongo.errors import BulkWriteError, PyMongoError

from docaudit.audit.models import AuditRecord
from docaudit.audit.store import AuditStore
from docaudit.errors import StoreWriteError


class MongoAuditStore(AuditStore):
    """MongoDB-backed append-only audit store."""

    def __init__(self, client: AsyncMongoClient, database: str = "test") -> None:
        """Initialize the store.

        Args:
            client: Connected async client; the store does not own it
                unless created through `from_url`
            database: Database holding the audit collections
        """
        self._client = client
        self._db = client[database]

    @classmethod
    def from_url(
        cls,
        url: str,
        database: str = "test",
        *,
        timeout_ms: int = 10_000,
    ) -> "MongoAuditStore":
        """Create a store with its own client."""
        client: AsyncMongoClient = AsyncMongoClient(
            url,
            appname="docaudit",
            serverSelectionTimeoutMS=timeout_ms,
            timeoutMS=timeout_ms,
        )
        return cls(client, database)

    async def append_batch(
        self,
        collection: str,
        records: Sequence[AuditRecord],
    ) -> int:
        """Insert all records with a single ordered `insert_many`.

        The insert is not transactional. When a document fails, the ones
        before it stay committed; the raised StoreWriteError carries their
        count in `written`.
        """
        if not records:
            return 0

        documents = [record.to_document() for record in records]
        try:
            result = await self._db[collection].insert_many(documents, ordered=True)
        except BulkWriteError as e:
            written = e.details.get("nInserted", 0)
            raise StoreWriteError(
                f"insert_many into {collection} stopped after {written} of "
                f"{len(documents)} records: {e}",
                collection=collection,
                written=written,
            ) from e
        except PyMongoError as e:
            raise StoreWriteError(
                f"insert_many into {collection} failed: {e}", collection=collection
            ) from e
        return len(result.inserted_ids)

    async def close(self) -> None:
        await self._client.close()
