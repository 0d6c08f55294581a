"""Maps a change event to the field changes it produced."""

from collections.abc import Iterable, Iterator

from docaudit.audit.differ import (
    DEFAULT_MAX_DEPTH,
    FieldChange,
    diff,
    expand_delete,
    expand_insert,
)
from docaudit.audit.models.event import ChangeEvent, OperationType
from docaudit.config.models.audit import MissingPreImagePolicy
from docaudit.observability.logging import get_logger

logger = get_logger(__name__)

DEFAULT_EXCLUDED_FIELDS: frozenset[str] = frozenset({"_id", "__v", "updatedAt"})


class OperationStrategySelector:
    """Chooses how the differ runs for each operation kind.

    - insert: every meaningful field of the post-image, old value None
    - delete: every meaningful field of the pre-image, new value None
    - update/replace: field-by-field diff of pre- and post-image

    Excluded fields are dropped at the top level of the document only.
    Unsupported operation kinds and events without the snapshots an
    operation needs produce no changes.
    """

    def __init__(
        self,
        excluded_fields: Iterable[str] = DEFAULT_EXCLUDED_FIELDS,
        *,
        missing_pre_image: MissingPreImagePolicy = "skip",
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        """Initialize the selector.

        Args:
            excluded_fields: Top-level fields never reported
            missing_pre_image: "skip" drops update/replace events without
                a pre-image; "as_insert" reports their post-image as if
                the document had been inserted
            max_depth: Nesting level at which sub-documents become leaves
        """
        self._excluded = frozenset(excluded_fields)
        self._missing_pre_image = missing_pre_image
        self._max_depth = max_depth

    @property
    def excluded_fields(self) -> frozenset[str]:
        return self._excluded

    def changes_for(self, event: ChangeEvent) -> Iterator[FieldChange]:
        """Return the lazy sequence of field changes for one event."""
        operation = event.operation_type
        before = event.full_document_before_change
        after = event.full_document

        if operation == OperationType.INSERT and after is not None:
            return expand_insert(after, excluded=self._excluded, max_depth=self._max_depth)

        if operation == OperationType.DELETE and before is not None:
            return expand_delete(before, excluded=self._excluded, max_depth=self._max_depth)

        if operation in (OperationType.UPDATE, OperationType.REPLACE) and after is not None:
            if before is not None:
                return diff(before, after, excluded=self._excluded, max_depth=self._max_depth)

            logger.warning(
                "pre_image_missing",
                operation_type=operation,
                policy=self._missing_pre_image,
            )
            if self._missing_pre_image == "as_insert":
                return expand_insert(after, excluded=self._excluded, max_depth=self._max_depth)

        return iter(())
