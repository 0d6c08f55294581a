"""Exception hierarchy for docaudit.

None of these escape a handler invocation: the handler and the audit
strategies turn them into error results for the host.
"""


class DocAuditError(Exception):
    """Base exception for all docaudit errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidChangeEventError(DocAuditError):
    """Raised when a change event payload cannot be parsed."""


class StoreWriteError(DocAuditError):
    """Raised by an audit store when a batch write fails.

    `written` is the number of records of the batch that were committed
    before the failure.
    """

    def __init__(self, message: str, collection: str, written: int = 0) -> None:
        self.collection = collection
        self.written = written
        super().__init__(message)
