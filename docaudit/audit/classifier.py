"""Decides whether a document value is worth auditing."""

from typing import Any

from docaudit.audit.models.values import is_plain_object


def is_meaningful(value: Any) -> bool:
    """Check whether a value carries information.

    None and the empty string are not meaningful. Lists count whenever
    present and are never inspected. A sub-document is meaningful only
    if at least one of its fields is, recursively, so `{}` and
    `{"a": None, "b": ""}` are not.

    Sub-documents are walked with an explicit stack, so nesting depth
    is not limited by the interpreter's recursion limit.
    """
    pending = [value]
    while pending:
        current = pending.pop()
        if current is None:
            continue
        if isinstance(current, str):
            if current:
                return True
            continue
        if is_plain_object(current):
            pending.extend(current.values())
            continue
        return True
    return False
