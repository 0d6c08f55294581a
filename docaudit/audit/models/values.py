"""Document value helpers.

Documents arrive as loosely typed trees: None, bool, numbers, strings,
lists, string-keyed mappings, plus driver scalars such as ObjectId or
datetime. Lists are atomic for auditing purposes; mappings are walked.
"""

import math
from collections.abc import Mapping
from typing import Any

Document = Mapping[str, Any]


def is_plain_object(value: Any) -> bool:
    """True for string-keyed sub-documents, False for lists and scalars."""
    return isinstance(value, Mapping)


def values_equal(left: Any, right: Any) -> bool:
    """Structural equality over document values.

    Mappings compare independently of key order, lists element-wise,
    NaN equals NaN, and booleans never equal numbers (True != 1).
    An absent value is passed in as None and equals None. Nested values
    are compared with an explicit stack, so any nesting depth works.
    """
    pending = [(left, right)]
    while pending:
        left, right = pending.pop()
        if left is right:
            continue

        if is_plain_object(left) or is_plain_object(right):
            if not (is_plain_object(left) and is_plain_object(right)):
                return False
            if left.keys() != right.keys():
                return False
            pending.extend((left[key], right[key]) for key in left)
            continue

        if isinstance(left, list | tuple) or isinstance(right, list | tuple):
            if not (isinstance(left, list | tuple) and isinstance(right, list | tuple)):
                return False
            if len(left) != len(right):
                return False
            pending.extend(zip(left, right, strict=True))
            continue

        if not _scalars_equal(left, right):
            return False
    return True


def _scalars_equal(left: Any, right: Any) -> bool:
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right

    if isinstance(left, float) and isinstance(right, float):
        if math.isnan(left) and math.isnan(right):
            return True

    return bool(left == right)
