"""Recursive field-level differ for document trees.

Walks an old and a new document and yields one FieldChange per changed
leaf. Sub-documents are flattened into dot-delimited paths
(`Address.City`); lists and scalars are leaves. All functions return
lazy, single-pass iterators.
"""

from collections.abc import Collection, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from docaudit.audit.classifier import is_meaningful
from docaudit.audit.models.values import is_plain_object, values_equal

DEFAULT_MAX_DEPTH = 32

_NO_EXCLUSIONS: frozenset[str] = frozenset()


@dataclass(frozen=True)
class FieldChange:
    """A changed leaf: its path and the values on either side."""

    path: str
    old_value: Any
    new_value: Any


def join_path(prefix: str, key: str) -> str:
    return f"{prefix}.{key}" if prefix else key


def expand_insert(
    document: Mapping[str, Any] | None,
    prefix: str = "",
    excluded: Collection[str] = _NO_EXCLUSIONS,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Iterator[FieldChange]:
    """Yield `(path, None, value)` for every meaningful leaf of a document."""
    return _expand(document, prefix, excluded, inserted=True, max_depth=max_depth, depth=0)


def expand_delete(
    document: Mapping[str, Any] | None,
    prefix: str = "",
    excluded: Collection[str] = _NO_EXCLUSIONS,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Iterator[FieldChange]:
    """Yield `(path, value, None)` for every meaningful leaf of a document."""
    return _expand(document, prefix, excluded, inserted=False, max_depth=max_depth, depth=0)


def diff(
    old: Mapping[str, Any] | None,
    new: Mapping[str, Any] | None,
    prefix: str = "",
    excluded: Collection[str] = _NO_EXCLUSIONS,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Iterator[FieldChange]:
    """Yield the changed leaves between two documents.

    Args:
        old: Document before the change; None is an empty document
        new: Document after the change; None is an empty document
        prefix: Path of the documents inside their parent
        excluded: Keys skipped at this level only; nested levels use none
        max_depth: Nesting level at which sub-documents become leaves

    Keys are visited in old-document order followed by keys that only
    exist in `new`. A side that is a sub-document while the other is
    not is expanded on its own, as an insert or a delete. Two values
    that are both non-meaningful (absent, None, "") never differ.
    """
    return _diff(old or {}, new or {}, prefix, excluded, max_depth=max_depth, depth=0)


def _union_keys(old: Mapping[str, Any], new: Mapping[str, Any]) -> list[str]:
    keys = list(old)
    keys.extend(key for key in new if key not in old)
    return keys


def _diff(
    old: Mapping[str, Any],
    new: Mapping[str, Any],
    prefix: str,
    excluded: Collection[str],
    *,
    max_depth: int,
    depth: int,
) -> Iterator[FieldChange]:
    for key in _union_keys(old, new):
        if key in excluded:
            continue

        old_value = old.get(key)
        new_value = new.get(key)
        path = join_path(prefix, str(key))
        old_is_object = is_plain_object(old_value)
        new_is_object = is_plain_object(new_value)

        if depth < max_depth and (old_is_object or new_is_object):
            if old_is_object and new_is_object:
                yield from _diff(
                    old_value, new_value, path, _NO_EXCLUSIONS,
                    max_depth=max_depth, depth=depth + 1,
                )
            elif new_is_object:
                # A scalar replaced by a sub-document loses its old value
                if is_meaningful(old_value):
                    yield FieldChange(path, old_value, None)
                yield from _expand(
                    new_value, path, _NO_EXCLUSIONS,
                    inserted=True, max_depth=max_depth, depth=depth + 1,
                )
            else:
                yield from _expand(
                    old_value, path, _NO_EXCLUSIONS,
                    inserted=False, max_depth=max_depth, depth=depth + 1,
                )
                if is_meaningful(new_value):
                    yield FieldChange(path, None, new_value)
            continue

        if values_equal(old_value, new_value):
            continue
        if not (is_meaningful(old_value) or is_meaningful(new_value)):
            continue
        yield FieldChange(path, old_value, new_value)


def _expand(
    document: Mapping[str, Any] | None,
    prefix: str,
    excluded: Collection[str],
    *,
    inserted: bool,
    max_depth: int,
    depth: int,
) -> Iterator[FieldChange]:
    for key, value in (document or {}).items():
        if key in excluded or not is_meaningful(value):
            continue

        path = join_path(prefix, str(key))
        if is_plain_object(value) and depth < max_depth:
            yield from _expand(
                value, path, _NO_EXCLUSIONS,
                inserted=inserted, max_depth=max_depth, depth=depth + 1,
            )
        elif inserted:
            yield FieldChange(path, None, value)
        else:
            yield FieldChange(path, value, None)
