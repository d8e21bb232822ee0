from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from .equality import ValueEquality, json_equal
from .records import EntryAdded, EntryRemoved, Unchanged, ValueModified

_MISSING = object()

SharedKeyRecord = Union[Unchanged, ValueModified]


@dataclass(frozen=True)
class Classification:
    records: tuple[SharedKeyRecord, ...]
    removed: tuple[EntryRemoved, ...]
    added: tuple[EntryAdded, ...]


def _all_keys(left: Mapping[str, Any], right: Mapping[str, Any]) -> list[str]:
    keys: set[str] = set(left)
    keys.update(right)
    return sorted(keys)


def classify(
    left: Mapping[str, Any],
    right: Mapping[str, Any],
    *,
    equality: ValueEquality = json_equal,
) -> Classification:
    """Split the union of both key sets into final and provisional records.

    Keys present on both sides become ``Unchanged`` or ``ValueModified``.
    Keys present on one side only are returned as removal/addition
    candidates for the rename pass. Every sequence is in ascending key order.
    """

    records: list[SharedKeyRecord] = []
    removed: list[EntryRemoved] = []
    added: list[EntryAdded] = []

    for key in _all_keys(left, right):
        left_value = left.get(key, _MISSING)
        right_value = right.get(key, _MISSING)
        if left_value is not _MISSING and right_value is not _MISSING:
            if equality(left_value, right_value):
                records.append(Unchanged(key=key, value=left_value))
            else:
                records.append(ValueModified(key=key, old_value=left_value, new_value=right_value))
        elif left_value is not _MISSING:
            removed.append(EntryRemoved(key=key, value=left_value))
        elif right_value is not _MISSING:
            added.append(EntryAdded(key=key, value=right_value))
        else:
            raise AssertionError(f"key {key!r} enumerated but present in neither mapping")

    return Classification(records=tuple(records), removed=tuple(removed), added=tuple(added))


__all__ = ["Classification", "SharedKeyRecord", "classify"]
