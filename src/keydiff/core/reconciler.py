from __future__ import annotations

from typing import Iterable, Union

from .equality import ValueEquality, json_equal
from .records import DiffRecord, EntryAdded, EntryRemoved, KeyModified

RemovalOutcome = Union[KeyModified, EntryRemoved]


def _find_match(
    candidate: EntryRemoved,
    pool: list[EntryAdded],
    equality: ValueEquality,
) -> int | None:
    for index, added in enumerate(pool):
        if equality(candidate.value, added.value):
            return index
    return None


def reconcile(
    removed: Iterable[EntryRemoved],
    added: Iterable[EntryAdded],
    *,
    equality: ValueEquality = json_equal,
) -> list[DiffRecord]:
    """Pair removals with additions carrying an equal value.

    Removals are visited in ascending key order and each one takes the
    first remaining addition, in ascending key order, whose value is equal.
    A matched addition leaves the pool, so every candidate is used at most
    once. Unmatched additions are emitted last.
    """

    pool = sorted(added, key=lambda entry: entry.key)
    outcomes: list[RemovalOutcome] = []

    for candidate in sorted(removed, key=lambda entry: entry.key):
        index = _find_match(candidate, pool, equality)
        if index is None:
            outcomes.append(candidate)
            continue
        matched = pool.pop(index)
        outcomes.append(KeyModified(old_key=candidate.key, new_key=matched.key, value=candidate.value))

    reconciled: list[DiffRecord] = list(outcomes)
    reconciled.extend(pool)
    return reconciled


__all__ = ["RemovalOutcome", "reconcile"]
