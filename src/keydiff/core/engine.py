from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .classifier import classify
from .equality import ValueEquality, json_equal
from .reconciler import reconcile
from .records import DiffRecord

if TYPE_CHECKING:
    from ..config.options import DiffOptions

_LOGGER = logging.getLogger(__name__)


def diff(
    left: Mapping[str, Any],
    right: Mapping[str, Any],
    *,
    equality: ValueEquality = json_equal,
    detect_renames: bool = True,
) -> list[DiffRecord]:
    """Diff two mappings key by key.

    The result lists ``Unchanged``/``ValueModified`` records by ascending
    key, then ``KeyModified``/``EntryRemoved`` by ascending old key, then
    ``EntryAdded`` by ascending key. Values are compared with ``equality``
    and never diffed recursively.
    """

    classification = classify(left, right, equality=equality)
    records: list[DiffRecord] = list(classification.records)

    if detect_renames:
        records.extend(reconcile(classification.removed, classification.added, equality=equality))
    else:
        records.extend(classification.removed)
        records.extend(classification.added)

    if _LOGGER.isEnabledFor(logging.DEBUG):
        counts = Counter(record.kind for record in records)
        _LOGGER.debug(
            "map_diff",
            extra={"event": "map_diff", "counts": dict(sorted(counts.items()))},
        )
    return records


def diff_with_options(
    left: Mapping[str, Any],
    right: Mapping[str, Any],
    options: DiffOptions,
) -> list[DiffRecord]:
    return diff(
        left,
        right,
        equality=options.equality,
        detect_renames=options.detect_renames,
    )


__all__ = ["diff", "diff_with_options"]
