from __future__ import annotations

import json
import logging
import math
from typing import Any, Iterable

from ..core.records import RECORD_KINDS, DiffRecord

__all__ = ["log_diff", "summarize"]


def summarize(records: Iterable[DiffRecord]) -> dict[str, int]:
    counts = {kind: 0 for kind in RECORD_KINDS}
    for record in records:
        counts[record.kind] += 1
    return counts


def _finite(value: Any) -> Any:
    # NaN and Infinity have no JSON spelling; log them as strings
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    if isinstance(value, dict):
        return {key: _finite(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(item) for item in value]
    return value


def log_diff(
    logger: logging.Logger,
    records: Iterable[DiffRecord],
    *,
    level: int = logging.INFO,
    include_unchanged: bool = False,
) -> None:
    """Emit a diff as a single compact JSON log line."""

    materialized = list(records)
    selected = [r for r in materialized if include_unchanged or r.is_change]
    if not selected:
        return
    payload: dict[str, Any] = {
        "event": "map_diff",
        "summary": summarize(materialized),
        "changes": [_finite(record.as_dict()) for record in selected],
    }
    line = json.dumps(
        payload,
        ensure_ascii=False,
        separators=(",", ":"),
        default=str,
        allow_nan=False,
    )
    logger.log(level, line)
