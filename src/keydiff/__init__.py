from __future__ import annotations

from .config.options import DiffOptions
from .core.engine import diff, diff_with_options
from .core.equality import ValueEquality, json_equal
from .core.records import (
    DiffRecord,
    EntryAdded,
    EntryRemoved,
    KeyModified,
    Unchanged,
    ValueModified,
    changes,
    is_change,
)

__all__ = [
    "DiffOptions",
    "DiffRecord",
    "EntryAdded",
    "EntryRemoved",
    "KeyModified",
    "Unchanged",
    "ValueEquality",
    "ValueModified",
    "changes",
    "diff",
    "diff_with_options",
    "is_change",
    "json_equal",
]
