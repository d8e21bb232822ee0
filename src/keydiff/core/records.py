from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Iterable, Union


@dataclass(frozen=True)
class Unchanged:
    kind: ClassVar[str] = "unchanged"

    key: str
    value: Any

    @property
    def is_change(self) -> bool:
        return False

    def inverted(self) -> Unchanged:
        return self

    def as_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "key": self.key, "value": self.value}


@dataclass(frozen=True)
class EntryAdded:
    kind: ClassVar[str] = "entry_added"

    key: str
    value: Any

    @property
    def is_change(self) -> bool:
        return True

    def inverted(self) -> EntryRemoved:
        return EntryRemoved(key=self.key, value=self.value)

    def as_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "key": self.key, "value": self.value}


@dataclass(frozen=True)
class EntryRemoved:
    kind: ClassVar[str] = "entry_removed"

    key: str
    value: Any

    @property
    def is_change(self) -> bool:
        return True

    def inverted(self) -> EntryAdded:
        return EntryAdded(key=self.key, value=self.value)

    def as_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "key": self.key, "value": self.value}


@dataclass(frozen=True)
class ValueModified:
    kind: ClassVar[str] = "value_modified"

    key: str
    old_value: Any
    new_value: Any

    @property
    def is_change(self) -> bool:
        return True

    def inverted(self) -> ValueModified:
        return ValueModified(key=self.key, old_value=self.new_value, new_value=self.old_value)

    def as_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind,
            "key": self.key,
            "old": self.old_value,
            "new": self.new_value,
        }


@dataclass(frozen=True)
class KeyModified:
    """A removed key and an added key that carry the same value."""

    kind: ClassVar[str] = "key_modified"

    old_key: str
    new_key: str
    value: Any

    def __post_init__(self) -> None:
        if self.old_key == self.new_key:
            raise ValueError(f"rename must change the key, got {self.old_key!r} twice")

    @property
    def is_change(self) -> bool:
        return True

    def inverted(self) -> KeyModified:
        return KeyModified(old_key=self.new_key, new_key=self.old_key, value=self.value)

    def as_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind,
            "old_key": self.old_key,
            "new_key": self.new_key,
            "value": self.value,
        }


DiffRecord = Union[Unchanged, EntryAdded, EntryRemoved, ValueModified, KeyModified]

RECORD_KINDS: tuple[str, ...] = (
    Unchanged.kind,
    EntryAdded.kind,
    EntryRemoved.kind,
    ValueModified.kind,
    KeyModified.kind,
)


def is_change(record: DiffRecord) -> bool:
    return record.is_change


def changes(records: Iterable[DiffRecord]) -> list[DiffRecord]:
    return [record for record in records if record.is_change]


__all__ = [
    "DiffRecord",
    "EntryAdded",
    "EntryRemoved",
    "KeyModified",
    "RECORD_KINDS",
    "Unchanged",
    "ValueModified",
    "changes",
    "is_change",
]
