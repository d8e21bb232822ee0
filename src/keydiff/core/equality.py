from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class ValueEquality(Protocol):
    def __call__(self, left: Any, right: Any) -> bool: ...


def _kind(value: Any) -> type | None:
    # bool is a subclass of int, so it has to be checked first
    if isinstance(value, bool):
        return bool
    if isinstance(value, int):
        return int
    if isinstance(value, float):
        return float
    return None


def json_equal(left: Any, right: Any) -> bool:
    """Deep structural equality for parsed JSON values.

    Booleans, integers and floats are kept apart (``1 != True`` and
    ``1 != 1.0``) the way a JSON document model keeps them apart. The answer
    is a single boolean; nested differences are never reported.
    """

    if left is right:
        return True

    if isinstance(left, Mapping) and isinstance(right, Mapping):
        if left.keys() != right.keys():
            return False
        return all(json_equal(left[key], right[key]) for key in left)

    if isinstance(left, (list, tuple)) and isinstance(right, (list, tuple)):
        if len(left) != len(right):
            return False
        return all(json_equal(a, b) for a, b in zip(left, right))

    left_kind, right_kind = _kind(left), _kind(right)
    if left_kind is not None or right_kind is not None:
        return left_kind is right_kind and left == right

    return bool(left == right)


__all__ = ["ValueEquality", "json_equal"]
