from __future__ import annotations

import logging

import pytest

from keydiff import (
    DiffOptions,
    EntryAdded,
    EntryRemoved,
    KeyModified,
    Unchanged,
    ValueModified,
    changes,
    diff,
    diff_with_options,
)

BASE = {
    "key_1": "value_1",
    "key_2": "value_2",
    "key_3": "value_3",
    "key_4": "value_4",
}


def test_entry_removed() -> None:
    right = {"key_1": "value_1", "key_2": "value_2", "key_4": "value_4"}

    assert changes(diff(BASE, right)) == [EntryRemoved(key="key_3", value="value_3")]


def test_entry_added() -> None:
    left = {"key_1": "value_1", "key_3": "value_3", "key_4": "value_4"}

    assert changes(diff(left, BASE)) == [EntryAdded(key="key_2", value="value_2")]


def test_value_modified() -> None:
    right = dict(BASE, key_3="value_3.0")

    assert changes(diff(BASE, right)) == [
        ValueModified(key="key_3", old_value="value_3", new_value="value_3.0")
    ]


def test_key_modified() -> None:
    right = {"key_1": "value_1", "key_2": "value_2", "key_3.0": "value_3", "key_4": "value_4"}

    assert changes(diff(BASE, right)) == [
        KeyModified(old_key="key_3", new_key="key_3.0", value="value_3")
    ]


def test_entry_added_and_removed_with_distinct_values() -> None:
    right = {"key_1": "value_1", "key_2": "value_2", "key_3": "value_3", "key_5": "value_5"}

    assert changes(diff(BASE, right)) == [
        EntryRemoved(key="key_4", value="value_4"),
        EntryAdded(key="key_5", value="value_5"),
    ]


def test_output_order_groups_shared_then_removed_then_added() -> None:
    left = {"b": 1, "a": 2, "z": "moved", "y": "gone", "m": [1]}
    right = {"m": [2], "a": 2, "b": 1, "c": "moved", "d": "new"}

    assert diff(left, right) == [
        Unchanged(key="a", value=2),
        Unchanged(key="b", value=1),
        ValueModified(key="m", old_value=[1], new_value=[2]),
        EntryRemoved(key="y", value="gone"),
        KeyModified(old_key="z", new_key="c", value="moved"),
        EntryAdded(key="d", value="new"),
    ]


def test_nested_values_are_reported_as_a_single_modification() -> None:
    left = {"service": {"port": 80, "hosts": ["a", "b"]}}
    right = {"service": {"port": 8080, "hosts": ["a", "b"]}}

    assert diff(left, right) == [
        ValueModified(key="service", old_value=left["service"], new_value=right["service"])
    ]


def test_renamed_nested_value_is_detected() -> None:
    payload = {"enabled": True, "schedule": ["09:00", "18:00"]}

    assert diff({"weather": payload}, {"forecast": dict(payload)}) == [
        KeyModified(old_key="weather", new_key="forecast", value=payload)
    ]


def test_numeric_kinds_are_not_conflated() -> None:
    left = {"flag": 1, "ratio": 1}
    right = {"flag": True, "ratio": 1.0}

    assert changes(diff(left, right)) == [
        ValueModified(key="flag", old_value=1, new_value=True),
        ValueModified(key="ratio", old_value=1, new_value=1.0),
    ]


def test_empty_mappings() -> None:
    assert diff({}, {}) == []
    assert diff({"a": None}, {}) == [EntryRemoved(key="a", value=None)]
    assert diff({}, {"a": None}) == [EntryAdded(key="a", value=None)]


def test_rename_detection_can_be_disabled() -> None:
    right = {"key_1": "value_1", "key_2": "value_2", "key_3.0": "value_3", "key_4": "value_4"}

    assert changes(diff(BASE, right, detect_renames=False)) == [
        EntryRemoved(key="key_3", value="value_3"),
        EntryAdded(key="key_3.0", value="value_3"),
    ]
    options = DiffOptions(detect_renames=False)
    assert diff_with_options(BASE, right, options) == diff(BASE, right, detect_renames=False)


def test_custom_equality_is_used_for_both_stages() -> None:
    def casefold_equal(left: object, right: object) -> bool:
        return str(left).casefold() == str(right).casefold()

    left = {"name": "Alice", "old": "VALUE"}
    right = {"name": "alice", "new": "value"}

    assert diff(left, right, equality=casefold_equal) == [
        Unchanged(key="name", value="Alice"),
        KeyModified(old_key="old", new_key="new", value="VALUE"),
    ]


def test_debug_log_reports_counts(caplog: pytest.LogCaptureFixture) -> None:
    right = {"key_1": "value_1", "key_2": "value_2", "key_3.0": "value_3", "key_5": "value_5"}

    with caplog.at_level(logging.DEBUG, logger="keydiff.core.engine"):
        diff(BASE, right)

    records = [record for record in caplog.records if record.message == "map_diff"]
    assert len(records) == 1
    assert records[0].event == "map_diff"
    assert records[0].counts == {
        "entry_added": 1,
        "entry_removed": 1,
        "key_modified": 1,
        "unchanged": 2,
    }


def test_non_finite_values_compare_equal_to_themselves() -> None:
    mapping = {"ratio": float("nan"), "limit": float("inf"), "nested": [float("nan")]}

    expected = [Unchanged(key=key, value=mapping[key]) for key in sorted(mapping)]
    assert diff(mapping, mapping) == expected
    assert diff(mapping, dict(mapping)) == expected
