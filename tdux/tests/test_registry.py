"""
Tests for the action registry and reducer wiring.
"""

from dataclasses import fields

import pytest

from tdux.core import DidEvent, DuplicateReducerError, Registry, ShouldEvent


def test_bind_creates_channels_without_running_reducer():
    calls = []
    registry = Registry()

    record = registry.bind("SET", lambda ev: calls.append(ev))

    assert calls == []
    assert registry.contains("SET")
    assert record.channels.should is not record.channels.did
    assert registry.get("SET") is record


def test_wiring_forwards_reducer_return_as_previous_value():
    registry = Registry()
    record = registry.bind("SET", lambda ev: "old")
    got = []
    record.channels.did.subscribe(got.append)

    record.channels.should.publish(ShouldEvent(id="a", value="new"))

    assert got == [DidEvent(id="a", value="new", previous_value="old")]


def test_duplicate_bind_keeps_original():
    registry = Registry()
    first = registry.bind("SET", lambda ev: 1)

    with pytest.raises(DuplicateReducerError) as exc:
        registry.bind("SET", lambda ev: 2)

    assert exc.value.action_type == "SET"
    assert registry.get("SET") is first
    assert len(registry) == 1


def test_non_callable_reducer_creates_no_state():
    registry = Registry()

    with pytest.raises(TypeError):
        registry.bind("SET", None)

    assert not registry.contains("SET")


def test_action_types_in_registration_order():
    registry = Registry()
    for t in ("B", "A", "C"):
        registry.bind(t, lambda ev: None)

    assert registry.action_types() == ["B", "A", "C"]
    assert [r.action_type for r in registry.records()] == ["B", "A", "C"]


def test_contains_unhashable_key_is_false():
    assert not Registry().contains(["not", "hashable"])


def test_record_holds_channels_and_wiring_only():
    registry = Registry()
    record = registry.bind("SET", lambda ev: None)

    assert [f.name for f in fields(record)] == ["action_type", "channels", "wiring"]
    assert not record.wiring.closed
