"""Tests for Event and EventLike."""
from __future__ import annotations

import dataclasses

import pytest

from tick_state import Event, EventLike


def test_event_defaults():
    """Payload defaults to None."""
    event = Event("start")

    assert event.trigger == "start"
    assert event.payload is None


def test_event_is_frozen():
    """Events cannot be mutated after creation."""
    event = Event("start", payload=1)

    with pytest.raises(dataclasses.FrozenInstanceError):
        event.trigger = "stop"


def test_event_equality_by_value():
    """Events with equal fields compare equal."""
    assert Event("a", 1) == Event("a", 1)
    assert Event("a", 1) != Event("a", 2)


def test_event_conforms_to_event_like():
    """Event and any object with a trigger satisfy EventLike."""

    class Custom:
        trigger = 7

    assert isinstance(Event("x"), EventLike)
    assert isinstance(Custom(), EventLike)
    assert not isinstance(object(), EventLike)
