"""Event value and callable contracts for state dispatch."""
from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from tick_state.state import State

T = TypeVar("T", bound=Hashable)


@dataclass(frozen=True)
class Event(Generic[T]):
    """Immutable event delivered to a state.

    Attributes:
        trigger: Key used to select the state action. Must be hashable.
        payload: Arbitrary data for the action. Never inspected by the state.
    """

    trigger: T
    payload: Any = None


@runtime_checkable
class EventLike(Protocol):
    """Anything with a ``trigger`` attribute can be dispatched."""

    @property
    def trigger(self) -> Hashable:
        ...


# Entry/exit hook: (State) -> None.
Action = Callable[["State[Any]"], None]

# Dispatched hook: (State, Event) -> None.
StateAction = Callable[["State[T]", Event[T]], None]

ErrorHandler = Callable[[Exception], None]
