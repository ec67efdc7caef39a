"""StateBuilder: fluent assembly of State tables."""
from __future__ import annotations

from typing import Generic

from tick_state.state import State
from tick_state.types import Action, ErrorHandler, StateAction, T


class StateBuilder(Generic[T]):
    """Collects hooks and trigger actions, then builds an immutable State.

    Every setter returns the builder. ``on()`` and ``otherwise()`` also work
    as decorators when called without an action::

        idle = StateBuilder("idle")

        @idle.on("start")
        def start(state, event):
            ...

        state = idle.build()
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._entry: Action | None = None
        self._exit: Action | None = None
        self._actions: dict[T, StateAction[T]] = {}
        self._default: StateAction[T] | None = None
        self._on_error: ErrorHandler | None = None

    def on_entry(self, action: Action) -> StateBuilder[T]:
        self._entry = action
        return self

    def on_exit(self, action: Action) -> StateBuilder[T]:
        self._exit = action
        return self

    def on(self, trigger: T, action: StateAction[T] | None = None):
        """Register the action for ``trigger``. Overwrites if already registered."""
        if action is None:
            def decorator(fn: StateAction[T]) -> StateAction[T]:
                self._actions[trigger] = fn
                return fn

            return decorator
        self._actions[trigger] = action
        return self

    def otherwise(self, action: StateAction[T] | None = None):
        """Set the fallback action for unmatched triggers."""
        if action is None:
            def decorator(fn: StateAction[T]) -> StateAction[T]:
                self._default = fn
                return fn

            return decorator
        self._default = action
        return self

    def on_error(self, handler: ErrorHandler) -> StateBuilder[T]:
        self._on_error = handler
        return self

    def has(self, trigger: T) -> bool:
        """Check if an action is registered for ``trigger``."""
        return trigger in self._actions

    def triggers(self) -> list[T]:
        """List all registered triggers."""
        return list(self._actions)

    def build(self) -> State[T]:
        """Return a new State. Later builder changes do not affect it."""
        return State(
            self._name,
            entry=self._entry,
            exit=self._exit,
            actions=self._actions,
            default=self._default,
            on_error=self._on_error,
        )
