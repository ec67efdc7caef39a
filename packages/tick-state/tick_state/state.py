"""State: entry/exit hooks and trigger-keyed event dispatch with error isolation."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Generic

from tick_state.errors import make_logging_handler
from tick_state.types import Action, ErrorHandler, EventLike, StateAction, T

logger = logging.getLogger(__name__)


class State(Generic[T]):
    """A single state of a finite state machine.

    The owning machine calls ``enter()`` when transitioning in, ``handle()``
    for each event while active, and ``exit()`` when transitioning out. The
    state does not track whether it is active.

    Every exception raised by a user action is caught at the call site and
    passed to ``on_error``; none reaches the caller. Without ``on_error`` the
    exception is logged at WARNING.

    Args:
        name: Display name. Must be non-empty.
        entry: Action run by ``enter()``.
        exit: Action run by ``exit()``.
        actions: Trigger to action mapping. Copied, so later changes to the
            caller's mapping have no effect.
        default: Action run when an event's trigger has no entry in ``actions``.
        on_error: Handler receiving exceptions raised by any action. Must not
            raise itself.
    """

    def __init__(
        self,
        name: str,
        entry: Action | None = None,
        exit: Action | None = None,
        actions: Mapping[T, StateAction[T]] | None = None,
        default: StateAction[T] | None = None,
        on_error: ErrorHandler | None = None,
    ) -> None:
        if not name:
            raise ValueError("State name must be non-empty")
        _check_callable("entry", entry)
        _check_callable("exit", exit)
        _check_callable("default", default)
        _check_callable("on_error", on_error)
        table: dict[T, StateAction[T]] = dict(actions) if actions is not None else {}
        for trigger, action in table.items():
            if action is None:
                raise TypeError(f"action for trigger {trigger!r} must be callable, got None")
            _check_callable(f"action for trigger {trigger!r}", action)

        self._name = name
        self._entry = entry
        self._exit = exit
        self._actions = table
        self._default = default
        self._on_error: ErrorHandler = (
            on_error if on_error is not None else make_logging_handler()
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def entry_action(self) -> Action | None:
        return self._entry

    @property
    def exit_action(self) -> Action | None:
        return self._exit

    @property
    def default_action(self) -> StateAction[T] | None:
        return self._default

    @property
    def error_handler(self) -> ErrorHandler:
        return self._on_error

    @property
    def actions(self) -> Mapping[T, StateAction[T]]:
        """Read-only view of the trigger table."""
        return MappingProxyType(self._actions)

    def triggers(self) -> list[T]:
        """List registered triggers in registration order."""
        return list(self._actions)

    def handles(self, trigger: T) -> bool:
        """Check whether an event with ``trigger`` would run an action."""
        return trigger in self._actions or self._default is not None

    def enter(self) -> None:
        """Run the entry action, if any."""
        logger.debug("Entering state %s", self)
        self._run_hook(self._entry)

    def exit(self) -> None:
        """Run the exit action, if any."""
        logger.debug("Exiting state %s", self)
        self._run_hook(self._exit)

    def handle(self, event: EventLike) -> None:
        """Dispatch ``event`` to its trigger's action, else the default action.

        At most one action runs. An unmatched trigger with no default action
        is ignored.
        """
        action = self._actions.get(event.trigger, self._default)
        if action is None:
            return
        logger.debug("Invoking action for event %r on state %s", event, self)
        try:
            action(self, event)
        except Exception as exc:
            self._on_error(exc)

    __call__ = handle

    def _run_hook(self, action: Action | None) -> None:
        if action is None:
            return
        try:
            action(self)
        except Exception as exc:
            self._on_error(exc)

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"


def _check_callable(what: str, fn: Any) -> None:
    if fn is not None and not callable(fn):
        raise TypeError(f"{what} must be callable, got {type(fn).__name__}")
