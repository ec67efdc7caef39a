"""tick-state - State primitive for finite state machines: hooks and guarded event dispatch."""
from __future__ import annotations

import logging

from tick_state.builder import StateBuilder
from tick_state.errors import collect_errors, make_logging_handler, raise_handler
from tick_state.state import State
from tick_state.types import Action, ErrorHandler, Event, EventLike, StateAction

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "State",
    "StateBuilder",
    "Event",
    "EventLike",
    "Action",
    "StateAction",
    "ErrorHandler",
    "make_logging_handler",
    "raise_handler",
    "collect_errors",
]
