"""Stock error handlers for failing state actions."""
from __future__ import annotations

import logging

from tick_state.types import ErrorHandler

_logger = logging.getLogger("tick_state")


def make_logging_handler(
    logger: logging.Logger | None = None,
    level: int = logging.WARNING,
) -> ErrorHandler:
    """Return a handler that logs the exception and continues.

    A new handler is built per call, so states never share a module-level
    callable. ``logger`` defaults to the ``tick_state`` logger.
    """
    target = logger if logger is not None else _logger

    def log_error(exc: Exception) -> None:
        target.log(level, "Unexpected error in state action", exc_info=exc)

    return log_error


def raise_handler(exc: Exception) -> None:
    """Re-raise the exception, making any action failure fatal to the caller."""
    raise exc


def collect_errors() -> tuple[list[Exception], ErrorHandler]:
    """Return ``(errors, handler)`` where the handler appends into ``errors``."""
    errors: list[Exception] = []
    return errors, errors.append
