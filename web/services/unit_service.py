"""
Unit Service - Web Layer Service for unit status and journal tails.

Turns core records into JSON-ready dictionaries and owns the per-request
cancellation scope.
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from core import introspection_core

QueryCancelled = introspection_core.CommandCancelled


@contextmanager
def cancellation_scope(timeout_seconds: float | None) -> Iterator[threading.Event]:
    """
    Yields a fresh cancellation event for one query.

    When ``timeout_seconds`` is positive, a timer sets the event after that
    many seconds. The timer is discarded when the scope exits.
    """
    cancel_event = threading.Event()
    timer: threading.Timer | None = None
    if timeout_seconds and timeout_seconds > 0:
        timer = threading.Timer(timeout_seconds, cancel_event.set)
        timer.daemon = True
        timer.start()
    try:
        yield cancel_event
    finally:
        if timer is not None:
            timer.cancel()


def get_unit_status(
    unit: str, cancel_event: threading.Event | None = None
) -> dict[str, Any] | None:
    """
    Get the status of a unit.

    Returns:
        Status dictionary, or None when the unit could not be queried.
    """
    status = introspection_core.get_unit_status(unit, cancel_event)
    return status.to_dict() if status is not None else None


def tail_unit_logs(
    unit: str,
    lines: int,
    priority: str,
    cancel_event: threading.Event | None = None,
) -> list[dict[str, Any]]:
    """Get the last journal lines of a unit as dictionaries."""
    return [
        line.to_dict()
        for line in introspection_core.tail_unit_logs(
            unit, lines, priority, cancel_event
        )
    ]
