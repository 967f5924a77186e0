"""
Introspection Core - entry point for unit status and journal queries.

Holds one UnitStatusReader and one JournalReader built from the configured
IntrospectionSettings. Both readers are stateless, so concurrent queries
share them without locking.
"""

import logging
import threading

from config import IntrospectionSettings, get_introspection_settings
from core.journal_core import JournalReader
from core.models import LogLine, UnitStatus
from core.unit_status_core import UnitStatusReader
from utils.process_runner import CommandCancelled

logger = logging.getLogger(__name__)

__all__ = [
    "CommandCancelled",
    "configure",
    "get_unit_status",
    "tail_unit_logs",
]

_readers_lock = threading.Lock()
_status_reader: UnitStatusReader | None = None
_journal_reader: JournalReader | None = None


def configure(settings: IntrospectionSettings | None = None) -> None:
    """(Re)build the readers, from ``settings`` or from the global config."""
    global _status_reader, _journal_reader
    settings = settings or get_introspection_settings()
    with _readers_lock:
        _status_reader = UnitStatusReader(settings)
        _journal_reader = JournalReader(settings)
    logger.debug(
        f"Introspection readers configured: systemctl={settings.systemctl_bin}, "
        f"journalctl={settings.journalctl_bin}"
    )


def _readers() -> tuple[UnitStatusReader, JournalReader]:
    if _status_reader is None or _journal_reader is None:
        configure()
    return _status_reader, _journal_reader


def get_unit_status(
    unit: str, cancel_event: threading.Event | None = None
) -> UnitStatus | None:
    status_reader, _ = _readers()
    return status_reader.get_status(unit, cancel_event)


def tail_unit_logs(
    unit: str,
    lines: int,
    min_priority: str,
    cancel_event: threading.Event | None = None,
) -> list[LogLine]:
    _, journal_reader = _readers()
    return journal_reader.tail(unit, lines, min_priority, cancel_event)
