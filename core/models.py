"""
Core Models - Unit status and log line records.

Both records are built fresh for every query and never mutated afterwards.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

UNKNOWN_STATE = "unknown"


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


@dataclass(frozen=True)
class UnitStatus:
    """Point-in-time snapshot of one systemd unit."""

    unit: str
    active_state: str = UNKNOWN_STATE
    sub_state: str = UNKNOWN_STATE
    result: str | None = None
    n_restarts: int | None = None
    exec_main_status: str | None = None
    main_pid: str | None = None
    active_enter_timestamp: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "unit": self.unit,
            "activeState": self.active_state,
            "subState": self.sub_state,
            "result": self.result,
            "nRestarts": self.n_restarts,
            "execMainStatus": self.exec_main_status,
            "mainPid": self.main_pid,
            "activeEnterTimestamp": _iso(self.active_enter_timestamp),
        }


@dataclass(frozen=True)
class LogLine:
    """One journal line. ``priority`` is the filter used for the query."""

    timestamp: datetime | None
    unit: str
    message: str
    priority: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": _iso(self.timestamp),
            "unit": self.unit,
            "message": self.message,
            "priority": self.priority,
        }
