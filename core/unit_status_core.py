"""
Unit Status Core - systemd unit state lookup.

Runs ``systemctl --user show`` for a fixed set of properties and maps the
``KEY=VALUE`` output onto a UnitStatus. Tool failures degrade to None;
individual fields degrade to their defaults.
"""

import logging
import re
import threading

from config import IntrospectionSettings
from core.models import UNKNOWN_STATE, UnitStatus
from utils.key_values import parse_key_values
from utils.process_runner import run_command
from utils.timestamps import parse_systemd_timestamp

logger = logging.getLogger(__name__)

# Plain ASCII integer, no digit separators.
_RESTART_COUNT = re.compile(r"[+-]?[0-9]+\Z")

STATUS_PROPERTIES = (
    "Id",
    "ActiveState",
    "SubState",
    "Result",
    "NRestarts",
    "ExecMainStatus",
    "MainPID",
    "ActiveEnterTimestamp",
)


def build_status_args(unit: str) -> list[str]:
    """Argument list for ``systemctl``; the unit name is always last."""
    args = ["--user", "show", "--no-pager"]
    for prop in STATUS_PROPERTIES:
        args.extend(["-p", prop])
    args.append(unit)
    return args


def _blank_to_none(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value


def _state_or_unknown(value: str | None) -> str:
    return _blank_to_none(value) or UNKNOWN_STATE


def _parse_restarts(value: str | None) -> int | None:
    if value is None or not _RESTART_COUNT.match(value.strip()):
        return None
    count = int(value)
    return count if count >= 0 else None


class UnitStatusReader:
    """Reads the state of user-scoped systemd units."""

    def __init__(self, settings: IntrospectionSettings):
        self._settings = settings

    def get_status(
        self, unit: str, cancel_event: threading.Event | None = None
    ) -> UnitStatus | None:
        """
        Returns the current status of ``unit``.

        Args:
            unit: Unit name, passed to systemctl unchanged.
            cancel_event: Optional cancellation signal.

        Returns:
            UnitStatus, or None if systemctl could not be run or exited non-zero.
        """
        code, stdout, stderr = run_command(
            self._settings.systemctl_bin,
            build_status_args(unit),
            cancel_event,
            poll_interval=self._settings.poll_interval,
        )
        if code != 0:
            logger.warning(
                f"systemctl show failed for {unit} (code {code}): {stderr.strip()}"
            )
            return None

        props = parse_key_values(stdout)
        return UnitStatus(
            unit=unit,
            active_state=_state_or_unknown(props.get("ActiveState")),
            sub_state=_state_or_unknown(props.get("SubState")),
            result=_blank_to_none(props.get("Result")),
            n_restarts=_parse_restarts(props.get("NRestarts")),
            exec_main_status=_blank_to_none(props.get("ExecMainStatus")),
            main_pid=_blank_to_none(props.get("MainPID")),
            active_enter_timestamp=parse_systemd_timestamp(
                props.get("ActiveEnterTimestamp")
            ),
        )
