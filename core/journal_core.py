"""
Journal Core - tail of a unit's journal.

Runs ``journalctl --user`` in ``short-iso`` format and wraps each returned
line in a LogLine. Tool failures degrade to an empty list.
"""

import logging
import threading

from config import IntrospectionSettings
from core.models import LogLine
from utils.process_runner import run_command

logger = logging.getLogger(__name__)

MIN_LINES = 1
MAX_LINES = 2000
OUTPUT_FORMAT = "short-iso"


def clamp_line_count(lines: int) -> int:
    """Clamp a requested line count into [MIN_LINES, MAX_LINES]."""
    return max(MIN_LINES, min(int(lines), MAX_LINES))


def build_tail_args(unit: str, lines: int, min_priority: str) -> list[str]:
    return [
        "--user",
        "-u",
        unit,
        "-n",
        str(lines),
        "-o",
        OUTPUT_FORMAT,
        "--no-pager",
        "-p",
        min_priority,
    ]


class JournalReader:
    """Reads recent journal lines for user-scoped systemd units."""

    def __init__(self, settings: IntrospectionSettings):
        self._settings = settings

    def tail(
        self,
        unit: str,
        lines: int,
        min_priority: str,
        cancel_event: threading.Event | None = None,
    ) -> list[LogLine]:
        """
        Returns up to ``lines`` journal lines at or above ``min_priority``.

        Lines keep the order journalctl printed them in. Timestamps embedded in
        the short-iso text are left in the message; ``LogLine.timestamp`` is None.
        """
        count = clamp_line_count(lines)
        code, stdout, stderr = run_command(
            self._settings.journalctl_bin,
            build_tail_args(unit, count, min_priority),
            cancel_event,
            poll_interval=self._settings.poll_interval,
        )
        if code != 0:
            logger.warning(
                f"journalctl failed for {unit} (code {code}): {stderr.strip()}"
            )
            return []

        return [
            LogLine(None, unit, raw.rstrip(), min_priority)
            for raw in stdout.split("\n")
            if raw
        ]
