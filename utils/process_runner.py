# utils/process_runner.py
"""
Short-lived external command execution.

Spawns one process per call, drains stdout and stderr on background threads
while waiting for exit, and returns both streams as text together with the
exit code. A ``threading.Event`` acts as the cancellation signal: once it is
set the wait is abandoned, the child is terminated and ``CommandCancelled``
is raised.
"""

import locale
import subprocess
import threading
from typing import NamedTuple

from logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_POLL_INTERVAL = 0.05
TERMINATE_GRACE_SECONDS = 1.0
START_FAILURE_CODE = -1


class CommandResult(NamedTuple):
    returncode: int
    stdout: str
    stderr: str


class CommandCancelled(Exception):
    """Raised when the cancellation event fires before the command finished."""

    def __init__(self, command: str):
        super().__init__(f"{command} cancelled before completion")
        self.command = command


def _drain(stream, chunks: list[str]) -> None:
    """Read a pipe to EOF into ``chunks``."""
    try:
        chunks.append(stream.read())
    except (OSError, ValueError) as e:
        # Pipe closed underneath us after a kill.
        logger.debug(f"Stream drain stopped early: {e}")
    finally:
        try:
            stream.close()
        except OSError:
            pass


def _is_cancelled(cancel_event: threading.Event | None) -> bool:
    return cancel_event is not None and cancel_event.is_set()


def _terminate(proc: subprocess.Popen) -> None:
    """SIGTERM the child, escalating to SIGKILL after a short grace period."""
    if proc.poll() is not None:
        return
    proc.terminate()
    try:
        proc.wait(timeout=TERMINATE_GRACE_SECONDS)
    except subprocess.TimeoutExpired:
        proc.kill()
        proc.wait()


def _wait_for_exit(
    proc: subprocess.Popen,
    cancel_event: threading.Event | None,
    poll_interval: float,
) -> bool:
    """Wait for the child to exit. Returns False if cancelled first."""
    if cancel_event is None:
        proc.wait()
        return True

    while True:
        try:
            proc.wait(timeout=poll_interval)
            return True
        except subprocess.TimeoutExpired:
            if cancel_event.is_set():
                return False


def _join_readers(
    readers: list[threading.Thread],
    cancel_event: threading.Event | None,
    poll_interval: float,
) -> bool:
    """Join the drain threads. Returns False if cancelled first."""
    for reader in readers:
        while reader.is_alive():
            reader.join(poll_interval)
            if reader.is_alive() and _is_cancelled(cancel_event):
                return False
    return True


def run_command(
    command: str,
    args: list[str],
    cancel_event: threading.Event | None = None,
    poll_interval: float = DEFAULT_POLL_INTERVAL,
) -> CommandResult:
    """
    Run ``command`` with ``args`` and capture its output.

    Args:
        command: Executable name, resolved through PATH.
        args: Argument list; every element is passed verbatim as one argv entry.
        cancel_event: Optional cancellation signal.
        poll_interval: Seconds between cancellation checks.

    Returns:
        CommandResult with the exit code and the full stdout/stderr text.
        A command that cannot be started yields ``(-1, "", <diagnostic>)``.

    Raises:
        CommandCancelled: If ``cancel_event`` is set before the command finished.
    """
    if _is_cancelled(cancel_event):
        raise CommandCancelled(command)

    argv = [command, *args]
    try:
        proc = subprocess.Popen(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            encoding=locale.getpreferredencoding(False),
            errors="replace",
        )
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to start {command}: {e}")
        return CommandResult(START_FAILURE_CODE, "", f"Failed to start process: {e}")

    logger.debug(f"Started {command} (pid {proc.pid}) with args {args}")

    stdout_chunks: list[str] = []
    stderr_chunks: list[str] = []
    readers = [
        threading.Thread(
            target=_drain,
            args=(proc.stdout, stdout_chunks),
            name=f"{command}-stdout",
            daemon=True,
        ),
        threading.Thread(
            target=_drain,
            args=(proc.stderr, stderr_chunks),
            name=f"{command}-stderr",
            daemon=True,
        ),
    ]
    for reader in readers:
        reader.start()

    finished = _wait_for_exit(proc, cancel_event, poll_interval) and _join_readers(
        readers, cancel_event, poll_interval
    )
    if not finished:
        _terminate(proc)
        for reader in readers:
            reader.join(TERMINATE_GRACE_SECONDS)
        logger.info(f"{command} (pid {proc.pid}) cancelled and terminated")
        raise CommandCancelled(command)

    return CommandResult(proc.returncode, "".join(stdout_chunks), "".join(stderr_chunks))
