"""
Unit tests for the journal tail reader.
"""

import sys
from unittest.mock import patch

import pytest

from config import IntrospectionSettings
from core.journal_core import JournalReader, build_tail_args, clamp_line_count
from core.models import LogLine
from utils.process_runner import CommandResult


@pytest.fixture
def reader():
    return JournalReader(IntrospectionSettings(journalctl_bin="journalctl"))


def _run_returning(stdout: str = "", code: int = 0, stderr: str = ""):
    return patch(
        "core.journal_core.run_command",
        return_value=CommandResult(code, stdout, stderr),
    )


class TestClampLineCount:
    """Tests for clamp_line_count."""

    @pytest.mark.parametrize(
        "requested, expected",
        [(-50, 1), (0, 1), (1, 1), (200, 200), (2000, 2000), (5000, 2000)],
    )
    def test_clamps_into_range(self, requested, expected):
        assert clamp_line_count(requested) == expected


class TestBuildTailArgs:
    """Tests for the journalctl argument list."""

    def test_argument_shape(self):
        assert build_tail_args("app.service", 200, "warning") == [
            "--user",
            "-u", "app.service",
            "-n", "200",
            "-o", "short-iso",
            "--no-pager",
            "-p", "warning",
        ]


class TestTail:
    """Tests for JournalReader.tail."""

    def test_lines_are_wrapped_in_order(self, reader):
        """Non-empty lines become LogLines in tool order; blank ones are dropped."""
        stdout = (
            "2026-02-08T03:54:36+0000 host app[12]: first  \n"
            "2026-02-08T03:54:37+0000 host app[12]: second\n"
            "\n"
            "2026-02-08T03:54:38+0000 host app[12]: third\n"
        )
        with _run_returning(stdout):
            lines = reader.tail("app.service", 200, "err")

        assert [line.message for line in lines] == [
            "2026-02-08T03:54:36+0000 host app[12]: first",
            "2026-02-08T03:54:37+0000 host app[12]: second",
            "2026-02-08T03:54:38+0000 host app[12]: third",
        ]
        assert all(line.timestamp is None for line in lines)
        assert all(line.priority == "err" for line in lines)
        assert all(line.unit == "app.service" for line in lines)

    def test_internal_whitespace_is_preserved(self, reader):
        """Only trailing whitespace is trimmed."""
        with _run_returning("  indented\tmessage  \r\n"):
            lines = reader.tail("app.service", 10, "warning")

        assert lines == [LogLine(None, "app.service", "  indented\tmessage", "warning")]

    def test_requested_count_is_clamped_before_use(self, reader):
        """Out-of-range counts reach journalctl clamped."""
        with _run_returning("") as mock_run:
            reader.tail("app.service", 5000, "warning")
            assert mock_run.call_args.args[1][4] == "2000"

            reader.tail("app.service", 0, "warning")
            assert mock_run.call_args.args[1][4] == "1"

    def test_uses_configured_binary(self):
        reader = JournalReader(IntrospectionSettings(journalctl_bin="/usr/bin/journalctl"))
        with _run_returning("") as mock_run:
            reader.tail("app.service", 5, "info")

        assert mock_run.call_args.args[0] == "/usr/bin/journalctl"
        assert mock_run.call_args.args[1] == build_tail_args("app.service", 5, "info")

    def test_empty_output_is_empty_list(self, reader):
        with _run_returning(""):
            assert reader.tail("app.service", 5, "warning") == []

    def test_no_entries_marker_is_passed_through(self, reader):
        """journalctl's '-- No entries --' notice is kept as an ordinary line."""
        with _run_returning("-- No entries --\n"):
            lines = reader.tail("app.service", 5, "warning")
        assert [line.message for line in lines] == ["-- No entries --"]

    def test_null_byte_unit_name_returns_empty_list(self):
        """A unit name journalctl cannot be started with degrades to []."""
        reader = JournalReader(IntrospectionSettings(journalctl_bin=sys.executable))
        assert reader.tail("a\x00b", 5, "warning") == []

    def test_nonzero_exit_returns_empty_list(self, reader, caplog):
        """A failing journalctl yields [] (never None) and a warning."""
        with _run_returning("line\n", code=1, stderr="No journal files were found."):
            with caplog.at_level("WARNING", logger="core.journal_core"):
                lines = reader.tail("app.service", 5, "warning")

        assert lines == []
        assert "journalctl failed for app.service" in caplog.text

    def test_to_dict(self):
        line = LogLine(None, "app.service", "boom", "warning")
        assert line.to_dict() == {
            "timestamp": None,
            "unit": "app.service",
            "message": "boom",
            "priority": "warning",
        }
