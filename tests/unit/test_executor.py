"""Tests for the subprocess-backed shell executor."""

import subprocess
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from mdbook_cmdrun.core.errors import ExecutionError
from mdbook_cmdrun.core.executor.real import RealShellExecutor
from mdbook_cmdrun.core.platform import POSIX_PLATFORM, WINDOWS_PLATFORM


def _completed(returncode: int, stdout: bytes = b"", stderr: bytes = b"") -> Mock:
    result = Mock(spec=subprocess.CompletedProcess)
    result.returncode = returncode
    result.stdout = stdout
    result.stderr = stderr
    return result


def test_runs_command_through_sh() -> None:
    with patch("mdbook_cmdrun.core.executor.real.subprocess.run") as mock_run:
        mock_run.return_value = _completed(0, b"hi\n")

        result = RealShellExecutor(POSIX_PLATFORM).run("echo hi", Path("/book/src"))

        assert result.stdout == b"hi\n"
        assert result.exit_code == 0
        mock_run.assert_called_once_with(
            ["sh", "-c", "echo hi"], cwd=Path("/book/src"), capture_output=True, check=False
        )


def test_runs_command_through_cmd_on_windows() -> None:
    with patch("mdbook_cmdrun.core.executor.real.subprocess.run") as mock_run:
        mock_run.return_value = _completed(0)

        RealShellExecutor(WINDOWS_PLATFORM).run("dir", Path("src"))

        assert mock_run.call_args.args[0] == ["cmd", "/C", "dir"]


def test_nonzero_exit_is_reported_not_raised() -> None:
    with patch("mdbook_cmdrun.core.executor.real.subprocess.run") as mock_run:
        mock_run.return_value = _completed(1, b"", b"failed\n")

        result = RealShellExecutor(POSIX_PLATFORM).run("false", Path("."))

        assert result.exit_code == 1
        assert result.stderr == b"failed\n"


def test_signal_termination_has_no_exit_code() -> None:
    with patch("mdbook_cmdrun.core.executor.real.subprocess.run") as mock_run:
        mock_run.return_value = _completed(-9)

        result = RealShellExecutor(POSIX_PLATFORM).run("sleep 100", Path("."))

        assert result.exit_code is None


def test_spawn_failure_raises_execution_error() -> None:
    with patch("mdbook_cmdrun.core.executor.real.subprocess.run") as mock_run:
        mock_run.side_effect = FileNotFoundError("No such file or directory: 'sh'")

        with pytest.raises(ExecutionError) as exc_info:
            RealShellExecutor(POSIX_PLATFORM).run("echo hi", Path("/book/src"))

        assert "Fail to run shell" in str(exc_info.value)
        assert exc_info.value.cwd == "/book/src"
