"""Production shell executor backed by subprocess."""

import logging
import subprocess
from pathlib import Path

from mdbook_cmdrun.core.errors import ExecutionError
from mdbook_cmdrun.core.executor.abc import ShellExecutor
from mdbook_cmdrun.core.platform import Platform
from mdbook_cmdrun.core.types import ExecutionResult

logger = logging.getLogger(__name__)


class RealShellExecutor(ShellExecutor):
    """Runs commands with `sh -c` (POSIX) or `cmd /C` (Windows).

    The child inherits the environment of the preprocessor. There is no
    timeout: a command that never exits blocks the build.
    """

    def __init__(self, platform: Platform) -> None:
        self._platform = platform

    def run(self, command: str, cwd: Path) -> ExecutionResult:
        program, flag = self._platform.shell
        argv = [program, flag, command]
        logger.debug("Running %r in %s", argv, cwd)

        try:
            completed = subprocess.run(argv, cwd=cwd, capture_output=True, check=False)
        except OSError as e:
            raise ExecutionError(command, str(cwd), str(e)) from e

        logger.debug(
            "Exit code %d, stdout %r, stderr %r",
            completed.returncode,
            completed.stdout,
            completed.stderr,
        )

        # subprocess reports death by signal N as returncode -N
        exit_code = completed.returncode if completed.returncode >= 0 else None
        return ExecutionResult(
            stdout=completed.stdout, stderr=completed.stderr, exit_code=exit_code
        )
