"""Shell execution abstraction.

Lets the directive pipeline be tested with an in-memory fake instead of
spawning processes or patching subprocess.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from mdbook_cmdrun.core.types import ExecutionResult


class ShellExecutor(ABC):
    """Abstract interface for running one command string through a shell."""

    @abstractmethod
    def run(self, command: str, cwd: Path) -> ExecutionResult:
        """Run `command` through the platform shell and wait for it to finish.

        Args:
            command: Complete shell command string (passed as a single argument
                to `sh -c` or `cmd /C`)
            cwd: Working directory for the process

        Returns:
            ExecutionResult with captured stdout/stderr bytes and the exit code
            (None if the process was terminated by a signal)

        Raises:
            ExecutionError: If the shell itself could not be started
        """
        ...
