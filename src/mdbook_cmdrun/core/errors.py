"""Exceptions raised while expanding cmdrun directives.

Every exception here is fatal for the chapter being processed: it aborts the
whole book build. Exit code mismatches and killed processes are not errors;
they are rendered into the chapter as visible text instead.
"""


class CmdRunError(Exception):
    """Base class for fatal directive errors."""


class TokenizationError(CmdRunError):
    """Directive text could not be split into shell words (e.g. unbalanced quotes)."""

    def __init__(self, command: str, reason: str) -> None:
        self.command = command
        self.reason = reason
        super().__init__(f"Failed to split cmdrun command {command!r}: {reason}")


class ArgumentError(CmdRunError):
    """Directive flags were invalid, conflicting, or no command was given."""


class ExecutionError(CmdRunError):
    """The shell itself could not be started."""

    def __init__(self, command: str, cwd: str, reason: str) -> None:
        self.command = command
        self.cwd = cwd
        self.reason = reason
        super().__init__(f"Fail to run shell for {command!r} in '{cwd}': {reason}")
