"""Value types passed between the stages of directive expansion."""

from dataclasses import dataclass
from enum import Enum

from mdbook_cmdrun.core.tokenizer import join_command


class DirectiveMode(Enum):
    """How a directive's output is spliced back into the text."""

    LINE_CONSUMING = "line"
    INLINE = "inline"

    @property
    def inline(self) -> bool:
        return self is DirectiveMode.INLINE


@dataclass(frozen=True)
class Directive:
    """A cmdrun marker located in source text.

    Attributes:
        command: Raw command text between `cmdrun ` and `-->`, untrimmed
        start: Offset of the first character of the match
        end: Offset one past the last character of the match (including the
            line terminator for line-consuming directives)
        mode: Substitution mode of the pattern that produced this match
    """

    command: str
    start: int
    end: int
    mode: DirectiveMode


@dataclass(frozen=True)
class ParsedCommand:
    """Directive command line after flags have been separated from the payload.

    Attributes:
        words: Shell words of the command to execute, in order
        expected_code: Required exit code, or None when any exit code is accepted
    """

    words: tuple[str, ...]
    expected_code: int | None

    @property
    def shell_command(self) -> str:
        """Payload rejoined into a single string for `sh -c` / `cmd /C`."""
        return join_command(self.words)


@dataclass(frozen=True)
class ExecutionResult:
    """Captured output of one shell invocation.

    exit_code is None when the process did not exit normally (killed by a signal).
    """

    stdout: bytes
    stderr: bytes
    exit_code: int | None
