"""Turn captured process output into replacement text."""

from mdbook_cmdrun.core.platform import Platform
from mdbook_cmdrun.core.types import ExecutionResult


def decode_output(data: bytes) -> str:
    """Decode captured bytes as UTF-8, replacing invalid sequences."""
    return data.decode("utf-8", errors="replace")


def _lines(text: str) -> list[str]:
    # Splits on "\n" and "\r\n" only; a trailing terminator does not start a new line.
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def format_output(stdout: bytes, inline: bool, platform: Platform) -> str:
    """Normalize stdout for the substitution mode and platform.

    Inline output loses all trailing whitespace. Line-consuming output is left
    as-is, except on CRLF platforms where every line ends in "\\r\\n" and
    non-empty output gets exactly one trailing terminator.
    """
    text = decode_output(stdout)
    if inline:
        return text.rstrip()
    if not platform.crlf_line_endings:
        return text

    result = "\r\n".join(_lines(text))
    if result:
        result += "\r\n"
    return result


def compose_result(
    command: str,
    result: ExecutionResult,
    expected_code: int | None,
    inline: bool,
    platform: Platform,
) -> str:
    """Pick the replacement text for one executed directive.

    Neither a killed process nor an unexpected exit code aborts the build;
    both produce visible text in the chapter instead.
    """
    if result.exit_code is None:
        return f"'{command}' was ended before completing."

    stdout = format_output(result.stdout, inline, platform)
    if expected_code is None or result.exit_code == expected_code:
        return stdout

    return (
        f"**cmdrun error**: '{command}' returned exit code {result.exit_code} "
        f"instead of {expected_code}.\n{stdout}\n{decode_output(result.stderr)}"
    )
