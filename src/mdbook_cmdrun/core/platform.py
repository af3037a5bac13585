"""Platform-dependent shell invocation and line terminator handling.

Selected once at start-up and passed down; nothing below the CLI checks
os.name directly.
"""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Platform:
    """Shell to launch and newline convention of the build host.

    Attributes:
        shell: Program and flag used to run a command string, e.g. ("sh", "-c")
        crlf_line_endings: Whether line-consuming output is rewritten to CRLF
    """

    shell: tuple[str, str]
    crlf_line_endings: bool


POSIX_PLATFORM = Platform(shell=("sh", "-c"), crlf_line_endings=False)
WINDOWS_PLATFORM = Platform(shell=("cmd", "/C"), crlf_line_endings=True)


def detect_platform() -> Platform:
    if os.name == "nt":
        return WINDOWS_PLATFORM
    return POSIX_PLATFORM
