"""Error boundary handling for CLI commands.

Catches the well-known failures of a preprocessing run at CLI entry points and
turns them into a one-line message and exit status 1, without a stack trace.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

from mdbook_cmdrun.cli.output import error_message, user_output
from mdbook_cmdrun.core.errors import CmdRunError

T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that reports fatal errors cleanly and exits with status 1.

    Catches:
        - CmdRunError: tokenization, argument or shell spawn failures
        - ValueError: malformed preprocessor input (pydantic ValidationError
          and json errors are ValueErrors)

    All other exceptions bubble up normally with full stack traces.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except CmdRunError as e:
            user_output(error_message(str(e)))
            raise SystemExit(1) from None
        except ValueError as e:
            user_output(error_message(str(e)))
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
