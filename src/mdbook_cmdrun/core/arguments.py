"""Directive-local command line: `[--strict | --expect-return-code N] COMMAND...`.

The grammar is a click command so that directives and the `cmdrun`
subcommand share one definition. Options are recognized anywhere in the word
list (`false --expect-return-code 0` runs `false` and expects 0); unknown
options and everything after a bare `--` belong to the command.
"""

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

import click

from mdbook_cmdrun.core.errors import ArgumentError
from mdbook_cmdrun.core.types import ParsedCommand

USAGE = "Usage: cmdrun [--strict | --expect-return-code N] COMMAND..."

# No help option: `-h` / `--help` inside a directive belong to the command.
DIRECTIVE_CONTEXT_SETTINGS = dict(ignore_unknown_options=True, help_option_names=[])

F = TypeVar("F", bound=Callable[..., Any])


def cmdrun_options(func: F) -> F:
    """Attach the directive options and the trailing COMMAND argument."""
    func = click.argument("cmd", nargs=-1, required=True, type=click.UNPROCESSED)(func)
    func = click.option(
        "--expect-return-code",
        type=int,
        metavar="N",
        help="require the specific return code N",
    )(func)
    func = click.option(
        "--strict",
        is_flag=True,
        help="require command to return the successful exit code 0",
    )(func)
    return func


@click.command("cmdrun", context_settings=DIRECTIVE_CONTEXT_SETTINGS)
@cmdrun_options
def directive_command(strict: bool, expect_return_code: int | None, cmd: tuple[str, ...]) -> None:
    """Command line of a single cmdrun directive (parsed, never invoked)."""


def expected_code_for(strict: bool, expect_return_code: int | None) -> int | None:
    """Resolve the exit code policy: 0 for --strict, N, or None for any code.

    Raises:
        ArgumentError: If both --strict and --expect-return-code were given
    """
    if strict and expect_return_code is not None:
        raise ArgumentError(
            f"the argument '--strict' cannot be used with '--expect-return-code <N>'\n\n{USAGE}"
        )
    if strict:
        return 0
    return expect_return_code


def parse_arguments(words: Sequence[str]) -> ParsedCommand:
    """Separate exit-code flags from the command payload.

    Args:
        words: Shell words as produced by split_command()

    Returns:
        ParsedCommand with the payload words and the expected exit code

    Raises:
        ArgumentError: On conflicting flags, a missing or non-integer N, or an
            empty command
    """
    try:
        ctx = directive_command.make_context("cmdrun", list(words))
    except click.UsageError as e:
        raise ArgumentError(f"{e.format_message()}\n\n{USAGE}") from None

    params = ctx.params
    return ParsedCommand(
        words=tuple(params["cmd"]),
        expected_code=expected_code_for(params["strict"], params["expect_return_code"]),
    )
