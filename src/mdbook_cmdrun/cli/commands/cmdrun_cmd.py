"""Run a single directive command outside of a book build."""

from pathlib import Path

import click

from mdbook_cmdrun.cli.error_boundary import cli_error_boundary
from mdbook_cmdrun.cli.output import machine_output
from mdbook_cmdrun.context import CmdRunContext
from mdbook_cmdrun.core.arguments import cmdrun_options, expected_code_for
from mdbook_cmdrun.core.tokenizer import quote_whitespace_words
from mdbook_cmdrun.core.types import ParsedCommand


# Only the long help option; `-h` belongs to the command (`ls -h`).
@click.command(
    "cmdrun",
    context_settings=dict(ignore_unknown_options=True, help_option_names=["--help"]),
)
@cmdrun_options
@click.pass_obj
@cli_error_boundary
def cmdrun_cmd(
    obj: CmdRunContext, strict: bool, expect_return_code: int | None, cmd: tuple[str, ...]
) -> None:
    """Test run a command before putting it in a book.

    Takes the same arguments as a directive.
    Prints exactly what a line-consuming directive would be replaced with.
    """
    parsed = ParsedCommand(
        words=tuple(quote_whitespace_words(cmd)),
        expected_code=expected_code_for(strict, expect_return_code),
    )
    machine_output(obj.cmdrun.execute(parsed, Path.cwd(), inline=False), nl=False)
