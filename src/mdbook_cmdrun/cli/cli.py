import logging
import os

import click

from mdbook_cmdrun import __version__
from mdbook_cmdrun.cli.commands.cmdrun_cmd import cmdrun_cmd
from mdbook_cmdrun.cli.commands.preprocess import run_preprocessing
from mdbook_cmdrun.cli.commands.supports import supports_cmd
from mdbook_cmdrun.cli.error_boundary import cli_error_boundary
from mdbook_cmdrun.context import create_context

# Enable debug logging (to stderr) if CMDRUN_DEBUG environment variable is set
if os.getenv("CMDRUN_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(name="mdbook-cmdrun", invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """mdbook preprocessor to run arbitrary commands and replace the stdout of
    these commands inside the markdown file.

    Without a subcommand, reads the book from stdin and writes the processed
    book to stdout.
    """
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()

    if ctx.invoked_subcommand is None:
        run_preprocessing(ctx.obj)


cli.add_command(supports_cmd)
cli.add_command(cmdrun_cmd)


def main() -> None:
    """Entry point with error boundary."""
    cli_error_boundary(cli)()
