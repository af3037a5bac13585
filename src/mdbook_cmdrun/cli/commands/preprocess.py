"""Default action: preprocess the book mdBook sends on stdin."""

import click

from mdbook_cmdrun.book import MDBOOK_VERSION, parse_input
from mdbook_cmdrun.cli.error_boundary import cli_error_boundary
from mdbook_cmdrun.cli.output import machine_output, user_output
from mdbook_cmdrun.context import CmdRunContext


@cli_error_boundary
def run_preprocessing(context: CmdRunContext) -> None:
    """Read `[context, book]` from stdin, expand directives, write the book to stdout.

    Nothing is written to stdout unless every chapter was processed.
    """
    raw = click.get_binary_stream("stdin").read()
    book_ctx, book = parse_input(raw)

    if book_ctx.mdbook_version != MDBOOK_VERSION:
        user_output(
            f"Warning: The mdbook-cmdrun preprocessor was built against version "
            f"{MDBOOK_VERSION} of mdbook, but we're being called from version "
            f"{book_ctx.mdbook_version}"
        )

    processed = context.preprocessor.run(book_ctx, book)
    machine_output(processed.to_json(), nl=False)
