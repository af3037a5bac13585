"""Output helpers that keep stdout reserved for machine-readable data.

mdBook reads the processed book from our stdout, so every human-facing
message goes to stderr.
"""

import click


def user_output(message: str) -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, err=True)


def machine_output(data: str, *, nl: bool = True) -> None:
    """Write data meant for the calling program to stdout."""
    click.echo(data, nl=nl)


def error_message(message: str) -> str:
    return click.style("Error: ", fg="red") + message
