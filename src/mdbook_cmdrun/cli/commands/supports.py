import click

from mdbook_cmdrun.context import CmdRunContext


@click.command("supports")
@click.argument("renderer")
@click.pass_obj
def supports_cmd(obj: CmdRunContext, renderer: str) -> None:
    """Check whether a renderer is supported by this preprocessor.

    Exits 0 when supported, 1 otherwise.
    """
    if not obj.preprocessor.supports_renderer(renderer):
        raise SystemExit(1)
