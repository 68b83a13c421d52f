"""lcovbridge CLI."""

import click

from lcovbridge import __version__
from lcovbridge.cli.convert import convert_command
from lcovbridge.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="lcovbridge")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """lcovbridge - JaCoCo coverage to LCOV with source path resolution."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(convert_command, name="convert")


if __name__ == "__main__":
    cli()
