"""cxxclean CLI - cxc command."""

import click

from cxxclean.cli.clean import clean_command
from cxxclean.cli.scan import scan_command
from cxxclean.core.logging import configure_logging, set_run_id


@click.group()
@click.version_option(version="0.1.0", prog_name="cxc")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """cxxclean - scan and clean C/C++ source trees."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "WARNING")
    set_run_id()


cli.add_command(clean_command, name="clean")
cli.add_command(scan_command, name="scan")


if __name__ == "__main__":
    cli()
