"""cxc scan command - report includes, namespaces and typedefs of source files."""

from __future__ import annotations

import json
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from cxxclean.cli.utils import load_project_config
from cxxclean.core.errors import ScanError
from cxxclean.core.logging import get_logger
from cxxclean.core.progress import status
from cxxclean.files import collect_sources
from cxxclean.source import SourceItem, scan_file

log = get_logger("cli.scan")


def make_summary_table(results: dict[str, SourceItem]) -> Table:
    """One row per file: dependencies, namespaces and typedefs."""
    table = Table(show_header=True, header_style="bold", show_lines=True)
    table.add_column("File", style="cyan", no_wrap=True)
    table.add_column("Dependencies")
    table.add_column("Namespaces")
    table.add_column("Typedefs")

    for path, item in results.items():
        table.add_row(
            path,
            "\n".join(item.dependencies) or "[dim]-[/dim]",
            "\n".join(item.namespaces) or "[dim]-[/dim]",
            "\n".join(f"{alias} = {raw}" for alias, raw in item.typedefs.items()) or "[dim]-[/dim]",
        )
    return table


@click.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path))
@click.option("-r", "--recursive", is_flag=True, help="Descend into subdirectories")
@click.option("--json", "as_json", is_flag=True, help="Print the full scan result as JSON")
@click.pass_context
def scan_command(
    ctx: click.Context,
    paths: tuple[Path, ...],
    recursive: bool,
    as_json: bool,
) -> None:
    """Partition C/C++ sources and report what they include and declare.

    PATHS may be files or directories. Directories contribute the files whose
    extension belongs to the configured language.

    Settings come from .cxxclean/config.yaml in the current directory, since
    PATHS may span several trees. cxc clean reads the one in its DIRECTORY.
    """
    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    config = load_project_config(Path.cwd(), verbose=verbose, reserve_stdout=as_json)
    language = config.language.to_descriptor()

    files = collect_sources(paths, language.extensions, recursive=recursive)
    if not files:
        status("No source files found", style="warning")
        return

    results: dict[str, SourceItem] = {}
    for path in files:
        try:
            results[str(path)] = scan_file(path, language, encoding=config.language.encoding)
        except ScanError as e:
            log.error("scan_failed", error=e.error_name, **e.details)
            raise click.ClickException(str(e)) from e

    if as_json:
        click.echo(json.dumps({p: item.to_dict() for p, item in results.items()}, indent=2))
        return

    Console().print(make_summary_table(results))
