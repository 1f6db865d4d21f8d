"""cxc clean command - remove build artifacts from a directory."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import click
import questionary

from cxxclean.cli.utils import load_project_config
from cxxclean.core.errors import CleanError
from cxxclean.core.logging import get_logger
from cxxclean.core.progress import get_console, pluralize, status
from cxxclean.files import collect_files

log = get_logger("cli.clean")


@dataclass
class CleanResult:
    """Outcome of one clean run."""

    matched: list[Path] = field(default_factory=list)
    removed: list[Path] = field(default_factory=list)
    errors: list[CleanError] = field(default_factory=list)
    cancelled: bool = False

    @property
    def ok(self) -> bool:
        return not self.errors


def _confirm(count: int) -> bool:
    answer = questionary.select(
        f"Remove {pluralize(count, 'file')}? This action cannot be undone.",
        choices=[
            questionary.Choice("No, keep them", value=False),
            questionary.Choice("Yes, remove them", value=True),
        ],
        style=questionary.Style(
            [
                ("question", "bold"),
                ("highlighted", "fg:red bold"),
                ("selected", "fg:red"),
            ]
        ),
    ).ask()
    return bool(answer)


def clean_directory(
    directory: Path,
    patterns: list[str] | tuple[str, ...],
    *,
    recursive: bool = False,
    force: bool = False,
) -> CleanResult:
    """Remove files under ``directory`` that match any of ``patterns``.

    Lists the matching files and asks for confirmation unless ``force``.

    Raises:
        CleanError: If ``directory`` is not a directory.
    """
    if not directory.is_dir():
        raise CleanError.not_a_directory(str(directory))

    result = CleanResult(matched=collect_files(directory, patterns, recursive=recursive))

    if not result.matched:
        status("Nothing to clean - no files match the patterns", style="warning")
        return result

    console = get_console()
    console.print("\n[bold]The following files will be permanently deleted:[/bold]\n")
    for path in result.matched:
        status(str(path), indent=2)
    console.print()

    if not force and not _confirm(len(result.matched)):
        status("Cancelled", style="none")
        result.cancelled = True
        return result

    for path in result.matched:
        try:
            path.unlink()
        except OSError as e:
            error = CleanError.remove_failed(str(path), str(e))
            result.errors.append(error)
            log.warning("remove_failed", path=str(path), reason=str(e))
            status(error.message, style="error", indent=2)
            continue
        result.removed.append(path)
        log.info("removed", path=str(path))
        status(f"Removed {path}", style="success", indent=2)

    if result.ok:
        console.print()
        status(f"Removed {pluralize(len(result.removed), 'file')}", style="success")
    return result


@click.command()
@click.argument(
    "directory",
    default=None,
    required=False,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.option("-r", "--recursive", is_flag=True, help="Remove matching files in subdirectories too")
@click.option("-f", "--force", is_flag=True, help="Remove files without confirmation")
@click.option(
    "-p",
    "--pattern",
    "patterns",
    multiple=True,
    help="Glob of files to remove (repeatable). Replaces the configured patterns.",
)
@click.pass_context
def clean_command(
    ctx: click.Context,
    directory: Path | None,
    recursive: bool,
    force: bool,
    patterns: tuple[str, ...],
) -> None:
    """Remove files matching the clean patterns from DIRECTORY.

    DIRECTORY defaults to the current directory. Its .cxxclean/config.yaml
    supplies the default patterns and the recursive/force settings.
    """
    directory = directory or Path(".")
    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    config = load_project_config(directory, verbose=verbose)

    result = clean_directory(
        directory,
        list(patterns) or config.clean.patterns,
        recursive=recursive or config.clean.recursive,
        force=force or config.clean.force,
    )
    if not result.ok:
        raise click.ClickException(f"Failed to remove {pluralize(len(result.errors), 'file')}")
