"""User-facing status output for CLI operations.

All user-facing text goes to a shared Rich console on stderr so that
``cxc scan --json`` keeps stdout clean for the JSON document.

Usage::

    from cxxclean.core.progress import status

    status("Scanning 3 files")
    status("Removed build/main.o", style="success")  # ✓ Removed build/main.o
    status("Failed to remove x.o", style="error")  # ✗ Failed to remove x.o
"""

from __future__ import annotations

from rich.console import Console

from cxxclean.core.logging import get_logger

log = get_logger("progress")

# Console for output
_console = Console(stderr=True)

# Style prefixes
_STYLES = {
    "success": "[green]✓[/green] ",
    "error": "[red]✗[/red] ",
    "warning": "[yellow]![/yellow] ",
    "info": "  ",
    "none": "",
}


def get_console() -> Console:
    """Get the shared Rich console instance."""
    return _console


def status(message: str, *, style: str = "info", indent: int = 0) -> None:
    """Print a styled status message to stderr."""
    prefix = _STYLES.get(style, "")
    padding = " " * indent
    _console.print(f"{padding}{prefix}{message}", highlight=False)

    log.debug("status", message=message, style=style)


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """Return grammatically correct singular/plural form.

    Args:
        count: The number of items
        singular: Singular form (e.g., "file")
        plural: Plural form (default: singular + "s")

    Returns:
        Formatted string like "1 file" or "3 files"
    """
    if plural is None:
        plural = singular + "s"
    word = singular if count == 1 else plural
    return f"{count} {word}"
