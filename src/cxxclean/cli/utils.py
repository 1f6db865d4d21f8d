"""CLI utilities."""

from pathlib import Path

import click

from cxxclean.config import CxxCleanConfig, load_config
from cxxclean.core.errors import ConfigError
from cxxclean.core.logging import configure_logging


def load_project_config(
    project_root: Path,
    *,
    verbose: bool = False,
    reserve_stdout: bool = False,
) -> CxxCleanConfig:
    """Load config for ``project_root`` and apply its logging section.

    With ``verbose`` the DEBUG console logging set up by the root command is
    kept and the configured outputs are ignored. ``reserve_stdout`` is for
    commands whose stdout is machine-readable.

    Raises:
        click.ClickException: If the config cannot be loaded.
    """
    try:
        config = load_config(project_root)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    if not verbose:
        configure_logging(config=config.logging, reserve_stdout=reserve_stdout)
    return config
