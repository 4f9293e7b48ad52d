"""Main CLI entry point using Typer.

This module defines the top-level CLI commands:
- lockmake generate: Write drupal-org.make and drupal-org-core.make
- lockmake check: Fail when the make files on disk are out of date
- lockmake show: Print a make file without writing it
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path  # noqa: TC003 - Typer requires runtime access
from typing import Annotated

import structlog
import typer
from rich.console import Console

from lockmake import __version__

app = typer.Typer(
    name="lockmake",
    help="lockmake - Drush make files from composer.lock",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

LockOption = Annotated[
    Path | None,
    typer.Option("--lock", "-l", help="Path to composer.lock."),
]
ComposerOption = Annotated[
    Path | None,
    typer.Option("--composer", "-c", help="Path to the root composer.json."),
]
OutputDirOption = Annotated[
    Path | None,
    typer.Option("--output-dir", "-o", help="Directory for the make files."),
]


def _stderr_logger(*_args: object) -> structlog.PrintLogger:
    # Resolved per logger so output follows the current stderr
    return structlog.PrintLogger(sys.stderr)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"lockmake {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version", "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output."),
    ] = False,
) -> None:
    """lockmake - Drush make files from composer.lock.

    Use 'lockmake COMMAND --help' for information on specific commands.
    """
    from lockmake.cli.config import get_config  # noqa: PLC0415

    level = logging.DEBUG if verbose else getattr(logging, get_config().log_level)
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=_stderr_logger,
    )


@app.command()
def generate(
    lock: LockOption = None,
    composer: ComposerOption = None,
    output_dir: OutputDirOption = None,
) -> None:
    """Write drupal-org.make and drupal-org-core.make.

    Existing files are overwritten. Either both files are written or neither.

    Examples:
        lockmake generate

        lockmake generate --lock build/composer.lock --output-dir build
    """
    from lockmake.cli.commands.generate import run_generate  # noqa: PLC0415

    run_generate(lock=lock, composer=composer, output_dir=output_dir)


@app.command()
def check(
    lock: LockOption = None,
    composer: ComposerOption = None,
    output_dir: OutputDirOption = None,
) -> None:
    """Check that the make files match composer.lock.

    Exits with status 1 when either file is missing or out of date.

    Examples:
        lockmake check
    """
    from lockmake.cli.commands.check import run_check  # noqa: PLC0415

    run_check(lock=lock, composer=composer, output_dir=output_dir)


@app.command()
def show(
    lock: LockOption = None,
    composer: ComposerOption = None,
    core: Annotated[
        bool,
        typer.Option("--core", help="Show the core-only make file."),
    ] = False,
) -> None:
    """Print a make file to stdout without writing it.

    Examples:
        lockmake show

        lockmake show --core
    """
    from lockmake.cli.commands.show import run_show  # noqa: PLC0415

    run_show(lock=lock, composer=composer, core=core)


if __name__ == "__main__":
    app()
