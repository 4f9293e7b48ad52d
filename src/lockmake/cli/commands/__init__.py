"""CLI command implementations."""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from lockmake.cli.config import get_config

if TYPE_CHECKING:
    from pathlib import Path

    from lockmake.cli.config import LockmakeConfig

err_console = Console(stderr=True)


def resolve_config(
    lock: Path | None,
    composer: Path | None,
    output_dir: Path | None = None,
) -> LockmakeConfig:
    """Apply command line paths over the configured ones.

    Exits with status 1 when an input file is missing.

    Returns:
        Config with the effective paths.
    """
    overrides = {
        key: value
        for key, value in (
            ("lock_path", lock),
            ("composer_path", composer),
            ("output_dir", output_dir),
        )
        if value is not None
    }
    config = get_config().model_copy(update=overrides)

    errors = config.validate_inputs()
    if errors:
        for err in errors:
            err_console.print(f"[red]✗[/red] {err}")
        raise SystemExit(1)

    return config
