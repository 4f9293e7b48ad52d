"""Check command implementation."""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from lockmake.cli.commands import resolve_config
from lockmake.manifest.errors import MakeGenerationError
from lockmake.manifest.service import render_make_files, stale_make_files

if TYPE_CHECKING:
    from pathlib import Path

console = Console()
err_console = Console(stderr=True)


def run_check(
    *,
    lock: Path | None,
    composer: Path | None,
    output_dir: Path | None,
) -> None:
    """Execute check command."""
    config = resolve_config(lock, composer, output_dir)

    try:
        result = render_make_files(config.lock_path, config.composer_path, config.output_dir)
    except MakeGenerationError as e:
        err_console.print(f"[red]✗[/red] {e}")
        raise SystemExit(1) from None

    stale = stale_make_files(result)
    if stale:
        err_console.print(f"[red]✗[/red] {len(stale)} make file(s) out of date:")
        for path in stale:
            err_console.print(f"  • {path}")
        err_console.print("Run 'lockmake generate' to update them.")
        raise SystemExit(1)

    console.print("[green]✓[/green] Make files are up to date")
