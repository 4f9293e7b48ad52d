"""Generate command implementation."""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from lockmake.cli.commands import resolve_config
from lockmake.manifest.errors import MakeGenerationError
from lockmake.manifest.service import generate_make_files

if TYPE_CHECKING:
    from pathlib import Path

    from lockmake.manifest.service import MakeResult

console = Console()
err_console = Console(stderr=True)


def run_generate(
    *,
    lock: Path | None,
    composer: Path | None,
    output_dir: Path | None,
) -> None:
    """Execute generate command.

    Args:
        lock: Path to composer.lock (config default if None).
        composer: Path to composer.json (config default if None).
        output_dir: Output directory (config default if None).
    """
    config = resolve_config(lock, composer, output_dir)
    console.print(f"[blue]i[/blue] Reading {config.lock_path}...")

    try:
        result = generate_make_files(config.lock_path, config.composer_path, config.output_dir)
    except MakeGenerationError as e:
        err_console.print(f"[red]✗[/red] {e}")
        raise SystemExit(1) from None
    except (OSError, UnicodeError) as e:
        err_console.print(f"[red]✗[/red] Could not write make files: {e}")
        raise SystemExit(1) from None

    _print_summary(result)
    console.print(f"[green]✓[/green] Wrote {result.make_path} and {result.core_path}")


def _print_summary(result: MakeResult) -> None:
    """Print make file summary.

    Args:
        result: The generation result.
    """
    table = Table(title="Make Summary")
    table.add_column("Property", style="cyan")
    table.add_column("Value")

    table.add_row("Core", result.manifest.core)
    table.add_row("Drupal", result.core.drupal.version or "(dev branch)")
    table.add_row("Projects", str(len(result.manifest.projects)))
    table.add_row("Libraries", str(len(result.manifest.libraries)))

    patched = sum(
        1
        for entry in (*result.manifest.projects.values(), *result.manifest.libraries.values())
        if entry.patch
    )
    if patched:
        table.add_row("Patched", str(patched))

    console.print(table)
