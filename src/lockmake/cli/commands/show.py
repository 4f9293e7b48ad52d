"""Show command implementation."""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from lockmake.cli.commands import resolve_config
from lockmake.manifest.errors import MakeGenerationError
from lockmake.manifest.service import render_make_files

if TYPE_CHECKING:
    from pathlib import Path

console = Console()
err_console = Console(stderr=True)


def run_show(*, lock: Path | None, composer: Path | None, core: bool) -> None:
    """Execute show command."""
    config = resolve_config(lock, composer)

    try:
        result = render_make_files(config.lock_path, config.composer_path, config.output_dir)
    except MakeGenerationError as e:
        err_console.print(f"[red]✗[/red] {e}")
        raise SystemExit(1) from None

    text = result.core_text if core else result.make_text
    # Make keys use brackets, which rich would read as markup
    console.print(text, markup=False, highlight=False, soft_wrap=True, end="")
