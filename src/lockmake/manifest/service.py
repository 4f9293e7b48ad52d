"""End-to-end make generation: load, generate, encode, write."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog

from lockmake.manifest.builder import ManifestGenerator
from lockmake.manifest.lockfile import LockSnapshot, load_declared_requirements
from lockmake.manifest.writer import make_paths, write_make_files

if TYPE_CHECKING:
    from pathlib import Path

    from lockmake.manifest.model import CoreMakeManifest, MakeManifest

logger = structlog.get_logger()


@dataclass(frozen=True)
class MakeResult:
    """Outcome of one generation run."""

    manifest: MakeManifest
    core: CoreMakeManifest
    make_text: str
    core_text: str
    make_path: Path
    core_path: Path


def render_make_files(lock_path: Path, composer_path: Path, output_dir: Path) -> MakeResult:
    """Generate both make files in memory without writing them.

    Args:
        lock_path: Path to composer.lock
        composer_path: Path to the root composer.json
        output_dir: Directory the files belong in.

    Returns:
        MakeResult with documents, encoded texts and target paths.

    Raises:
        MakeGenerationError: If the inputs are unreadable or inconsistent.
    """
    logger.info(
        "make_generation_started",
        lock=str(lock_path),
        composer=str(composer_path),
    )
    snapshot = LockSnapshot.load(lock_path)
    requirements = load_declared_requirements(composer_path)

    manifest, core = ManifestGenerator().generate(snapshot.packages, requirements)
    make_path, core_path = make_paths(output_dir)

    return MakeResult(
        manifest=manifest,
        core=core,
        make_text=manifest.to_make(),
        core_text=core.to_make(),
        make_path=make_path,
        core_path=core_path,
    )


def generate_make_files(lock_path: Path, composer_path: Path, output_dir: Path) -> MakeResult:
    """Generate and write drupal-org.make and drupal-org-core.make.

    Either both files are written or neither is.

    Raises:
        MakeGenerationError: If the inputs are unreadable or inconsistent.
        OSError: If the files cannot be written.
        UnicodeEncodeError: If the make text is not encodable as UTF-8.
    """
    result = render_make_files(lock_path, composer_path, output_dir)
    write_make_files(result.make_text, result.core_text, output_dir)
    return result


def stale_make_files(result: MakeResult) -> list[Path]:
    """Return the make files on disk that differ from a rendered result."""
    stale: list[Path] = []
    for path, text in ((result.make_path, result.make_text), (result.core_path, result.core_text)):
        if not path.exists() or path.read_text(encoding="utf-8") != text:
            stale.append(path)
    return stale
