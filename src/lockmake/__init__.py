"""lockmake - Drush make files from a Composer lock.

Converts composer.lock into the drupal-org.make and drupal-org-core.make
files used by drupal.org's legacy packaging system.

Example:
    >>> from pathlib import Path
    >>> from lockmake import generate_make_files
    >>> generate_make_files(Path("composer.lock"), Path("composer.json"), Path.cwd())
"""
from __future__ import annotations

from lockmake.manifest import (
    CoreMakeManifest,
    MakeGenerationError,
    MakeManifest,
    ManifestGenerator,
    generate_make_files,
)
from lockmake.types import LockedPackage, PackageType

__version__ = "0.1.0"

__all__ = [
    "CoreMakeManifest",
    "LockedPackage",
    "MakeGenerationError",
    "MakeManifest",
    "ManifestGenerator",
    "PackageType",
    "__version__",
    "generate_make_files",
]
