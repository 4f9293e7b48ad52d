"""Type definitions for lock snapshot packages."""
from __future__ import annotations

from lockmake.types.package import (
    DRUPAL_VENDOR,
    LIBRARY_TYPES,
    PROJECT_TYPES,
    LockedPackage,
    PackageDist,
    PackageSource,
    PackageType,
)

__all__ = [
    "DRUPAL_VENDOR",
    "LIBRARY_TYPES",
    "PROJECT_TYPES",
    "LockedPackage",
    "PackageDist",
    "PackageSource",
    "PackageType",
]
