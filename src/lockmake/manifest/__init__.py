"""Make file generation module."""
from __future__ import annotations

from lockmake.manifest.builder import ManifestGenerator, PackageCategory, classify
from lockmake.manifest.errors import (
    LockfileError,
    MakeGenerationError,
    MalformedVersionError,
    MissingCoreError,
    MissingDownloadSourceError,
)
from lockmake.manifest.lockfile import LockSnapshot, load_declared_requirements
from lockmake.manifest.model import CoreMakeManifest, Download, MakeManifest, ProjectDescriptor
from lockmake.manifest.serialization import encode_make
from lockmake.manifest.service import MakeResult, generate_make_files, render_make_files

__all__ = [
    "CoreMakeManifest",
    "Download",
    "LockSnapshot",
    "LockfileError",
    "MakeGenerationError",
    "MakeManifest",
    "MakeResult",
    "MalformedVersionError",
    "ManifestGenerator",
    "MissingCoreError",
    "MissingDownloadSourceError",
    "PackageCategory",
    "ProjectDescriptor",
    "classify",
    "encode_make",
    "generate_make_files",
    "load_declared_requirements",
    "render_make_files",
]
