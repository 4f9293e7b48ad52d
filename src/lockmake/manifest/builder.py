"""Make manifest generation from a lock snapshot."""
from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum
from typing import TYPE_CHECKING

import structlog

from lockmake.manifest.errors import MissingDownloadSourceError
from lockmake.manifest.model import (
    CORE_PROJECT_KEY,
    CoreMakeManifest,
    Download,
    DownloadType,
    MakeManifest,
    ProjectDescriptor,
)
from lockmake.manifest.versions import branch_name, is_dev_version, rewrite_version
from lockmake.types.package import LIBRARY_TYPES, PROJECT_TYPES, LockedPackage, PackageType

if TYPE_CHECKING:
    from collections.abc import Set

logger = structlog.get_logger()

# Make "type" values; profiles deliberately have none
_PROJECT_TYPE_NAMES = {
    PackageType.DRUPAL_CORE: "core",
    PackageType.DRUPAL_MODULE: "module",
    PackageType.DRUPAL_THEME: "theme",
}


class PackageCategory(str, Enum):
    """Where a locked package ends up in the make file."""

    PROJECT = "project"  # Drupal core, module, theme or profile from drupal/
    LIBRARY = "library"  # Required asset library
    THEME = "theme"  # Required theme from another vendor
    IGNORED = "ignored"


def classify(package: LockedPackage, requirements: Set[str]) -> PackageCategory:
    """Decide how a package is included in the make file.

    Args:
        package: The locked package.
        requirements: Package names required by the root composer.json.

    Returns:
        The package's category. Unknown types are IGNORED.
    """
    if package.type in PROJECT_TYPES and package.is_drupal_vendor:
        return PackageCategory.PROJECT
    # Libraries only count when the root project asks for them directly
    if package.type in LIBRARY_TYPES and package.name in requirements:
        return PackageCategory.LIBRARY
    if package.type is PackageType.DRUPAL_THEME and package.name in requirements:
        return PackageCategory.THEME
    return PackageCategory.IGNORED


def build_download(package: LockedPackage) -> Download | None:
    """Build the download block shared by projects and libraries.

    Returns:
        A git download when the package has a source, an archive download
        when it only has a dist, otherwise None.
    """
    if package.source is not None:
        return Download(
            type=DownloadType.GIT,
            url=package.source.url,
            branch=package.version,
            revision=package.source.reference,
        )
    if package.dist is not None:
        return Download(type=DownloadType.GET, url=package.dist.url)
    return None


def build_library(package: LockedPackage) -> ProjectDescriptor:
    """Build the make entry for an asset library."""
    return ProjectDescriptor(
        type="library",
        download=build_download(package),
        patch=package.patches_applied.ordered_values(),
    )


def build_project(package: LockedPackage) -> ProjectDescriptor:
    """Build the make entry for Drupal core, a module, theme or profile.

    Dev versions are pinned by git branch and revision; tagged releases
    are pinned by their legacy version and carry no download block.

    Raises:
        MissingDownloadSourceError: If a dev package cannot be downloaded.
        MalformedVersionError: If a tagged version cannot be rewritten.
    """
    descriptor = ProjectDescriptor(
        type=_PROJECT_TYPE_NAMES.get(package.type),
        download=build_download(package),
        patch=package.patches_applied.ordered_values(),
    )

    if is_dev_version(package.version):
        if descriptor.download is None:
            raise MissingDownloadSourceError(package.name, package.version)
        descriptor.download.branch = branch_name(package.version)
        descriptor.download.revision = (
            package.source.reference if package.source is not None else None
        )
    else:
        descriptor.version = rewrite_version(
            package.version,
            package=package.name,
            is_core=package.type is PackageType.DRUPAL_CORE,
        )
        descriptor.download = None

    return descriptor


class ManifestGenerator:
    """Generator for drupal.org make files.

    Example:
        >>> generator = ManifestGenerator()
        >>> full, core = generator.generate(snapshot.packages, requirements)
    """

    def __init__(self) -> None:
        self._dispatch: dict[
            PackageCategory, Callable[[MakeManifest, LockedPackage], None] | None
        ] = {
            PackageCategory.PROJECT: self._add_project,
            PackageCategory.LIBRARY: self._add_library,
            PackageCategory.THEME: self._add_project,
            PackageCategory.IGNORED: None,
        }
        missing = set(PackageCategory) - set(self._dispatch)
        if missing:
            msg = f"No handler for package categories: {sorted(missing)}"
            raise RuntimeError(msg)

    def build(
        self,
        packages: Iterable[LockedPackage],
        requirements: Set[str],
    ) -> MakeManifest:
        """Build the complete make manifest.

        Args:
            packages: Locked packages, in lock order.
            requirements: Package names required by the root composer.json.

        Returns:
            MakeManifest including the ``drupal`` project.
        """
        manifest = MakeManifest()
        ignored = 0

        for package in packages:
            category = classify(package, requirements)
            handler = self._dispatch[category]
            if handler is None:
                ignored += 1
                logger.debug("package_ignored", package=package.name, type=package.type.value)
                continue
            handler(manifest, package)

        logger.info(
            "make_built",
            project_count=len(manifest.projects),
            library_count=len(manifest.libraries),
            ignored_count=ignored,
        )
        return manifest

    def generate(
        self,
        packages: Iterable[LockedPackage],
        requirements: Set[str],
    ) -> tuple[MakeManifest, CoreMakeManifest]:
        """Build the full manifest and split off the core-only manifest.

        The returned full manifest no longer contains the ``drupal`` project.

        Raises:
            MakeGenerationError: On any data integrity failure.
        """
        manifest = self.build(packages, requirements)
        core = manifest.split_core()
        return manifest, core

    @staticmethod
    def _add_project(manifest: MakeManifest, package: LockedPackage) -> None:
        name = package.short_name
        if package.type is PackageType.DRUPAL_CORE:
            name = CORE_PROJECT_KEY
        manifest.projects[name] = build_project(package)

    @staticmethod
    def _add_library(manifest: MakeManifest, package: LockedPackage) -> None:
        manifest.libraries[package.short_name] = build_library(package)
