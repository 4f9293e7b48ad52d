"""Make file model matching the Drush make (api 2) layout.

The full document lists every project and library; the core document holds
only the ``drupal`` project that the full document gives up.
"""
from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from lockmake.manifest.errors import MissingCoreError
from lockmake.manifest.serialization import encode_make

CORE_COMPATIBILITY = "7.x"
MAKE_API_VERSION = 2
DEFAULT_SUBDIR = "contrib"
CORE_PROJECT_KEY = "drupal"


class DownloadType(str, Enum):
    """How Drush fetches a project."""

    GIT = "git"
    GET = "get"  # Plain archive download


@dataclass
class Download:
    """Download block of a project or library."""

    type: DownloadType
    url: str
    branch: str | None = None
    revision: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, omitting unset fields."""
        data: dict[str, Any] = {"type": self.type.value, "url": self.url}
        if self.branch is not None:
            data["branch"] = self.branch
        if self.revision is not None:
            data["revision"] = self.revision
        return data


@dataclass
class ProjectDescriptor:
    """One entry under ``projects`` or ``libraries``.

    A descriptor carries either a ``version`` (tagged release) or a
    ``download`` with branch and revision (dev branch), never both.
    """

    type: str | None = None
    version: str | None = None
    download: Download | None = None
    patch: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, omitting unset fields."""
        data: dict[str, Any] = {}
        if self.type is not None:
            data["type"] = self.type
        if self.version is not None:
            data["version"] = self.version
        if self.download is not None:
            data["download"] = self.download.to_dict()
        if self.patch:
            data["patch"] = list(self.patch)
        return data


@dataclass
class CoreMakeManifest:
    """Core-only make file (drupal-org-core.make)."""

    drupal: ProjectDescriptor
    core: str = CORE_COMPATIBILITY
    api: int = MAKE_API_VERSION

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for encoding."""
        return {
            "core": self.core,
            "api": self.api,
            "projects": {CORE_PROJECT_KEY: self.drupal.to_dict()},
        }

    def to_make(self) -> str:
        """Encode as make file text."""
        return encode_make(self.to_dict())


@dataclass
class MakeManifest:
    """Complete make file (drupal-org.make)."""

    core: str = CORE_COMPATIBILITY
    api: int = MAKE_API_VERSION
    subdir: str = DEFAULT_SUBDIR
    projects: dict[str, ProjectDescriptor] = field(default_factory=dict)
    libraries: dict[str, ProjectDescriptor] = field(default_factory=dict)

    def split_core(self) -> CoreMakeManifest:
        """Move the ``drupal`` project into a core-only manifest.

        This removes the entry from ``projects``; afterwards the two
        manifests share no project.

        Raises:
            MissingCoreError: If there is no ``drupal`` project.
        """
        try:
            drupal = self.projects.pop(CORE_PROJECT_KEY)
        except KeyError:
            raise MissingCoreError from None
        return CoreMakeManifest(drupal=drupal, core=self.core, api=self.api)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for encoding."""
        return {
            "core": self.core,
            "api": self.api,
            "defaults": {"projects": {"subdir": self.subdir}},
            "projects": {name: p.to_dict() for name, p in self.projects.items()},
            "libraries": {name: lib.to_dict() for name, lib in self.libraries.items()},
        }

    def to_make(self) -> str:
        """Encode as make file text."""
        return encode_make(self.to_dict())

    def fingerprint(self) -> str:
        """SHA-256 of the encoded make text.

        Returns:
            64-character hex string.
        """
        return hashlib.sha256(self.to_make().encode("utf-8")).hexdigest()
