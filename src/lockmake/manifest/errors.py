"""Errors raised while generating make files.

Every failure aborts the whole run; nothing is written when one is raised.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class MakeGenerationError(Exception):
    """Base class for make generation failures."""


class LockfileError(MakeGenerationError):
    """composer.lock or composer.json could not be read."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class MissingDownloadSourceError(MakeGenerationError):
    """A dev-branch package has neither a source nor a dist location."""

    def __init__(self, package: str, version: str) -> None:
        self.package = package
        self.version = version
        super().__init__(
            f"Package '{package}' ({version}) tracks a branch but has no "
            "source or dist to download it from"
        )


class MalformedVersionError(MakeGenerationError):
    """A tagged version cannot be rewritten to the legacy scheme."""

    def __init__(self, package: str, version: str) -> None:
        self.package = package
        self.version = version
        super().__init__(
            f"Package '{package}' has version '{version}', "
            "expected MAJOR.MINOR.PATCH[-SUFFIX]"
        )


class MissingCoreError(MakeGenerationError):
    """The lock snapshot has no drupal-core package."""

    def __init__(self) -> None:
        super().__init__("No drupal-core package found in the lock snapshot")
