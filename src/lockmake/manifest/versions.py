"""Version string rules for the legacy make format.

Composer records releases as semantic versions (``8.1.0-alpha1``) while
Drush make expects ``MAJOR.MINOR[-SUFFIX]`` (``8.1-alpha1``). Branches are
recorded either as a ``dev-`` branch alias or with a ``-dev`` suffix.
"""
from __future__ import annotations

import re

from lockmake.manifest.errors import MalformedVersionError

DEV_MARKER = "dev"
BRANCH_ALIAS_PREFIX = "dev-"

_SEMVER_PATTERN = re.compile(
    r"^v?(?P<major>[0-9]+)\.(?P<minor>[0-9]+)\.(?P<patch>[0-9]+)(?P<suffix>-.+)?$"
)


def is_dev_version(version: str) -> bool:
    """Check whether a version tracks a branch rather than a tag."""
    return DEV_MARKER in version


def branch_name(version: str) -> str:
    """Derive the git branch a dev version points at.

    Example:
        >>> branch_name("dev-8.x-1.x")
        '8.x-1.x'
        >>> branch_name("8.x-1.x-dev")
        '8.x-1.x-dev'
    """
    if version.startswith(BRANCH_ALIAS_PREFIX):
        return version[len(BRANCH_ALIAS_PREFIX):]
    return version


def rewrite_version(version: str, *, package: str = "", is_core: bool = False) -> str:
    """Rewrite a tagged release version to the legacy make scheme.

    The patch component is dropped: ``1.13.0-beta2`` becomes ``1.13-beta2``.
    Core versions already use the legacy scheme and pass through.

    Args:
        version: Version string from the lock snapshot.
        package: Package name, used in error messages.
        is_core: Whether the version belongs to drupal-core.

    Returns:
        The legacy version string.

    Raises:
        MalformedVersionError: If a non-core version is not MAJOR.MINOR.PATCH.
    """
    if is_core:
        return version

    match = _SEMVER_PATTERN.match(version)
    if match is None:
        raise MalformedVersionError(package, version)

    suffix = match.group("suffix") or ""
    return f"{int(match.group('major'))}.{int(match.group('minor'))}{suffix}"
