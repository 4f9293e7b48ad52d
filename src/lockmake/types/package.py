"""Locked package types read from a Composer lock snapshot."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from lockmake._internal.frozen import FrozenDict

DRUPAL_VENDOR = "drupal"


class PackageType(str, Enum):
    """Composer package type tags relevant to make generation.

    Any tag outside this set parses to UNKNOWN.
    """

    DRUPAL_CORE = "drupal-core"
    DRUPAL_MODULE = "drupal-module"
    DRUPAL_THEME = "drupal-theme"
    DRUPAL_PROFILE = "drupal-profile"
    DRUPAL_LIBRARY = "drupal-library"
    BOWER_ASSET = "bower-asset"
    NPM_ASSET = "npm-asset"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str | None) -> PackageType:
        """Parse a Composer type tag, falling back to UNKNOWN."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


PROJECT_TYPES = frozenset([
    PackageType.DRUPAL_CORE,
    PackageType.DRUPAL_MODULE,
    PackageType.DRUPAL_THEME,
    PackageType.DRUPAL_PROFILE,
])

LIBRARY_TYPES = frozenset([
    PackageType.DRUPAL_LIBRARY,
    PackageType.BOWER_ASSET,
    PackageType.NPM_ASSET,
])


def _patches_from_extra(extra: dict[str, Any]) -> dict[str, str]:
    """Read ``extra.patches_applied`` as an ordered name -> url mapping."""
    raw = extra.get("patches_applied") or {}
    if isinstance(raw, list):
        # Some lock writers emit a bare list of urls
        return {str(i): str(url) for i, url in enumerate(raw)}
    if not isinstance(raw, dict):
        msg = f"patches_applied must be an object or a list, got {type(raw).__name__}"
        raise ValueError(msg)
    return {str(name): str(url) for name, url in raw.items()}


@dataclass(frozen=True)
class PackageSource:
    """Version control download location."""

    url: str
    reference: str | None = None


@dataclass(frozen=True)
class PackageDist:
    """Archive download location."""

    url: str


@dataclass(frozen=True)
class LockedPackage:
    """A single resolved package from the lock snapshot.

    Example:
        >>> pkg = LockedPackage(name="drupal/ctools", type=PackageType.DRUPAL_MODULE,
        ...                     version="1.14.0")
        >>> pkg.short_name
        'ctools'
    """

    name: str
    type: PackageType
    version: str
    source: PackageSource | None = None
    dist: PackageDist | None = None
    patches_applied: FrozenDict[str, str] = field(default_factory=FrozenDict)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or "/" not in self.name:
            msg = f"Invalid package name '{self.name}': must be '<vendor>/<project>'"
            raise ValueError(msg)
        object.__setattr__(self, "patches_applied", FrozenDict(self.patches_applied))

    @property
    def vendor(self) -> str:
        return self.name.split("/", 1)[0]

    @property
    def short_name(self) -> str:
        return self.name.split("/", 1)[1]

    @property
    def is_drupal_vendor(self) -> bool:
        return self.vendor == DRUPAL_VENDOR

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LockedPackage:
        """Create a LockedPackage from a raw composer.lock entry.

        Args:
            data: One element of the lock's ``packages`` list.

        Returns:
            Parsed LockedPackage.

        Raises:
            KeyError: If ``name`` or ``version`` is missing.
            ValueError: If the name is not vendor-scoped or
                ``patches_applied`` is neither an object nor a list.
        """
        source = None
        raw_source = data.get("source")
        if isinstance(raw_source, dict) and raw_source.get("url"):
            source = PackageSource(
                url=raw_source["url"],
                reference=raw_source.get("reference") or None,
            )

        dist = None
        raw_dist = data.get("dist")
        if isinstance(raw_dist, dict) and raw_dist.get("url"):
            dist = PackageDist(url=raw_dist["url"])

        extra = data.get("extra")
        patches = _patches_from_extra(extra if isinstance(extra, dict) else {})

        return cls(
            name=data["name"],
            type=PackageType.parse(data.get("type")),
            version=str(data["version"]),
            source=source,
            dist=dist,
            patches_applied=FrozenDict(patches),
        )
