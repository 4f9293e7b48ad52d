"""Composer lock snapshot and root requirement loading.

composer.lock lists every resolved package under ``packages``; the root
composer.json ``require`` section says which of them the project asked for
directly. Development-only sections (``packages-dev``, ``require-dev``)
never reach the make files.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import structlog

from lockmake.manifest.errors import LockfileError
from lockmake.types.package import LockedPackage

if TYPE_CHECKING:
    from pathlib import Path

logger = structlog.get_logger()


def _read_json(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise LockfileError(path, "file not found")
    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise LockfileError(path, f"invalid JSON: {e}") from e
    except OSError as e:
        raise LockfileError(path, f"cannot read file: {e}") from e
    if not isinstance(data, dict):
        raise LockfileError(path, "expected a JSON object at top level")
    return data


@dataclass
class LockSnapshot:
    """Resolved packages from composer.lock.

    Attributes:
        packages: Locked packages in lock order
        content_hash: Lock ``content-hash``, if recorded
    """

    packages: list[LockedPackage] = field(default_factory=list)
    content_hash: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any], *, path: Path | None = None) -> LockSnapshot:
        """Build a snapshot from decoded composer.lock data.

        Raises:
            LockfileError: If ``packages`` is missing or an entry is malformed.
        """
        origin: Path | str = path or "<lock data>"
        raw_packages = data.get("packages")
        if not isinstance(raw_packages, list):
            raise LockfileError(origin, "missing 'packages' list")

        packages: list[LockedPackage] = []
        for index, raw in enumerate(raw_packages):
            if not isinstance(raw, dict):
                raise LockfileError(origin, f"package #{index} is not an object")
            try:
                packages.append(LockedPackage.from_dict(raw))
            except KeyError as e:
                name = raw.get("name", f"#{index}")
                raise LockfileError(origin, f"package {name} is missing {e}") from e
            except (ValueError, TypeError) as e:
                raise LockfileError(origin, str(e)) from e

        return cls(packages=packages, content_hash=str(data.get("content-hash", "")))

    @classmethod
    def load(cls, path: Path) -> LockSnapshot:
        """Load composer.lock from path.

        Args:
            path: Path to composer.lock

        Returns:
            LockSnapshot with every entry of ``packages``.

        Raises:
            LockfileError: If the file is missing or malformed.
        """
        snapshot = cls.from_dict(_read_json(path), path=path)
        logger.debug(
            "lock_loaded",
            path=str(path),
            package_count=len(snapshot.packages),
            content_hash=snapshot.content_hash,
        )
        return snapshot


def load_declared_requirements(path: Path) -> frozenset[str]:
    """Load the names the root composer.json requires.

    Args:
        path: Path to composer.json

    Returns:
        Package names from the ``require`` section.

    Raises:
        LockfileError: If the file is missing or malformed.
    """
    data = _read_json(path)
    require = data.get("require", {})
    if not isinstance(require, dict):
        raise LockfileError(path, "'require' must be an object")
    return frozenset(require)
