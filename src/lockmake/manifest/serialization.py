"""Drush make (INI-like) serialization.

This module flattens nested data into make file lines:
- Mappings become bracketed keys: ``projects[ctools][download][type] = git``
- Sequences use numeric keys: ``projects[ctools][patch][0] = https://...``
- ``None`` values are skipped
- Keys keep insertion order, so identical input yields identical text
"""
from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

from lockmake.manifest.errors import MakeGenerationError

# Type alias for encodable values (Any is appropriate here)
MakeValue = Mapping[str, Any] | Sequence[Any] | str | int | float | bool | None

_NEEDS_QUOTING = re.compile(r'[\s"\';=\[\]{}|&~!()^$]')


class MakeEncodingError(MakeGenerationError):
    """Raised when a value has no make file representation."""


def format_scalar(value: str | int | float | bool) -> str:
    """Format a scalar make value.

    Args:
        value: String, number or boolean.

    Returns:
        The value as it appears to the right of ``=``.

    Example:
        >>> format_scalar("7.x")
        '7.x'
        >>> format_scalar("has space")
        '"has space"'
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float):
        return str(value)
    if value == "" or _NEEDS_QUOTING.search(value):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return value


def _flatten(value: MakeValue, key: str, lines: list[str]) -> None:
    if value is None:
        return
    if isinstance(value, Mapping):
        for sub_key, sub_value in value.items():
            _flatten(sub_value, f"{key}[{sub_key}]", lines)
        return
    if isinstance(value, Sequence) and not isinstance(value, str):
        for index, item in enumerate(value):
            _flatten(item, f"{key}[{index}]", lines)
        return
    if not isinstance(value, str | int | float | bool):
        msg = f"Cannot encode {type(value).__name__} at '{key}'"
        raise MakeEncodingError(msg)
    lines.append(f"{key} = {format_scalar(value)}")


def encode_make(data: Mapping[str, Any]) -> str:
    """Encode a nested mapping as make file text.

    Args:
        data: Top-level mapping (e.g. ``MakeManifest.to_dict()``).

    Returns:
        Make file text terminated by a newline (empty for empty input).

    Raises:
        MakeEncodingError: If a value is not a mapping, sequence or scalar.

    Example:
        >>> encode_make({"core": "7.x", "projects": {"views": {"version": "3.18"}}})
        'core = 7.x\\nprojects[views][version] = 3.18\\n'
    """
    lines: list[str] = []
    for key, value in data.items():
        _flatten(value, str(key), lines)
    if not lines:
        return ""
    return "\n".join(lines) + "\n"
