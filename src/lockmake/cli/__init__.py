"""CLI module."""
from __future__ import annotations

from lockmake.cli.config import LockmakeConfig, get_config
from lockmake.cli.main import app

__all__ = ["LockmakeConfig", "app", "get_config"]
