"""CLI configuration using Pydantic settings.

Configuration is loaded from:
1. Environment variables (LOCKMAKE_* prefix)
2. .env file in current directory
3. Default values
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LockmakeConfig(BaseSettings):
    """Configuration for the lockmake CLI.

    Environment variables are prefixed with LOCKMAKE_.
    """

    model_config = SettingsConfigDict(
        env_prefix="LOCKMAKE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Composer inputs
    lock_path: Path = Path("composer.lock")
    composer_path: Path = Path("composer.json")

    # Where drupal-org.make and drupal-org-core.make are written
    output_dir: Path = Path()

    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            msg = f"Invalid log level: {v}. Must be one of {valid_levels}"
            raise ValueError(msg)
        return upper

    def validate_inputs(self) -> list[str]:
        """Check that the Composer input files exist.

        Returns:
            List of validation error messages (empty if valid).
        """
        errors: list[str] = []

        if not self.lock_path.exists():
            errors.append(
                f"Lock file {self.lock_path} not found. "
                "Run 'composer install' or set LOCKMAKE_LOCK_PATH."
            )

        if not self.composer_path.exists():
            errors.append(
                f"composer.json {self.composer_path} not found. "
                "Set LOCKMAKE_COMPOSER_PATH."
            )

        return errors


@lru_cache
def get_config() -> LockmakeConfig:
    """Get the global configuration.

    Configuration is cached after first load.

    Returns:
        LockmakeConfig instance.
    """
    return LockmakeConfig()


def clear_config_cache() -> None:
    """Clear the configuration cache (for testing)."""
    get_config.cache_clear()
