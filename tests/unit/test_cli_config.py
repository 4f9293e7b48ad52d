"""Tests for CLI configuration."""
from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest


class TestLockmakeConfig:
    """Tests for LockmakeConfig."""

    def test_default_values(self) -> None:
        """Config has sensible defaults."""
        from lockmake.cli.config import LockmakeConfig

        with patch.dict(os.environ, {}, clear=True):
            config = LockmakeConfig(_env_file=None)

        assert config.lock_path == Path("composer.lock")
        assert config.composer_path == Path("composer.json")
        assert config.output_dir == Path()
        assert config.log_level == "INFO"

    def test_from_environment(self) -> None:
        """Config reads from environment variables."""
        from lockmake.cli.config import LockmakeConfig

        env = {
            "LOCKMAKE_LOCK_PATH": "build/composer.lock",
            "LOCKMAKE_COMPOSER_PATH": "build/composer.json",
            "LOCKMAKE_OUTPUT_DIR": "dist",
            "LOCKMAKE_LOG_LEVEL": "debug",
        }

        with patch.dict(os.environ, env, clear=True):
            config = LockmakeConfig(_env_file=None)

        assert config.lock_path == Path("build/composer.lock")
        assert config.composer_path == Path("build/composer.json")
        assert config.output_dir == Path("dist")
        assert config.log_level == "DEBUG"

    def test_invalid_log_level(self) -> None:
        """Unknown log levels are rejected."""
        from pydantic import ValidationError

        from lockmake.cli.config import LockmakeConfig

        with patch.dict(os.environ, {"LOCKMAKE_LOG_LEVEL": "chatty"}, clear=True), \
                pytest.raises(ValidationError):
            LockmakeConfig(_env_file=None)

    def test_validate_inputs_missing(self, tmp_path: Path) -> None:
        """Missing input files are reported."""
        from lockmake.cli.config import LockmakeConfig

        config = LockmakeConfig(
            _env_file=None,
            lock_path=tmp_path / "composer.lock",
            composer_path=tmp_path / "composer.json",
        )

        errors = config.validate_inputs()
        assert len(errors) == 2
        assert any("Lock file" in e for e in errors)

    def test_validate_inputs_present(self, tmp_path: Path) -> None:
        """Existing input files pass validation."""
        from lockmake.cli.config import LockmakeConfig

        (tmp_path / "composer.lock").write_text("{}")
        (tmp_path / "composer.json").write_text("{}")
        config = LockmakeConfig(
            _env_file=None,
            lock_path=tmp_path / "composer.lock",
            composer_path=tmp_path / "composer.json",
        )

        assert config.validate_inputs() == []


class TestGetConfig:
    """Tests for get_config function."""

    def test_returns_cached_config(self) -> None:
        """get_config returns the same LockmakeConfig until cleared."""
        from lockmake.cli.config import LockmakeConfig, clear_config_cache, get_config

        clear_config_cache()
        config = get_config()

        assert isinstance(config, LockmakeConfig)
        assert get_config() is config
        clear_config_cache()
