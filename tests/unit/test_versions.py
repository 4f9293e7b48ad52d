"""Tests for legacy version rewriting and branch naming."""
from __future__ import annotations

import pytest


class TestRewriteVersion:
    """Tests for rewrite_version."""

    def test_drops_patch_component(self) -> None:
        """MAJOR.MINOR.PATCH loses the patch component."""
        from lockmake.manifest.versions import rewrite_version

        assert rewrite_version("3.18.0") == "3.18"
        assert rewrite_version("1.13.0-beta2") == "1.13-beta2"

    def test_keeps_suffix(self) -> None:
        """Pre-release suffixes survive the rewrite."""
        from lockmake.manifest.versions import rewrite_version

        assert rewrite_version("8.1.0-alpha1") == "8.1-alpha1"
        assert rewrite_version("2.0.0-rc3") == "2.0-rc3"

    def test_multi_digit_major(self) -> None:
        """Majors with more than one digit are parsed whole."""
        from lockmake.manifest.versions import rewrite_version

        assert rewrite_version("10.2.3") == "10.2"

    def test_leading_v_accepted(self) -> None:
        """Tags written as vX.Y.Z are accepted."""
        from lockmake.manifest.versions import rewrite_version

        assert rewrite_version("v2.4.1") == "2.4"

    def test_core_passes_through(self) -> None:
        """Core versions are already in legacy form."""
        from lockmake.manifest.versions import rewrite_version

        assert rewrite_version("7.59", is_core=True) == "7.59"

    @pytest.mark.parametrize("version", ["7.59", "1.x", "abc", "1.2", "", "1.2.3.4"])
    def test_malformed_raises(self, version: str) -> None:
        """Versions that are not MAJOR.MINOR.PATCH fail fast."""
        from lockmake.manifest.errors import MalformedVersionError
        from lockmake.manifest.versions import rewrite_version

        with pytest.raises(MalformedVersionError) as exc_info:
            rewrite_version(version, package="drupal/views")

        assert exc_info.value.package == "drupal/views"
        assert exc_info.value.version == version
        assert "drupal/views" in str(exc_info.value)


class TestBranchName:
    """Tests for dev branch detection and naming."""

    def test_branch_alias_prefix_stripped(self) -> None:
        """dev- prefix is removed."""
        from lockmake.manifest.versions import branch_name

        assert branch_name("dev-8.x-1.x") == "8.x-1.x"
        assert branch_name("dev-master") == "master"

    def test_dev_suffix_kept(self) -> None:
        """A -dev suffix is left alone."""
        from lockmake.manifest.versions import branch_name

        assert branch_name("8.x-1.x-dev") == "8.x-1.x-dev"

    def test_is_dev_version(self) -> None:
        """Any 'dev' substring marks a dev version."""
        from lockmake.manifest.versions import is_dev_version

        assert is_dev_version("dev-7.x-1.x")
        assert is_dev_version("1.x-dev")
        assert not is_dev_version("1.14.0")
        assert not is_dev_version("7.59")
