"""Tests for the make manifest model."""
from __future__ import annotations

import pytest


class TestProjectDescriptor:
    """Tests for ProjectDescriptor."""

    def test_empty_fields_omitted(self) -> None:
        """Unset fields do not appear in the dict."""
        from lockmake.manifest.model import ProjectDescriptor

        assert ProjectDescriptor(version="3.18").to_dict() == {"version": "3.18"}

    def test_download_fields_omitted(self) -> None:
        """Archive downloads have no branch or revision."""
        from lockmake.manifest.model import Download, DownloadType

        download = Download(type=DownloadType.GET, url="https://example/x.zip")
        assert download.to_dict() == {"type": "get", "url": "https://example/x.zip"}


class TestMakeManifest:
    """Tests for MakeManifest and the core split."""

    def test_split_core_moves_entry(self) -> None:
        """split_core removes drupal from the full manifest."""
        from lockmake.manifest.model import MakeManifest, ProjectDescriptor

        manifest = MakeManifest()
        manifest.projects["drupal"] = ProjectDescriptor(type="core", version="7.59")
        manifest.projects["views"] = ProjectDescriptor(type="module", version="3.18")

        core = manifest.split_core()

        assert list(manifest.projects) == ["views"]
        assert core.drupal.version == "7.59"
        assert core.to_dict()["projects"] == {"drupal": {"type": "core", "version": "7.59"}}

    def test_split_core_twice_raises(self) -> None:
        """The core entry can only be split off once."""
        from lockmake.manifest.errors import MissingCoreError
        from lockmake.manifest.model import MakeManifest, ProjectDescriptor

        manifest = MakeManifest(projects={"drupal": ProjectDescriptor(version="7.59")})
        manifest.split_core()

        with pytest.raises(MissingCoreError):
            manifest.split_core()

    def test_core_document_has_no_defaults(self) -> None:
        """The core document carries only core, api and projects."""
        from lockmake.manifest.model import MakeManifest, ProjectDescriptor

        manifest = MakeManifest(projects={"drupal": ProjectDescriptor(version="7.59")})
        core = manifest.split_core()

        assert set(core.to_dict()) == {"core", "api", "projects"}

    def test_to_make_text(self) -> None:
        """Full manifest encodes to make lines."""
        from lockmake.manifest.model import MakeManifest, ProjectDescriptor

        manifest = MakeManifest(
            projects={"views": ProjectDescriptor(type="module", version="3.18")},
        )

        assert manifest.to_make() == (
            "core = 7.x\n"
            "api = 2\n"
            "defaults[projects][subdir] = contrib\n"
            "projects[views][type] = module\n"
            "projects[views][version] = 3.18\n"
        )

    def test_fingerprint_is_sha256(self) -> None:
        """Fingerprint is a 64-character hex digest."""
        from lockmake.manifest.model import MakeManifest

        fp = MakeManifest().fingerprint()
        assert len(fp) == 64
        int(fp, 16)
