"""
Tests for SDK download, extraction and home directory resolution.
"""

import os

import pytest

from flexsdk_setup.descriptor_models import SdkRelease
from flexsdk_setup.flexsdk_setup_exceptions import InstallDirectoryExistsError, RemoteFetchError
from flexsdk_setup.flexsdk_setup_utils import PlatformId
from flexsdk_setup.sdk_downloader import InstallTarget, SdkProvisioner
from tests.test_utils import MIRROR

FLEX_4161 = SdkRelease(
    version="4.16.1",
    path="flex/4.16.1/binaries/",
    file="apache-flex-sdk-4.16.1-bin",
)


def _provisioner(logger, tmp_path, platform_id, session=None):
    target = InstallTarget(path=str(tmp_path / "ApacheFlexSDK"), platform_id=platform_id)
    return SdkProvisioner(logger, target, session=session)


class TestDownloadPlan:
    """Tests for archive URL construction."""

    def test_mac_url(self, logger, tmp_path):
        """Test the macOS archive URL."""
        plan = _provisioner(logger, tmp_path, PlatformId.MAC).create_download_plan(FLEX_4161, MIRROR)
        assert plan.url == f"{MIRROR}/flex/4.16.1/binaries/apache-flex-sdk-4.16.1-bin.tar.gz"
        assert plan.filename == "apache-flex-sdk-4.16.1-bin.tar.gz"

    def test_windows_url(self, logger, tmp_path):
        """Test the Windows archive URL."""
        plan = _provisioner(logger, tmp_path, PlatformId.WINDOWS).create_download_plan(FLEX_4161, MIRROR)
        assert plan.url == f"{MIRROR}/flex/4.16.1/binaries/apache-flex-sdk-4.16.1-bin.zip"

    def test_absolute_path_skips_mirror(self, logger, tmp_path):
        """Test that an absolute release path is not prefixed with the mirror."""
        release = SdkRelease(
            version="4.16.1",
            path="https://archive.apache.org/dist/flex/4.16.1/binaries/",
            file="apache-flex-sdk-4.16.1-bin",
        )
        plan = _provisioner(logger, tmp_path, PlatformId.WINDOWS).create_download_plan(release, MIRROR)
        assert plan.url == "https://archive.apache.org/dist/flex/4.16.1/binaries/apache-flex-sdk-4.16.1-bin.zip"

    def test_url_is_deterministic(self, logger, tmp_path):
        """Test that building the plan twice gives the same result."""
        provisioner = _provisioner(logger, tmp_path, PlatformId.MAC)
        assert provisioner.create_download_plan(FLEX_4161, MIRROR) == provisioner.create_download_plan(FLEX_4161, MIRROR)

    def test_default_install_location(self, logger):
        """Test the default install target for a platform."""
        provisioner = SdkProvisioner.for_platform(logger, PlatformId.MAC)
        assert provisioner.target.path == "/usr/local/bin/ApacheFlexSDK"
        assert provisioner.target.platform_id == PlatformId.MAC


class TestProvision:
    """Tests for download, extraction and home directory resolution."""

    def test_mac_home_is_archive_subdirectory(self, logger, tmp_path, mac_session):
        """Test that the macOS home is the archive's top-level directory."""
        provisioner = _provisioner(logger, tmp_path, PlatformId.MAC, session=mac_session)
        result = provisioner.provision(provisioner.create_download_plan(FLEX_4161, MIRROR))

        expected_home = os.path.join(str(tmp_path / "ApacheFlexSDK"), "apache-flex-sdk-4.16.1-bin")
        assert result.sdk_home == expected_home
        assert os.path.isfile(os.path.join(expected_home, "bin", "mxmlc"))
        assert result.environment.path_entries == [os.path.join(expected_home, "bin")]
        assert result.environment.variables == {"FLEX_HOME": expected_home}

    def test_windows_home_is_install_directory(self, logger, tmp_path, windows_session):
        """Test that the Windows home is the install directory."""
        provisioner = _provisioner(logger, tmp_path, PlatformId.WINDOWS, session=windows_session)
        result = provisioner.provision(provisioner.create_download_plan(FLEX_4161, MIRROR))

        install_dir = str(tmp_path / "ApacheFlexSDK")
        assert result.sdk_home == install_dir
        assert os.path.isfile(os.path.join(install_dir, "bin", "mxmlc.bat"))
        assert result.environment.variables["FLEX_HOME"] == install_dir

    def test_provision_does_not_touch_process_environment(self, logger, tmp_path, mac_session, monkeypatch):
        """Test that provisioning only returns the environment changes."""
        monkeypatch.delenv("FLEX_HOME", raising=False)
        provisioner = _provisioner(logger, tmp_path, PlatformId.MAC, session=mac_session)
        provisioner.provision(provisioner.create_download_plan(FLEX_4161, MIRROR))
        assert "FLEX_HOME" not in os.environ

    def test_existing_install_directory_fails(self, logger, tmp_path, mac_session):
        """Test that an existing install directory is never overwritten."""
        (tmp_path / "ApacheFlexSDK").mkdir()
        (tmp_path / "ApacheFlexSDK" / "keep.txt").write_text("existing")
        provisioner = _provisioner(logger, tmp_path, PlatformId.MAC, session=mac_session)

        with pytest.raises(InstallDirectoryExistsError):
            provisioner.provision(provisioner.create_download_plan(FLEX_4161, MIRROR))
        assert os.listdir(tmp_path / "ApacheFlexSDK") == ["keep.txt"]

    def test_second_run_fails(self, logger, tmp_path, mac_session):
        """Test that provisioning twice into the same target fails."""
        provisioner = _provisioner(logger, tmp_path, PlatformId.MAC, session=mac_session)
        plan = provisioner.create_download_plan(FLEX_4161, MIRROR)
        provisioner.provision(plan)
        with pytest.raises(InstallDirectoryExistsError):
            provisioner.provision(plan)

    def test_download_failure(self, logger, tmp_path, mac_session):
        """Test that a failed download creates no install directory."""
        provisioner = _provisioner(logger, tmp_path, PlatformId.WINDOWS, session=mac_session)
        with pytest.raises(RemoteFetchError):
            provisioner.provision(provisioner.create_download_plan(FLEX_4161, MIRROR))
        assert not (tmp_path / "ApacheFlexSDK").exists()
