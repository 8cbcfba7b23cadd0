"""
Adobe AIR SDK installation into an extracted Apache Flex SDK.
"""

import logging
import shutil
import subprocess
from typing import Callable, List, Optional

from flexsdk_setup.air_installer.license import require_license_acceptance, write_license_file
from flexsdk_setup.flexsdk_setup_exceptions import (
    ConfigurationError,
    InstallerError,
    UnsupportedFeatureError,
)
from flexsdk_setup.flexsdk_setup_logger import SetupLogger

LEGACY_MAX_MAJOR_VERSION = 32
LEGACY_AIR_VERSION = "32.0"
DEFAULT_MINOR_VERSION = "0"

INSTALLER_BUILD_FILE = "installer.xml"
INSTALLER_FEATURE_FLAGS = [
    "-Dinstaller=true",
    "-Ddo.flash.install=1",
    "-Ddo.air.install=1",
    "-Ddo.swfobject.install=1",
    "-Ddo.fontswf.install=1",
    "-Ddo.osmf.install=1",
    "-Ddo.ofl.install=1",
]


def get_major_version(air_version: str) -> int:
    try:
        return int(air_version.split(".")[0])
    except ValueError as exc:
        raise ConfigurationError(f"Invalid Adobe AIR SDK version: {air_version}") from exc


def normalize_legacy_version(air_version: str) -> str:
    """
    Appends the default minor component to a bare major version ("32" -> "32.0").
    """
    if "." not in air_version:
        return f"{air_version}.{DEFAULT_MINOR_VERSION}"
    return air_version


class AirSdkInstaller:
    """
    Finalizes an Apache Flex SDK by installing the Adobe AIR SDK into it.

    AIR SDK versions up to 32 are installed by the installer.xml Ant script
    that ships with the Flex SDK. Newer HARMAN releases are not handled yet.
    """

    def __init__(self, logger: SetupLogger, runner: Callable[..., subprocess.CompletedProcess] = subprocess.run):
        self.logger = logger
        self.runner = runner

    def resolve_version(self, air_version: str) -> str:
        """
        Returns the version to install, failing before any work is done when
        the requested version cannot be handled.

        Raises:
            UnsupportedFeatureError: for AIR SDK versions above the legacy threshold
            ConfigurationError: for legacy versions other than 32.0
        """
        if get_major_version(air_version) > LEGACY_MAX_MAJOR_VERSION:
            raise UnsupportedFeatureError(f"Adobe AIR SDK {air_version} is not yet supported")
        version = normalize_legacy_version(air_version)
        if version != LEGACY_AIR_VERSION:
            raise ConfigurationError(
                f"Adobe AIR SDK {air_version} is not supported. Expected {LEGACY_AIR_VERSION}"
            )
        return version

    def install(
        self,
        air_version: str,
        sdk_home: str,
        accept_license: Optional[bool],
        license_base64: Optional[str] = None,
        license_path: Optional[str] = None,
    ) -> None:
        """
        Writes the optional license file and installs the AIR SDK.

        Args:
            air_version: Requested AIR SDK version
            sdk_home: The extracted Apache Flex SDK home
            accept_license: Whether the AIR SDK license agreement was accepted
            license_base64: Optional base64 encoded adt.lic contents
            license_path: Override for the license file location
        """
        require_license_acceptance(accept_license)

        if license_base64:
            write_license_file(self.logger, license_base64, license_path)

        version = self.resolve_version(air_version)
        self.install_legacy(version, sdk_home)

    @staticmethod
    def build_legacy_command(version: str) -> List[str]:
        ant = shutil.which("ant") or "ant"
        return [
            ant,
            "-f",
            INSTALLER_BUILD_FILE,
            f"-Dflash.sdk.version={version}",
            f"-Dair.sdk.version={version}",
        ] + INSTALLER_FEATURE_FLAGS

    def install_legacy(self, version: str, sdk_home: str) -> None:
        cmd = self.build_legacy_command(version)
        self.logger.log(f"Running {' '.join(cmd)} in {sdk_home}", logging.INFO)
        try:
            self.runner(cmd, cwd=sdk_home, check=True)
        except subprocess.CalledProcessError as exc:
            raise InstallerError(
                f"Adobe AIR SDK installer failed with exit code {exc.returncode}"
            ) from exc
        except FileNotFoundError as exc:
            raise InstallerError(f"Could not run Apache Ant: {exc}") from exc
        self.logger.log(f"Installed Adobe AIR SDK {version}", logging.INFO)
