"""
SDK provisioner implementation.

Handles downloading and extracting the Apache Flex SDK and describes the
environment changes needed by later build steps.
"""

import dataclasses
import logging
import os
import shutil
from typing import Dict, List, Optional

import requests

from flexsdk_setup.descriptor_models import SdkRelease
from flexsdk_setup.flexsdk_setup_exceptions import InstallDirectoryExistsError
from flexsdk_setup.flexsdk_setup_logger import SetupLogger
from flexsdk_setup.flexsdk_setup_utils import FileUtils, PlatformId, PlatformUtils

FLEX_HOME_VARIABLE = "FLEX_HOME"


@dataclasses.dataclass(frozen=True)
class InstallTarget:
    """
    Destination directory for the unpacked SDK on a given platform
    """

    path: str
    platform_id: PlatformId


@dataclasses.dataclass(frozen=True)
class DownloadPlan:
    """
    Everything needed to download and extract one release archive.
    """

    release: SdkRelease
    url: str
    filename: str
    archive_suffix: str


@dataclasses.dataclass(frozen=True)
class EnvironmentUpdate:
    """
    Environment changes for downstream steps.

    The provisioner only describes them; the caller decides how to apply them.
    """

    path_entries: List[str] = dataclasses.field(default_factory=list)
    variables: Dict[str, str] = dataclasses.field(default_factory=dict)


@dataclasses.dataclass(frozen=True)
class ProvisionResult:
    sdk_home: str
    environment: EnvironmentUpdate


class SdkProvisioner:
    """
    Downloads and extracts an SDK release into a fixed installation directory.
    """

    def __init__(
        self,
        logger: SetupLogger,
        target: InstallTarget,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the provisioner.

        Args:
            logger: Logger for progress and error messages
            target: Where the SDK is installed and for which platform
            session: HTTP session used for the archive download
        """
        self.logger = logger
        self.target = target
        self.session = session

    @classmethod
    def for_platform(
        cls,
        logger: SetupLogger,
        platform_id: PlatformId,
        install_location: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ) -> "SdkProvisioner":
        path = install_location or PlatformUtils.get_install_location(platform_id)
        return cls(logger, InstallTarget(path=path, platform_id=platform_id), session=session)

    def create_download_plan(self, release: SdkRelease, mirror: str) -> DownloadPlan:
        """
        Build the archive URL for a release.

        The URL is <path><file><suffix>, prefixed with the mirror base URL
        unless the descriptor already lists an absolute URL.
        """
        suffix = PlatformUtils.get_archive_suffix(self.target.platform_id)
        filename = f"{release.file}{suffix}"
        url = PlatformUtils.resolve_download_url(f"{release.path}{filename}", mirror)
        return DownloadPlan(release=release, url=url, filename=filename, archive_suffix=suffix)

    def provision(self, plan: DownloadPlan) -> ProvisionResult:
        """
        Download, extract and locate the SDK home.

        Raises:
            InstallDirectoryExistsError: if the install directory is already present
            RemoteFetchError: if the archive could not be downloaded
        """
        self.logger.log(
            f"Downloading Apache Flex SDK {plan.release.version} from {plan.url}",
            logging.INFO,
        )
        archive_path = FileUtils.download_to_temp(
            self.logger, plan.url, plan.filename, session=self.session
        )
        try:
            self._create_install_directory()
            FileUtils.extract_archive(
                self.logger, archive_path, self.target.path, plan.archive_suffix
            )
        finally:
            shutil.rmtree(os.path.dirname(archive_path), ignore_errors=True)

        sdk_home = self.get_sdk_home(plan)
        self.logger.log(f"Apache Flex SDK home: {sdk_home}", logging.INFO)
        return ProvisionResult(sdk_home=sdk_home, environment=self.environment_for(sdk_home))

    def get_sdk_home(self, plan: DownloadPlan) -> str:
        """
        The Windows archive unpacks in place; the macOS archive holds one
        top-level directory named after the archive without its suffix.
        """
        if self.target.platform_id == PlatformId.WINDOWS:
            return self.target.path
        base_name = os.path.basename(plan.filename)[: -len(plan.archive_suffix)]
        return os.path.join(self.target.path, base_name)

    @staticmethod
    def environment_for(sdk_home: str) -> EnvironmentUpdate:
        return EnvironmentUpdate(
            path_entries=[os.path.join(sdk_home, "bin")],
            variables={FLEX_HOME_VARIABLE: sdk_home},
        )

    def _create_install_directory(self) -> None:
        try:
            os.makedirs(self.target.path, exist_ok=False)
        except FileExistsError as exc:
            raise InstallDirectoryExistsError(
                f"Installation directory already exists: {self.target.path}"
            ) from exc
