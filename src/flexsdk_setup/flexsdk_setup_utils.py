"""
This file contains various utility functions like I/O operations, handling paths, etc.
"""

import logging
import os
import shutil
import sys
import tarfile
import tempfile
import zipfile
from enum import Enum
from pathlib import PurePath
from typing import Optional

import requests

from flexsdk_setup.flexsdk_setup_exceptions import (
    RemoteFetchError,
    SetupException,
    UnsupportedPlatformError,
)
from flexsdk_setup.flexsdk_setup_logger import SetupLogger

DEFAULT_HEADERS = {
    "User-Agent": "flexsdk-setup",
}


class PlatformId(str, Enum):
    """
    Supported platforms
    """

    MAC = "mac"
    WINDOWS = "windows"


class PlatformUtils:
    """
    This class provides utilities for platform detection and identification.
    """

    ARCHIVE_SUFFIXES = {
        PlatformId.MAC: ".tar.gz",
        PlatformId.WINDOWS: ".zip",
    }

    INSTALL_LOCATIONS = {
        PlatformId.MAC: "/usr/local/bin/ApacheFlexSDK",
        PlatformId.WINDOWS: "c:\\ApacheFlexSDK",
    }

    @staticmethod
    def get_platform_id(system: Optional[str] = None) -> PlatformId:
        """
        Returns the platform id for the given (or current) operating system identifier
        """
        system = sys.platform if system is None else system
        if system.startswith("darwin"):
            return PlatformId.MAC
        if system.startswith("win"):
            return PlatformId.WINDOWS
        raise UnsupportedPlatformError(system)

    @staticmethod
    def get_archive_suffix(platform_id: PlatformId) -> str:
        return PlatformUtils.ARCHIVE_SUFFIXES[platform_id]

    @staticmethod
    def get_install_location(platform_id: PlatformId) -> str:
        return PlatformUtils.INSTALL_LOCATIONS[platform_id]

    @staticmethod
    def is_absolute_url(path: str) -> bool:
        return path.startswith("http://") or path.startswith("https://")

    @staticmethod
    def resolve_download_url(path: str, mirror: str) -> str:
        """
        Prefixes a relative download path with the mirror base URL.
        """
        if PlatformUtils.is_absolute_url(path):
            return path
        return f"{mirror.rstrip('/')}/{path}"


class FileUtils:
    """
    Utility functions for downloading and extracting archives
    """

    @staticmethod
    def read_text(logger: SetupLogger, url: str, session: Optional[requests.Session] = None) -> str:
        """
        Fetches a remote text document, failing on any non-success status
        """
        session = session or requests.Session()
        logger.log(f"Fetching {url}", logging.DEBUG)
        try:
            response = session.get(url, headers=DEFAULT_HEADERS)
        except requests.exceptions.RequestException as exc:
            raise RemoteFetchError(f"Failed to load {url}: {exc}") from exc
        if not response.ok:
            raise RemoteFetchError(f"Failed to load {url}: HTTP {response.status_code}")
        return response.text

    @staticmethod
    def download_file(
        logger: SetupLogger,
        url: str,
        target_path: str,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Downloads the file from the given URL to the given target path
        """
        session = session or requests.Session()
        logger.log(f"Downloading file from {url} to {target_path}", logging.INFO)
        try:
            with session.get(url, headers=DEFAULT_HEADERS, stream=True) as response:
                if not response.ok:
                    raise RemoteFetchError(f"Failed to download {url}: HTTP {response.status_code}")
                with open(target_path, "wb") as f:
                    for chunk in response.iter_content(chunk_size=1024 * 64):
                        if chunk:
                            f.write(chunk)
        except requests.exceptions.RequestException as exc:
            raise RemoteFetchError(f"Failed to download {url}: {exc}") from exc

    @staticmethod
    def download_to_temp(
        logger: SetupLogger,
        url: str,
        filename: str,
        session: Optional[requests.Session] = None,
    ) -> str:
        """
        Downloads the archive into a fresh temporary directory and returns its path
        """
        tmp_dir = tempfile.mkdtemp(prefix="flexsdk-setup-")
        target_path = str(PurePath(tmp_dir, filename))
        try:
            FileUtils.download_file(logger, url, target_path, session=session)
        except Exception:
            shutil.rmtree(tmp_dir, ignore_errors=True)
            raise
        return target_path

    @staticmethod
    def extract_archive(logger: SetupLogger, archive_path: str, target_path: str, archive_type: str) -> None:
        """
        Extracts the archive into target_path based on the archive type
        """
        logger.log(f"Extracting {archive_path} to {target_path}", logging.INFO)
        if archive_type in ("tar.gz", ".tar.gz", "tgz"):
            with tarfile.open(archive_path, "r:gz") as tar:
                for member in tar.getmembers():
                    FileUtils._check_member_path(target_path, member.name)
                    FileUtils._check_link_target(target_path, member)
                if hasattr(tarfile, "data_filter"):
                    tar.extractall(target_path, filter="data")
                else:
                    tar.extractall(target_path)
        elif archive_type in ("zip", ".zip"):
            with zipfile.ZipFile(archive_path) as zf:
                for name in zf.namelist():
                    FileUtils._check_member_path(target_path, name)
                zf.extractall(target_path)
        else:
            raise ValueError(f"Unknown archive type: {archive_type}")

    @staticmethod
    def _check_member_path(target_path: str, member_name: str) -> None:
        root = os.path.realpath(target_path)
        destination = os.path.realpath(os.path.join(target_path, member_name))
        if os.path.commonpath([root, destination]) != root:
            raise SetupException(f"Archive member escapes the install directory: {member_name}")

    @staticmethod
    def _check_link_target(target_path: str, member: tarfile.TarInfo) -> None:
        """
        Symlink targets are relative to the link's directory, hardlink
        targets to the archive root. Both must stay inside target_path.
        """
        if member.issym():
            link_base = os.path.dirname(member.name)
        elif member.islnk():
            link_base = ""
        else:
            return
        if os.path.isabs(member.linkname):
            raise SetupException(f"Archive link escapes the install directory: {member.name}")
        FileUtils._check_member_path(target_path, os.path.join(link_base, member.linkname))
