"""
This module contains the exceptions raised by flexsdk_setup.
"""


class SetupException(Exception):
    """
    Base class for all exceptions raised while provisioning an SDK.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(SetupException):
    """Raised when an input is missing or malformed."""


class RemoteFetchError(SetupException):
    """Raised when a remote document or archive could not be retrieved."""


class DescriptorError(SetupException):
    """
    Raised when the SDK descriptor does not have the expected shape.

    All shape problems share one message so that callers cannot depend on
    which lookup step failed.
    """

    def __init__(self, message: str = "Failed to parse configuration"):
        super().__init__(message)


class VersionNotFoundError(SetupException):
    """Raised when no candidate release matches the requested version."""

    def __init__(self, product: str, requested: str):
        super().__init__(f"{product} version not found: {requested}")
        self.product = product
        self.requested = requested


class UnsupportedPlatformError(SetupException):
    """Raised when the host operating system is neither macOS nor Windows."""

    def __init__(self, platform: str):
        super().__init__(f"Apache Flex SDK setup is not supported on platform: {platform}")
        self.platform = platform


class UnsupportedFeatureError(SetupException):
    """Raised when a known but unimplemented code path is requested."""


class InstallDirectoryExistsError(SetupException):
    """Raised when the installation directory is already present."""


class InstallerError(SetupException):
    """Raised when the external installer process exits unsuccessfully."""
