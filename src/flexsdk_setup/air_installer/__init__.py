"""
Adobe AIR SDK license and installer step.
"""

from .installer import AirSdkInstaller
from .license import LICENSE_AGREEMENT, get_license_path, require_license_acceptance, write_license_file

__all__ = [
    "AirSdkInstaller",
    "LICENSE_AGREEMENT",
    "get_license_path",
    "require_license_acceptance",
    "write_license_file",
]
