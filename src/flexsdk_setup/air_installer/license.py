"""
Adobe AIR SDK license handling.
"""

import base64
import binascii
import logging
import os
from typing import Optional

from flexsdk_setup.flexsdk_setup_exceptions import ConfigurationError
from flexsdk_setup.flexsdk_setup_logger import SetupLogger

LICENSE_AGREEMENT = "Adobe AIR SDK License Agreement"


def require_license_acceptance(accepted: Optional[bool]) -> None:
    """
    Fails unless the AIR SDK license agreement was explicitly accepted.
    """
    if not accepted:
        raise ConfigurationError(
            f"Parameter `accept-air-license` must be true to accept the {LICENSE_AGREEMENT}."
        )


def get_license_path() -> str:
    """Per-user location where adt looks for its license file."""
    return os.path.join(os.path.expanduser("~"), ".airsdk", "adt.lic")


def write_license_file(logger: SetupLogger, license_base64: str, license_path: Optional[str] = None) -> str:
    """
    Decodes the base64 license payload and writes it, creating parent directories.

    Returns:
        The path the license was written to
    """
    license_path = license_path or get_license_path()
    try:
        payload = base64.b64decode(license_base64, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ConfigurationError("Parameter `air-license-base64` is not valid base64") from exc

    os.makedirs(os.path.dirname(license_path), exist_ok=True)
    with open(license_path, "wb") as f:
        f.write(payload)
    logger.log(f"Wrote Adobe AIR SDK license to {license_path}", logging.INFO)
    return license_path
