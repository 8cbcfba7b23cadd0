"""
Configuration parameters for flexsdk_setup.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

from flexsdk_setup.air_installer.license import require_license_acceptance
from flexsdk_setup.flexsdk_setup_exceptions import ConfigurationError

DESCRIPTOR_URL = "https://flex.apache.org/installer/sdk-installer-config-4.0.xml"
DESCRIPTOR_BASE_URL = "https://flex.apache.org/"

# Prefix requests such as "4" or "4.16" are resolved against the catalog
FLEX_VERSION_PATTERN = re.compile(r"^\d+(\.\d+){0,2}$")
AIR_VERSION_PATTERN = re.compile(r"^\d+(\.\d+)*$")

_TRUE_VALUES = ("true", "yes", "y", "on", "1")
_FALSE_VALUES = ("false", "no", "n", "off", "0", "")


def parse_bool_input(value: Any) -> Optional[bool]:
    """
    Interprets a boolean-like action input.

    Returns None when the input was not supplied at all.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean input: {value}")


@dataclass
class SetupConfig:
    """
    Configuration parameters
    """

    flex_version: Optional[str] = None
    air_version: Optional[str] = None
    accept_air_license: Optional[bool] = None
    air_license_base64: Optional[str] = None
    descriptor_url: str = DESCRIPTOR_URL
    descriptor_base_url: str = DESCRIPTOR_BASE_URL
    install_location: Optional[str] = None

    @classmethod
    def from_dict(cls, env: Dict[str, Any]) -> "SetupConfig":
        """
        Create a SetupConfig instance from a dictionary.

        Keys may use the action input spelling ("flex-version") or the
        attribute spelling ("flex_version"). Unknown keys are ignored.
        """
        normalized = {str(k).replace("-", "_"): v for k, v in env.items()}
        known = {
            "flex_version",
            "air_version",
            "accept_air_license",
            "air_license_base64",
            "descriptor_url",
            "descriptor_base_url",
            "install_location",
        }

        kwargs = {k: v for k, v in normalized.items() if k in known and v is not None}
        for key in ("flex_version", "air_version", "air_license_base64", "install_location"):
            if key in kwargs:
                kwargs[key] = str(kwargs[key]).strip() or None
        if "accept_air_license" in kwargs:
            kwargs["accept_air_license"] = parse_bool_input(kwargs["accept_air_license"])

        return cls(**kwargs)

    def validate(self) -> None:
        """
        Checks every input before any network access happens.

        Raises:
            ConfigurationError: if a required input is missing or malformed
        """
        if not self.flex_version:
            raise ConfigurationError("Missing required input: flex-version")
        if not FLEX_VERSION_PATTERN.match(self.flex_version):
            raise ConfigurationError(f"Invalid Apache Flex version: {self.flex_version}")

        require_license_acceptance(self.accept_air_license)

        if not self.air_version:
            raise ConfigurationError("Missing required input: air-version")
        if not AIR_VERSION_PATTERN.match(self.air_version):
            raise ConfigurationError(f"Invalid Adobe AIR SDK version: {self.air_version}")
