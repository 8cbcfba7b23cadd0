"""
SDK download and extraction.
"""

from .provisioner import (
    DownloadPlan,
    EnvironmentUpdate,
    InstallTarget,
    ProvisionResult,
    SdkProvisioner,
)

__all__ = [
    "DownloadPlan",
    "EnvironmentUpdate",
    "InstallTarget",
    "ProvisionResult",
    "SdkProvisioner",
]
