"""
Release entries listed in the SDK descriptor.
"""

from pydantic import BaseModel, ConfigDict, Field


class SdkRelease(BaseModel):
    """
    A downloadable SDK release at the leaf level of the descriptor.

    The download location is the concatenation of path and file; path may be
    relative to the Apache mirror or an absolute URL.
    """

    model_config = ConfigDict(frozen=True)

    version: str = Field(..., description="Dotted version string, e.g. 4.16.1")
    path: str = Field(..., description="Directory part of the download location")
    file: str = Field(..., description="File name, or file name fragment without suffix")
