"""
Descriptor models for the SDK installer configuration.

This package provides the Pydantic data models used to represent the parsed
descriptor tree and the release entries it lists.
"""

from .descriptor import (
    DescriptorElement,
    DescriptorOther,
    DescriptorNode,
    parse_descriptor,
)
from .release import SdkRelease

__all__ = [
    # Descriptor tree
    "DescriptorElement",
    "DescriptorOther",
    "DescriptorNode",
    "parse_descriptor",
    # Releases
    "SdkRelease",
]
