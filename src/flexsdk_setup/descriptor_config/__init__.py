"""
SDK descriptor handling.

This package handles:
1. Fetching the remote descriptor and the Apache mirror base URL
2. Navigating the parsed descriptor to the release listings
3. Resolving a requested version against a release listing
"""

from .fetcher import DescriptorFetcher
from .navigator import DescriptorNavigator
from .resolver import find_release, version_matches

__all__ = ["DescriptorFetcher", "DescriptorNavigator", "find_release", "version_matches"]
