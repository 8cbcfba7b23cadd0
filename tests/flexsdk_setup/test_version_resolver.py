"""
Tests for prefix version resolution.
"""

import pytest

from flexsdk_setup.descriptor_config import find_release, version_matches
from flexsdk_setup.descriptor_models import SdkRelease
from flexsdk_setup.flexsdk_setup_exceptions import VersionNotFoundError


def _identity(version):
    return version


class TestVersionMatches:
    """Tests for segment-wise version matching."""

    def test_prefix_request_matches_longer_candidate(self):
        """Test that a shorter request matches a more specific candidate."""
        assert version_matches("4.16", "4.16.1")

    def test_full_match(self):
        """Test an exact match."""
        assert version_matches("4.16.1", "4.16.1")

    def test_segments_compare_as_strings(self):
        """Test that segments are compared as strings, not numbers."""
        assert not version_matches("4.1", "4.16.1")
        assert not version_matches("4.016", "4.16.1")

    def test_longer_request_does_not_match_shorter_candidate(self):
        """Test that a candidate shorter than the request never matches."""
        assert not version_matches("4.16.1", "4.16")


class TestFindRelease:
    """Tests for find_release."""

    def test_first_listed_prefix_match_wins(self):
        """Test that the first listed match is returned."""
        assert find_release("4.16", ["4.16.1", "4.15.0"], _identity) == "4.16.1"

    def test_no_preference_for_exact_match(self):
        """Test that a later exact match does not win over an earlier prefix match."""
        assert find_release("4.16", ["4.16.1", "4.16"], _identity) == "4.16.1"

    def test_major_only_request(self):
        """Test a request with only a major version."""
        assert find_release("4", ["4.16.1", "4.15.0"], _identity) == "4.16.1"

    def test_not_found_names_request(self):
        """Test that a failed lookup names the requested version."""
        with pytest.raises(VersionNotFoundError, match="4.99") as exc_info:
            find_release("4.99", ["4.16.1"], _identity, product="Apache Flex SDK")
        assert exc_info.value.requested == "4.99"
        assert "Apache Flex SDK" in exc_info.value.message

    def test_empty_catalog(self):
        """Test resolution against an empty catalog."""
        with pytest.raises(VersionNotFoundError):
            find_release("4.16", [], _identity)

    def test_stops_at_first_match(self):
        """Test that scanning stops at the first match."""
        seen = []

        def version_of(candidate):
            seen.append(candidate)
            return candidate

        find_release("4.16", ["4.15.0", "4.16.1", "4.16.0"], version_of)
        assert seen == ["4.15.0", "4.16.1"]

    def test_release_objects(self):
        """Test resolution over SdkRelease objects."""
        releases = [
            SdkRelease(version="32.0", path="http://example.org/32.0/", file="AdobeAIRSDK.zip"),
            SdkRelease(version="31.0", path="http://example.org/31.0/", file="AdobeAIRSDK.zip"),
        ]
        assert find_release("31", releases, lambda r: r.version).version == "31.0"
