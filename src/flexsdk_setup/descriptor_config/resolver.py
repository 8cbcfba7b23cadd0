"""
Version resolution against a release catalog.
"""

from typing import Callable, Iterable, TypeVar

from flexsdk_setup.flexsdk_setup_exceptions import VersionNotFoundError

T = TypeVar("T")

VERSION_DELIMITER = "."


def version_matches(requested: str, candidate: str) -> bool:
    """
    True when every segment of the request equals the same segment of the candidate.

    The candidate may carry more trailing segments than the request, so "4.16"
    matches "4.16.1" but "4.16.1" does not match "4.16".
    """
    requested_parts = requested.split(VERSION_DELIMITER)
    candidate_parts = candidate.split(VERSION_DELIMITER)
    if len(candidate_parts) < len(requested_parts):
        return False
    return all(r == c for r, c in zip(requested_parts, candidate_parts))


def find_release(
    requested: str,
    candidates: Iterable[T],
    version_of: Callable[[T], str],
    product: str = "SDK",
) -> T:
    """
    Returns the first candidate whose version matches the request.

    Candidates are expected newest first, as listed by the descriptor. The
    first match wins even when a later candidate matches exactly.

    Raises:
        VersionNotFoundError: naming the requested version if nothing matches
    """
    for candidate in candidates:
        if version_matches(requested, version_of(candidate)):
            return candidate
    raise VersionNotFoundError(product, requested)
