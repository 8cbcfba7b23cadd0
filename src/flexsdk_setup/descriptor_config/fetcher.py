"""
Remote descriptor and mirror retrieval.
"""

import logging
from typing import Optional
from urllib.parse import urljoin

import requests

from flexsdk_setup.descriptor_models import DescriptorElement, parse_descriptor
from flexsdk_setup.flexsdk_setup_exceptions import RemoteFetchError
from flexsdk_setup.flexsdk_setup_logger import SetupLogger
from flexsdk_setup.flexsdk_setup_utils import FileUtils


class DescriptorFetcher:
    """
    Fetches the SDK installer descriptor and resolves the Apache mirror.
    """

    def __init__(
        self,
        logger: SetupLogger,
        descriptor_url: str,
        descriptor_base_url: str,
        session: Optional[requests.Session] = None,
    ):
        """
        Args:
            logger: Logger for progress messages
            descriptor_url: Absolute URL of the descriptor document
            descriptor_base_url: Base URL that relative mirror CGI files resolve against
            session: HTTP session, a new one is created when omitted
        """
        self.logger = logger
        self.descriptor_url = descriptor_url
        self.descriptor_base_url = descriptor_base_url
        self.session = session or requests.Session()

    def fetch_descriptor(self) -> DescriptorElement:
        """Download and parse the descriptor document."""
        self.logger.log(f"Loading SDK descriptor from {self.descriptor_url}", logging.INFO)
        document = FileUtils.read_text(self.logger, self.descriptor_url, session=self.session)
        return parse_descriptor(document)

    def fetch_mirror(self, mirror_cgi_file: str) -> str:
        """
        Ask the mirror CGI for the base URL of the preferred Apache mirror.

        Args:
            mirror_cgi_file: The file attribute of the MirrorURLCGI descriptor entry

        Returns:
            The mirror base URL without surrounding whitespace
        """
        mirror_cgi_url = urljoin(self.descriptor_base_url, mirror_cgi_file)
        self.logger.log(f"Resolving Apache mirror from {mirror_cgi_url}", logging.INFO)
        mirror = FileUtils.read_text(self.logger, mirror_cgi_url, session=self.session).strip()
        if not mirror:
            raise RemoteFetchError("Failed to load mirror for Apache Flex SDK")
        self.logger.log(f"Using Apache mirror {mirror}", logging.INFO)
        return mirror
