"""
Shared fixtures for flexsdk_setup tests.
"""

import pytest

from flexsdk_setup.flexsdk_setup_logger import SetupLogger
from tests.test_utils import (
    DESCRIPTOR_URL,
    DESCRIPTOR_XML,
    MIRROR,
    MIRROR_CGI_URL,
    FakeResponse,
    FakeSession,
    make_tar_gz,
    make_zip,
)


@pytest.fixture
def logger():
    return SetupLogger()


@pytest.fixture
def descriptor_xml():
    return DESCRIPTOR_XML


@pytest.fixture
def mac_archive():
    return make_tar_gz(
        {
            "apache-flex-sdk-4.16.1-bin/bin/mxmlc": b"#!/bin/sh\n",
            "apache-flex-sdk-4.16.1-bin/installer.xml": b"<project/>",
        }
    )


@pytest.fixture
def windows_archive():
    return make_zip(
        {
            "bin/mxmlc.bat": b"@echo off\r\n",
            "installer.xml": b"<project/>",
        }
    )


@pytest.fixture
def mac_session(descriptor_xml, mac_archive):
    return FakeSession(
        {
            DESCRIPTOR_URL: FakeResponse(descriptor_xml),
            MIRROR_CGI_URL: FakeResponse(MIRROR + "\n"),
            f"{MIRROR}/flex/4.16.1/binaries/apache-flex-sdk-4.16.1-bin.tar.gz": FakeResponse(mac_archive),
        }
    )


@pytest.fixture
def windows_session(descriptor_xml, windows_archive):
    return FakeSession(
        {
            DESCRIPTOR_URL: FakeResponse(descriptor_xml),
            MIRROR_CGI_URL: FakeResponse(MIRROR + "\n"),
            f"{MIRROR}/flex/4.16.1/binaries/apache-flex-sdk-4.16.1-bin.zip": FakeResponse(windows_archive),
        }
    )
