"""
flexsdk_setup provisions the Apache Flex SDK and the Adobe AIR SDK on CI build agents.
"""

from flexsdk_setup.action_runner import SetupRunner
from flexsdk_setup.flexsdk_setup_config import SetupConfig
from flexsdk_setup.flexsdk_setup_logger import SetupLogger

__all__ = ["SetupRunner", "SetupConfig", "SetupLogger"]
