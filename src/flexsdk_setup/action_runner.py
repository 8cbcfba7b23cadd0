"""
Action runner for flexsdk_setup.

This module is the boundary between the provisioning pipeline and the CI
host. It reads the action inputs, runs the pipeline and applies the returned
environment changes to this process and to later workflow steps. Failures
from any stage are reported once, here, as a workflow error.
"""

import logging
import os
import sys
from typing import Callable, Dict, Optional

import click
import requests

from flexsdk_setup.air_installer import AirSdkInstaller
from flexsdk_setup.descriptor_config import DescriptorFetcher, DescriptorNavigator, find_release
from flexsdk_setup.flexsdk_setup_config import SetupConfig
from flexsdk_setup.flexsdk_setup_exceptions import SetupException
from flexsdk_setup.flexsdk_setup_logger import SetupLogger
from flexsdk_setup.flexsdk_setup_utils import PlatformUtils
from flexsdk_setup.sdk_downloader import EnvironmentUpdate, ProvisionResult, SdkProvisioner

__version__ = "0.1.0"


def apply_environment(update: EnvironmentUpdate, environ: Optional[Dict[str, str]] = None) -> None:
    """
    Applies an environment update to the current process and, under GitHub
    Actions, to the files that carry it into subsequent steps.
    """
    environ = os.environ if environ is None else environ

    for entry in update.path_entries:
        current = environ.get("PATH", "")
        environ["PATH"] = entry + os.pathsep + current if current else entry
    for name, value in update.variables.items():
        environ[name] = value

    github_path = environ.get("GITHUB_PATH")
    if github_path and update.path_entries:
        with open(github_path, "a", encoding="utf-8") as f:
            for entry in update.path_entries:
                f.write(f"{entry}\n")

    github_env = environ.get("GITHUB_ENV")
    if github_env and update.variables:
        with open(github_env, "a", encoding="utf-8") as f:
            for name, value in update.variables.items():
                f.write(f"{name}={value}\n")


def report_failure(message: str) -> None:
    """Equivalent of core.setFailed: a workflow error annotation on stdout."""
    escaped = message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
    click.echo(f"::error::{escaped}")


class SetupRunner:
    """
    Runs the whole Apache Flex SDK setup for one set of inputs.
    """

    def __init__(
        self,
        config: SetupConfig,
        logger: SetupLogger,
        session: Optional[requests.Session] = None,
        system: Optional[str] = None,
        installer: Optional[AirSdkInstaller] = None,
        apply_env: Callable[[EnvironmentUpdate], None] = apply_environment,
    ):
        self.config = config
        self.logger = logger
        self.session = session or requests.Session()
        self.system = system
        self.installer = installer or AirSdkInstaller(logger)
        self.apply_env = apply_env

    def run(self) -> ProvisionResult:
        config = self.config
        config.validate()
        air_version = self.installer.resolve_version(config.air_version)

        self.logger.log(f"Apache Flex version: {config.flex_version}", logging.INFO)
        platform_id = PlatformUtils.get_platform_id(self.system)
        self.logger.log(f"Apache Flex platform: {platform_id.value}", logging.INFO)

        fetcher = DescriptorFetcher(
            self.logger,
            config.descriptor_url,
            config.descriptor_base_url,
            session=self.session,
        )
        navigator = DescriptorNavigator(fetcher.fetch_descriptor())

        flex_release = find_release(
            config.flex_version,
            navigator.get_product_releases(),
            lambda release: release.version,
            product="Apache Flex SDK",
        )
        self.logger.log(f"Resolved Apache Flex SDK {flex_release.version}", logging.INFO)

        air_release = find_release(
            air_version,
            navigator.get_air_releases(platform_id),
            lambda release: release.version,
            product="Adobe AIR SDK",
        )
        self.logger.log(f"Resolved Adobe AIR SDK {air_release.version}", logging.INFO)

        mirror = fetcher.fetch_mirror(navigator.get_mirror_cgi_file())

        provisioner = SdkProvisioner.for_platform(
            self.logger,
            platform_id,
            install_location=config.install_location,
            session=self.session,
        )
        result = provisioner.provision(provisioner.create_download_plan(flex_release, mirror))
        self.apply_env(result.environment)

        self.installer.install(
            air_release.version,
            result.sdk_home,
            accept_license=config.accept_air_license,
            license_base64=config.air_license_base64,
        )
        return result


def configure_logging(logger: SetupLogger, debug: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.logger.addHandler(handler)
    logger.set_level(logging.DEBUG if debug else logging.INFO)
    return handler


@click.command()
@click.version_option(version=__version__, prog_name="flexsdk-setup")
@click.option("--flex-version", envvar="INPUT_FLEX-VERSION", default=None, help="Apache Flex SDK version, e.g. 4.16.1 or 4.16.")
@click.option("--air-version", envvar="INPUT_AIR-VERSION", default=None, help="Adobe AIR SDK version, e.g. 32.0.")
@click.option("--accept-air-license", envvar="INPUT_ACCEPT-AIR-LICENSE", default=None, help="Set to true to accept the Adobe AIR SDK License Agreement.")
@click.option("--air-license-base64", envvar="INPUT_AIR-LICENSE-BASE64", default=None, help="Base64 encoded adt.lic contents.")
@click.option("--debug", is_flag=True, help="Enable debug logging.")
def main(
    flex_version: Optional[str],
    air_version: Optional[str],
    accept_air_license: Optional[str],
    air_license_base64: Optional[str],
    debug: bool,
) -> None:
    """Install the Apache Flex SDK and Adobe AIR SDK on this build agent."""
    logger = SetupLogger()
    handler = configure_logging(logger, debug)

    try:
        config = SetupConfig.from_dict(
            {
                "flex-version": flex_version,
                "air-version": air_version,
                "accept-air-license": accept_air_license,
                "air-license-base64": air_license_base64,
            }
        )
        SetupRunner(config, logger).run()
    except SetupException as e:
        logger.log(f"Setup failed: {e.message}", logging.ERROR)
        report_failure(e.message)
        sys.exit(1)
    except Exception as e:
        logger.log(f"Setup failed: {e}", logging.ERROR)
        report_failure(str(e))
        sys.exit(1)
    finally:
        logger.logger.removeHandler(handler)


__all__ = [
    "SetupRunner",
    "apply_environment",
    "report_failure",
    "main",
]
