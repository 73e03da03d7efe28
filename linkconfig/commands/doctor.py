import click
import sys
from packaging.version import InvalidVersion, parse as parse_version
from ..cli_logger import logger
from ..errors import ToolLaunchError
from ..utils.command_executor import run_shell_command
from .common import get_query

MINIMUM_TOOL_VERSION = "0.25"


def check_tool(tool):
    """Returns the tool's version string, or None when it cannot be run."""
    try:
        stdout, stderr, returncode = run_shell_command([tool, "--version"])
    except ToolLaunchError as e:
        logger.error(f"{e}")
        logger.info("Please install pkg-config (or pkgconf) or point PKG_CONFIG at it.")
        return None
    if returncode != 0:
        logger.error(f"{tool} --version exited with status {returncode}: {stderr.strip()}")
        return None
    return stdout.strip()


@click.command()
@click.pass_context
def doctor(ctx):
    """Check that the metadata tool is installed and usable."""
    logger.info("Running environment check...")
    try:
        pkg_config = get_query(ctx)
        version = check_tool(pkg_config.tool)
        if version is None:
            logger.error("Environment check found issues. Please review the errors above.")
            return
        logger.info(f"{pkg_config.tool} version {version}")
        try:
            if parse_version(version) < parse_version(MINIMUM_TOOL_VERSION):
                logger.warning(f"{pkg_config.tool} {version} is older than {MINIMUM_TOOL_VERSION}; --static output may be incomplete.")
        except InvalidVersion:
            logger.warning(f"Could not parse {pkg_config.tool} version '{version}'.")
        directories = pkg_config.search_directories()
        logger.info(f"{len(directories)} staged native library director{'y' if len(directories) == 1 else 'ies'} found.")
        logger.success("Environment check completed successfully.")
    except Exception as e:
        logger.error(f"An unexpected error occurred during environment check: {e}")
        logger.exception(*sys.exc_info())
