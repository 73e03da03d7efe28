import click
from ..cli_logger import logger
from .common import get_query


@click.command(name="search-paths")
@click.pass_context
def search_paths(ctx):
    """List the staged native library directories and the augmented search path."""
    pkg_config = get_query(ctx)
    directories = pkg_config.search_directories()
    if not directories:
        logger.info("No staged native library directories found.")
    else:
        logger.info("Native library directories:")
        for directory in directories:
            logger.step_info(f"- {directory}", indent=2)
    value = pkg_config.environment.get(pkg_config.search_path_env, "")
    logger.info(f"{pkg_config.search_path_env}={value}")
