import click
import sys
import importlib.metadata
from ..cli_logger import logger

@click.command()
def version():
    """Print the version of linkconfig."""
    try:
        ver = importlib.metadata.version("linkconfig")
        logger.info(f"linkconfig version {ver}")
    except importlib.metadata.PackageNotFoundError:
        logger.error("Error: Could not determine the version of linkconfig. Is it installed correctly?")
    except Exception as e:
        logger.error(f"An unexpected error occurred while determining linkconfig version: {e}")
        logger.exception(*sys.exc_info())
