import click
from ..cli_logger import logger
from ..decorators import handle_exceptions
from ..errors import LinkConfigError
from ..library import Flavor
from .common import get_query


@click.command()
@click.argument("package")
@click.option("--static", "static", is_flag=True, help="Ask for the static link line.")
@click.pass_context
@handle_exceptions
def query(ctx, package, static):
    """Run a single metadata query for PACKAGE."""
    flavor = Flavor.STATIC if static else Flavor.DYNAMIC
    pkg_config = get_query(ctx)
    try:
        result = pkg_config.query(package, flavor)
    except LinkConfigError:
        logger.error(f"Query for {package} failed.")
        ctx.exit(1)

    logger.info(f"Libraries for {package} ({flavor.value}):")
    for library in result.libraries:
        logger.step_info(f"- {library}", indent=2)
    if result.search_locations:
        logger.info("Search locations:")
        for location in result.search_locations:
            logger.step_info(f"- {location}", indent=2)
