import click
import os
from .. import config as config_module
from ..cli_logger import logger


def _get_default_config():
    return {
        "linkconfig": {key: (list(value) if isinstance(value, list) else value)
                       for key, value in config_module.DEFAULT_SETTINGS.items()},
        "packages": {},
    }


@click.command()
@click.option("--package", "packages", multiple=True, help="Package to add to the [packages] table.")
@click.option("--force", is_flag=True, help="Overwrite an existing linkconfig.toml.")
@click.pass_context
def init(ctx, packages, force):
    """Create a default linkconfig.toml."""
    path = ctx.obj["path"]
    config_path = os.path.join(path, config_module.CONFIG_FILE)
    if os.path.exists(config_path) and not force:
        logger.error(f"Error: {config_path} already exists. Use --force to overwrite it.")
        return
    conf = _get_default_config()
    for package in packages:
        conf["packages"][package] = []
    if config_module.save_config(conf, path=path):
        logger.success(f"Created {config_path}")
