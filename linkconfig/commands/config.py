import click
import json
import os
import sys
import toml
from .. import config as config_module
from ..cli_logger import logger


def _require_config(ctx):
    conf = config_module.load_config(path=ctx.obj["path"])
    if not conf:
        logger.error("Error: No linkconfig.toml found. Please run 'linkconfig init' first.")
    return conf


def _parse_value(raw):
    """Reads VALUE as a TOML literal (so lists of modifiers work), falling back to a plain string."""
    try:
        return toml.loads(f"value = {raw}")["value"]
    except toml.TomlDecodeError:
        return raw


@click.group()
@click.pass_context
def config(ctx):
    """View or edit the linkconfig.toml configuration file."""
    pass

@config.command()
@click.pass_context
def view(ctx):
    """Print linkconfig.toml as written."""
    if not _require_config(ctx):
        return
    config_file_path = os.path.join(ctx.obj["path"], config_module.CONFIG_FILE)
    try:
        with open(config_file_path, 'r') as f:
            click.echo(f.read())
    except IOError as e:
        logger.error(f"Error reading linkconfig.toml at {config_file_path}: {e}")
        logger.exception(*sys.exc_info())

@config.command(name="list")
@click.pass_context
def list_config(ctx):
    """List all configuration keys and values, defaults included."""
    conf = _require_config(ctx)
    if not conf:
        return
    merged = dict(conf)
    merged["linkconfig"] = config_module.get_settings(conf)
    click.echo(json.dumps(merged, indent=4))

@config.command()
@click.argument('key')
@click.pass_context
def get(ctx, key):
    """Get a dotted KEY, e.g. packages.zlib."""
    conf = _require_config(ctx)
    if not conf:
        return
    value = conf
    try:
        for k in key.split('.'):
            value = value[k]
    except (KeyError, TypeError):
        logger.error(f"Error: Key '{key}' not found in linkconfig.toml")
        return
    click.echo(json.dumps(value) if isinstance(value, (list, dict)) else value)

@config.command(name="set")
@click.argument('key')
@click.argument('value')
@click.pass_context
def set_value(ctx, key, value):
    """Set a dotted KEY to VALUE, e.g. packages.zlib '["only_static"]'."""
    conf = _require_config(ctx)
    if not conf:
        return
    keys = key.split('.')
    d = conf
    for k in keys[:-1]:
        d = d.setdefault(k, {})
    d[keys[-1]] = _parse_value(value)
    if config_module.save_config(conf, path=ctx.obj["path"]):
        logger.info(f"Set '{key}' to {d[keys[-1]]!r}")

@config.command()
@click.argument('key')
@click.pass_context
def unset(ctx, key):
    """Remove a dotted KEY from linkconfig.toml."""
    conf = _require_config(ctx)
    if not conf:
        return
    keys = key.split('.')
    d = conf
    try:
        for k in keys[:-1]:
            d = d[k]
        del d[keys[-1]]
    except (KeyError, TypeError):
        logger.error(f"Error: Key '{key}' not found in linkconfig.toml")
        return
    if config_module.save_config(conf, path=ctx.obj["path"]):
        logger.info(f"Unset '{key}'")
