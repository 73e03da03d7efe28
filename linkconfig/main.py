import click
from .cli_logger import logger
from .commands import *


@click.group()
@click.option("--path", "-p", default=".", help="Path to the directory holding linkconfig.toml.")
@click.option("--verbose", "-v", is_flag=True, help="Show debug output, including every tool invocation.")
@click.pass_context
def cli(ctx, path, verbose):
    """Resolve native library linkage from pkg-config metadata."""
    ctx.obj = {"path": path}
    logger.verbose = verbose
    logger.quiet_stdout = False

cli.add_command(init)
cli.add_command(resolve)
cli.add_command(query)
cli.add_command(search_paths)
cli.add_command(doctor)
cli.add_command(config)
cli.add_command(log)
cli.add_command(version)

if __name__ == '__main__':
    try:
        cli()
    except Exception as e:
        click.echo(f"An unexpected error occurred: {e}", err=True)
        click.echo("Please report this issue to the linkconfig developers.", err=True)
