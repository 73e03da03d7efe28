import click
import json
from .. import config as config_module
from ..cli_logger import logger
from ..decorators import handle_exceptions
from ..directives import active_blocks
from ..link_config import link_config
from .common import get_query, load_settings


def _render(resolution, output_format, enabled_flags):
    blocks = resolution.blocks
    if enabled_flags:
        blocks = active_blocks(blocks, enabled_flags)
    if output_format == "json":
        data = resolution.to_dict()
        data["blocks"] = [block.to_dict() for block in blocks]
        return json.dumps(data, indent=4)
    if output_format == "args":
        return "\n".join(" ".join(block.linker_args()) for block in blocks)
    return "\n\n".join(block.render_text() for block in blocks)


@click.command()
@click.argument("package", required=False)
@click.option("--modifier", "-m", "modifiers", multiple=True,
              help="Resolution modifier: only_static, only_dylib, system_static or favor_static.")
@click.option("--format", "output_format", type=click.Choice(["text", "json", "args"]), default="text",
              help="Output format for the directive blocks.")
@click.option("--cfg", "enabled_flags", multiple=True,
              help="Enabled configuration flag; only the blocks active under these flags are printed.")
@click.pass_context
@handle_exceptions
def resolve(ctx, package, modifiers, output_format, enabled_flags):
    """Resolve how PACKAGE should be linked.

    Without PACKAGE every package in the [packages] table of linkconfig.toml
    is resolved. Only the directive output is written to stdout.
    """
    logger.quiet_stdout = True
    settings = load_settings(ctx)
    if package:
        targets = [(package, list(modifiers))]
    else:
        targets = config_module.get_packages(ctx.obj["conf"])
        if not targets:
            logger.error("Error: No package given and no [packages] found in linkconfig.toml.")
            ctx.exit(1)

    query = get_query(ctx)
    failed = []
    for name, package_modifiers in targets:
        logger.info(f"Resolving linkage for {name}...")
        resolution = link_config(name, package_modifiers, query=query,
                                 system_prefixes=settings["system_prefixes"])
        if not resolution.ok:
            failed.append(name)
            continue
        click.echo(_render(resolution, output_format, enabled_flags))

    if failed:
        logger.error(f"Could not resolve: {', '.join(failed)}")
        ctx.exit(1)
    logger.success("Linkage resolved.")
