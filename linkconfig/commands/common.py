import os
from .. import config as config_module
from ..pkg_config import PkgConfig
from ..search_paths import DEFAULT_STAGING_ROOT, StagedLibraryDirectories


def load_settings(ctx):
    """Loads linkconfig.toml once per invocation and caches it on the context."""
    if "conf" not in ctx.obj:
        ctx.obj["conf"] = config_module.load_config(path=ctx.obj["path"])
    return config_module.get_settings(ctx.obj["conf"])


def get_query(ctx):
    """
    Returns the process-wide PkgConfig.

    It is created on first use so every resolution in this run shares the
    one search-path augmentation.
    """
    if ctx.obj.get("query") is None:
        settings = load_settings(ctx)
        provider = StagedLibraryDirectories([DEFAULT_STAGING_ROOT] + list(settings["search_dirs"]))
        ctx.obj["query"] = PkgConfig(
            tool=os.environ.get("PKG_CONFIG") or settings["tool"],
            provider=provider,
            search_path_env=settings["search_path_env"],
        )
    return ctx.obj["query"]
