"""Native library directories contributed by the surrounding build tool.

The build tool stages the static archives it has already built under a
staging root, one ``<arch>/lib`` directory per architecture. Those
directories take part in the static archive lookup and are folded into the
metadata tool's own search-path variable so its ``.pc`` files are found.
"""
import os

from .cli_logger import logger

INSTALL_DIR = os.path.join(os.path.expanduser("~"), ".linkconfig")
DEFAULT_STAGING_ROOT = os.path.join(INSTALL_DIR, "native_libs")
NATIVE_DIRS_ENV = "LINKCONFIG_NATIVE_DIRS"


class FixedDirectories:
    """A provider over a list of directories the caller already knows."""

    def __init__(self, directories=()):
        self.directories = list(directories)

    def list_native_search_directories(self):
        return list(self.directories)


class StagedLibraryDirectories:
    """Lists the existing library directories below the staging roots."""

    def __init__(self, roots=None, environ=None):
        if roots is None:
            roots = [DEFAULT_STAGING_ROOT]
        environ = os.environ if environ is None else environ
        extra = environ.get(NATIVE_DIRS_ENV, "")
        self.roots = list(roots) + [d for d in extra.split(os.pathsep) if d]

    def list_native_search_directories(self):
        directories = []
        for root in self.roots:
            if not os.path.isdir(root):
                continue
            _append_unique(directories, root)
            lib_dir = os.path.join(root, "lib")
            if os.path.isdir(lib_dir):
                _append_unique(directories, lib_dir)
            for arch in sorted(os.listdir(root)):
                arch_lib_dir = os.path.join(root, arch, "lib")
                if os.path.isdir(arch_lib_dir):
                    _append_unique(directories, arch_lib_dir)
        return directories


def _append_unique(target, value):
    if value and value not in target:
        target.append(value)


def augment_search_path(value, directories, separator=os.pathsep):
    """
    Returns ``value`` with ``directories`` appended.

    Each directory contributes itself and, when it exists, its ``pkgconfig``
    sub-directory. Entries already present are not added again, so applying
    the same directories twice gives the same result as applying them once.
    """
    entries = [entry for entry in (value or "").split(separator) if entry]
    for directory in directories:
        _append_unique(entries, directory)
        pc_dir = os.path.join(directory, "pkgconfig")
        if os.path.isdir(pc_dir):
            _append_unique(entries, pc_dir)
    return separator.join(entries)


def prepare_environment(provider, variable="PKG_CONFIG_PATH", base_env=None):
    """Returns a copy of ``base_env`` with the provider's directories folded into ``variable``."""
    env = dict(os.environ if base_env is None else base_env)
    directories = provider.list_native_search_directories() if provider else []
    if directories:
        env[variable] = augment_search_path(env.get(variable, ""), directories)
        logger.debug(f"{variable}={env[variable]}")
    return env


SYSTEM_PREFIXES = ("/usr", "/lib", "/lib32", "/lib64")


def is_system_directory(directory, prefixes=SYSTEM_PREFIXES):
    path = os.path.normpath(directory)
    for prefix in prefixes:
        prefix = os.path.normpath(prefix)
        if path == prefix or path.startswith(prefix.rstrip(os.sep) + os.sep):
            return True
    return False
