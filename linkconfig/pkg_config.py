import os
import threading
from dataclasses import dataclass, field

from .cli_logger import logger
from .errors import ToolExitError
from .library import Flavor
from .search_paths import prepare_environment
from .utils.command_executor import run_shell_command

DEFAULT_TOOL = "pkg-config"
DEFAULT_SEARCH_PATH_ENV = "PKG_CONFIG_PATH"
LIBRARY_FLAG = "-l"
SEARCH_PATH_FLAG = "-L"


@dataclass(frozen=True)
class QueryResult:
    libraries: list = field(default_factory=list)
    search_locations: list = field(default_factory=list)


def parse_libs_output(stdout):
    """
    Splits ``--libs`` output into library names and search directories.

    Both lists keep the order the tool printed them in; duplicate
    directories are kept. Any other token, and a bare ``-l`` or ``-L``, is
    ignored.
    """
    libraries = []
    locations = []
    for token in stdout.split():
        if token in (LIBRARY_FLAG, SEARCH_PATH_FLAG):
            continue
        if token.startswith(LIBRARY_FLAG):
            libraries.append(token[len(LIBRARY_FLAG):])
        elif token.startswith(SEARCH_PATH_FLAG):
            locations.append(token[len(SEARCH_PATH_FLAG):])
    return QueryResult(libraries, locations)


class PkgConfig:
    """Runs ``<tool> <package> --libs [--static]`` queries.

    The provider's directories are folded into the tool's search-path
    variable the first time a query runs; every later query reuses that
    environment.
    """

    def __init__(self, tool=None, provider=None, search_path_env=DEFAULT_SEARCH_PATH_ENV, base_env=None):
        self.tool = tool or os.environ.get("PKG_CONFIG") or DEFAULT_TOOL
        self.provider = provider
        self.search_path_env = search_path_env
        self._base_env = base_env
        self._env = None
        self._env_lock = threading.Lock()

    @property
    def environment(self):
        with self._env_lock:
            if self._env is None:
                self._env = prepare_environment(self.provider, self.search_path_env, self._base_env)
            return self._env

    def search_directories(self):
        if self.provider is None:
            return []
        return self.provider.list_native_search_directories()

    def command(self, package, flavor):
        cmd = [self.tool, package, "--libs"]
        if flavor is Flavor.STATIC:
            cmd.append("--static")
        return cmd

    def query(self, package, flavor=Flavor.DYNAMIC):
        env = dict(self.environment)
        env["PKG_CONFIG_ALLOW_SYSTEM_LIBS"] = "1"
        cmd = self.command(package, flavor)
        stdout, stderr, returncode = run_shell_command(cmd, env=env)
        if returncode != 0:
            error = ToolExitError(self.tool, returncode, stdout, stderr)
            logger.error(str(error))
            raise error
        result = parse_libs_output(stdout)
        logger.debug(f"{package} ({flavor.value}): libs={result.libraries} locations={result.search_locations}")
        return result
