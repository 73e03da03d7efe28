from .config import config
from .doctor import doctor
from .init import init
from .log import log
from .query import query
from .resolve import resolve
from .search_paths import search_paths
from .version import version

__all__ = ["config", "doctor", "init", "log", "query", "resolve", "search_paths", "version"]
