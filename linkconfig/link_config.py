"""Entry points the surrounding build step calls to resolve a package's linkage."""
import threading
from dataclasses import dataclass, field
from typing import Any

from .cli_logger import logger
from .directives import build_directives
from .errors import LinkConfigError, ModifierError
from .modifiers import parse_modifiers, validate_package_name
from .pkg_config import PkgConfig
from .resolver import build_library_info
from .search_paths import SYSTEM_PREFIXES, StagedLibraryDirectories

_default_query = None
_default_query_lock = threading.Lock()


def default_query():
    """The shared PkgConfig used when a caller passes no ``query``; created once per process."""
    global _default_query
    with _default_query_lock:
        if _default_query is None:
            _default_query = PkgConfig(provider=StagedLibraryDirectories())
        return _default_query


@dataclass
class Resolution:
    package: str
    blocks: list = field(default_factory=list)
    errors: list = field(default_factory=list)

    @property
    def ok(self):
        return bool(self.blocks) and not any(
            not isinstance(e, ModifierError) for e in self.errors)

    def to_dict(self) -> dict[str, Any]:
        return {
            "package": self.package,
            "blocks": [block.to_dict() for block in self.blocks],
            "errors": [str(e) for e in self.errors],
        }


def _query_info(query, package, state, provider_dirs, system_prefixes):
    if state is None:
        return None
    result = query.query(package, state.flavor)
    return build_library_info(package, state, result, provider_dirs, system_prefixes)


def resolve_libraries(package, modifiers=(), query=None, system_prefixes=SYSTEM_PREFIXES):
    """
    Runs the queries the modifiers ask for.

    Returns ``(dylib_info, static_info, parsed)``; either info is ``None``
    when its flavor was not requested. Any query failure propagates, so no
    partial result ever comes back.
    """
    package = validate_package_name(package)
    parsed = parse_modifiers(package, modifiers)
    if query is None:
        query = default_query()

    dylib_info = _query_info(query, package, parsed.dylib_state, (), system_prefixes)
    provider_dirs = query.search_directories() if parsed.static_state is not None else []
    static_info = _query_info(query, package, parsed.static_state, provider_dirs, system_prefixes)
    return dylib_info, static_info, parsed


def resolve(package, modifiers=(), query=None, system_prefixes=SYSTEM_PREFIXES):
    """Resolves ``package`` into directive blocks, raising on fatal errors."""
    dylib_info, static_info, parsed = resolve_libraries(package, modifiers, query, system_prefixes)
    return build_directives(dylib_info, static_info, parsed.favor)


def link_config(package, modifiers=(), query=None, system_prefixes=SYSTEM_PREFIXES):
    """
    Resolves ``package`` without raising for resolution errors.

    Fatal errors leave ``blocks`` empty; unknown modifiers are reported in
    ``errors`` next to the blocks they did not prevent.
    """
    resolution = Resolution(package=package if isinstance(package, str) else repr(package))
    try:
        dylib_info, static_info, parsed = resolve_libraries(package, modifiers, query, system_prefixes)
    except LinkConfigError as e:
        logger.error(f"Could not resolve linkage for {resolution.package}: {e}")
        resolution.errors.append(e)
        return resolution
    resolution.errors.extend(parsed.errors)
    resolution.blocks = build_directives(dylib_info, static_info, parsed.favor)
    for block in resolution.blocks:
        logger.debug(f"{resolution.package}: {block.predicate} -> {' '.join(block.linker_args())}")
    return resolution


__all__ = ["Resolution", "default_query", "resolve", "resolve_libraries", "link_config"]
