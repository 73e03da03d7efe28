import os

from .library import Dependency, LibraryInfo
from .search_paths import SYSTEM_PREFIXES, is_system_directory


def static_archive_names(library):
    return (f"lib{library}.a", f"{library}.lib", f"lib{library}.lib")


def has_static_archive(directory, library):
    return any(os.path.exists(os.path.join(directory, name))
               for name in static_archive_names(library))


def candidate_directories(state, directories, system_prefixes=SYSTEM_PREFIXES):
    """Filters out system directories unless the state allows system static archives."""
    if state.allows_system_static:
        return list(directories)
    return [d for d in directories if not is_system_directory(d, system_prefixes)]


def classify(libraries, state, candidates, system_prefixes=SYSTEM_PREFIXES):
    """Returns ``Dependency`` entries for ``libraries`` in the same order."""
    if not state.is_static:
        return tuple(Dependency(name, False) for name in libraries)
    usable = candidate_directories(state, candidates, system_prefixes)
    return tuple(
        Dependency(name, any(has_static_archive(d, name) for d in usable))
        for name in libraries
    )


def build_library_info(package, state, result, provider_dirs=(), system_prefixes=SYSTEM_PREFIXES):
    """Turns one query result into a ``LibraryInfo``.

    The candidate set for the archive check is the provider's directories
    followed by the locations the query itself reported.
    """
    candidates = list(provider_dirs) + list(result.search_locations)
    dependencies = classify(result.libraries, state, candidates, system_prefixes)
    return LibraryInfo(
        package=package,
        state=state,
        dependencies=dependencies,
        search_locations=tuple(result.search_locations),
    )
