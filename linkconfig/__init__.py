"""Resolve how a native library should be linked: dynamically, statically, or either behind a build flag."""
from .errors import (LinkConfigError, MalformedInputError, ModifierError,
                     ToolExitError, ToolLaunchError)
from .library import Favor, Flavor, LibraryInfo, ResolutionState, SystemPolicy
from .link_config import Resolution, resolve
