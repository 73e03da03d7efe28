from dataclasses import dataclass, field
from typing import Optional

from .cli_logger import logger
from .errors import MalformedInputError, ModifierError
from .library import Favor, ResolutionState, SystemPolicy

ONLY_STATIC = "only_static"
ONLY_DYLIB = "only_dylib"
SYSTEM_STATIC = "system_static"
FAVOR_STATIC = "favor_static"

MODIFIERS = (ONLY_STATIC, ONLY_DYLIB, SYSTEM_STATIC, FAVOR_STATIC)


@dataclass
class ParsedModifiers:
    dylib_state: Optional[ResolutionState] = ResolutionState.DYNAMIC
    static_state: Optional[ResolutionState] = field(
        default_factory=ResolutionState.static)
    favor: Favor = Favor.PREFER_DYNAMIC
    errors: list = field(default_factory=list)


def validate_package_name(package):
    if not isinstance(package, str):
        raise MalformedInputError(
            f"expected string literal for the package name but got `{package!r}`")
    if not package.strip():
        raise MalformedInputError("the package name must not be empty")
    return package.strip()


def parse_modifiers(package, modifiers=()):
    """
    Parses the modifier list for ``package``.

    Starts from ``(Dynamic, Static(SystemDynamicOnly), PreferDynamic)`` and
    applies each modifier in order. Unknown modifiers are collected in
    ``errors`` and skipped; a non-string entry aborts the whole parse.
    """
    validate_package_name(package)
    if modifiers is None:
        modifiers = ()
    if isinstance(modifiers, str) or not isinstance(modifiers, (list, tuple)):
        raise MalformedInputError(
            f"expected a list of modifiers for `{package}` but got `{modifiers!r}`")

    parsed = ParsedModifiers()
    for modifier in modifiers:
        if not isinstance(modifier, str):
            raise MalformedInputError(
                f"expected string literal modifier for `{package}` but got `{modifier!r}`")
        if modifier == ONLY_STATIC:
            parsed.dylib_state = None
            parsed.favor = Favor.PREFER_STATIC
        elif modifier == ONLY_DYLIB:
            parsed.static_state = None
            parsed.favor = Favor.PREFER_DYNAMIC
        elif modifier == SYSTEM_STATIC:
            # only_dylib removes the static query altogether
            if parsed.static_state is not None:
                parsed.static_state = ResolutionState.static(SystemPolicy.STATIC_ALLOWED)
        elif modifier == FAVOR_STATIC:
            parsed.favor = Favor.PREFER_STATIC
        else:
            error = ModifierError(modifier)
            logger.warning(f"{package}: {error}")
            parsed.errors.append(error)

    if parsed.dylib_state is None and parsed.static_state is None:
        raise MalformedInputError(
            f"`{ONLY_STATIC}` and `{ONLY_DYLIB}` leave nothing to resolve for `{package}`")
    return parsed
