from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class Flavor(Enum):
    DYNAMIC = "dylib"
    STATIC = "static"


class SystemPolicy(Enum):
    """Whether system-wide directories may satisfy a static lookup."""
    DYNAMIC_ONLY = "system_dynamic_only"
    STATIC_ALLOWED = "system_static_allowed"


class Favor(Enum):
    PREFER_DYNAMIC = "dylib"
    PREFER_STATIC = "static"

    @property
    def flavor(self) -> Flavor:
        if self is Favor.PREFER_STATIC:
            return Flavor.STATIC
        return Flavor.DYNAMIC


@dataclass(frozen=True)
class ResolutionState:
    """Either ``Dynamic`` or ``Static(policy)``.

    Use the ``DYNAMIC`` constant and :meth:`static` rather than building
    instances by hand; a dynamic state never carries a policy and a static
    one always does.
    """
    flavor: Flavor
    policy: Optional[SystemPolicy] = None

    def __post_init__(self):
        if self.flavor is Flavor.DYNAMIC and self.policy is not None:
            raise ValueError("a dynamic resolution state takes no system policy")
        if self.flavor is Flavor.STATIC and self.policy is None:
            raise ValueError("a static resolution state needs a system policy")

    @classmethod
    def static(cls, policy=SystemPolicy.DYNAMIC_ONLY) -> "ResolutionState":
        return cls(Flavor.STATIC, policy)

    @property
    def is_static(self) -> bool:
        return self.flavor is Flavor.STATIC

    @property
    def allows_system_static(self) -> bool:
        return self.policy is SystemPolicy.STATIC_ALLOWED

    def __str__(self):
        if self.is_static:
            return f"Static({self.policy.value})"
        return "Dynamic"


ResolutionState.DYNAMIC = ResolutionState(Flavor.DYNAMIC)


@dataclass(frozen=True)
class Dependency:
    name: str
    static: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "static": self.static}


@dataclass(frozen=True)
class LibraryInfo:
    package: str
    state: ResolutionState
    dependencies: tuple[Dependency, ...] = field(default_factory=tuple)
    search_locations: tuple[str, ...] = field(default_factory=tuple)

    @property
    def flavor(self) -> Flavor:
        return self.state.flavor

    def to_dict(self) -> dict[str, Any]:
        return {
            "package": self.package,
            "state": str(self.state),
            "dependencies": [dep.to_dict() for dep in self.dependencies],
            "search_locations": list(self.search_locations),
        }
