import re
from dataclasses import dataclass, field
from typing import Any

from .library import Favor


def flag_name(package, favor):
    """Builds the configuration flag that selects the favored block, e.g. ``zlib_dylib``."""
    ident = re.sub(r"[^0-9A-Za-z]", "_", package)
    return f"{ident}_{favor.value}"


@dataclass(frozen=True)
class CfgPredicate:
    flag: str
    negated: bool = False

    def evaluate(self, enabled_flags):
        return (self.flag in enabled_flags) != self.negated

    def negate(self):
        return CfgPredicate(self.flag, not self.negated)

    def __str__(self):
        if self.negated:
            return f"cfg(not({self.flag}))"
        return f"cfg({self.flag})"


@dataclass(frozen=True)
class LinkDirective:
    name: str
    static: bool = False

    def render(self):
        if self.static:
            return f'link(name = "{self.name}", kind = "static")'
        return f'link(name = "{self.name}")'


@dataclass(frozen=True)
class SearchDirDirective:
    path: str

    def render(self):
        return f'link_args = "-L{self.path}"'


@dataclass(frozen=True)
class DirectiveBlock:
    predicate: CfgPredicate
    links: tuple[LinkDirective, ...] = field(default_factory=tuple)
    search_dirs: tuple[SearchDirDirective, ...] = field(default_factory=tuple)

    def is_active(self, enabled_flags):
        return self.predicate.evaluate(enabled_flags)

    def directives(self):
        return list(self.links) + list(self.search_dirs)

    def render_text(self):
        lines = [f"#[{self.predicate}]"]
        lines.extend(f"#[{directive.render()}]" for directive in self.directives())
        return "\n".join(lines)

    def linker_args(self):
        args = [f"-L{d.path}" for d in self.search_dirs]
        for link in self.links:
            if link.static:
                args.extend(["-Wl,-Bstatic", f"-l{link.name}", "-Wl,-Bdynamic"])
            else:
                args.append(f"-l{link.name}")
        return args

    def to_dict(self) -> dict[str, Any]:
        return {
            "cfg": str(self.predicate),
            "flag": self.predicate.flag,
            "negated": self.predicate.negated,
            "links": [{"name": l.name, "static": l.static} for l in self.links],
            "search_dirs": [d.path for d in self.search_dirs],
        }


def block_for(info, favor):
    """The block for one ``LibraryInfo``: gated on the flag when it is the favored flavor, on its negation otherwise."""
    predicate = CfgPredicate(flag_name(info.package, favor))
    if info.flavor is not favor.flavor:
        predicate = predicate.negate()
    return DirectiveBlock(
        predicate=predicate,
        links=tuple(LinkDirective(dep.name, dep.static) for dep in info.dependencies),
        search_dirs=tuple(SearchDirDirective(loc) for loc in info.search_locations),
    )


def build_directives(dylib_info, static_info, favor=Favor.PREFER_DYNAMIC):
    """
    Builds one block per present ``LibraryInfo``, dynamic first.

    At least one of the two must be given.
    """
    infos = [info for info in (dylib_info, static_info) if info is not None]
    if not infos:
        raise ValueError("no resolution requested: both the dynamic and static library info are missing")
    return [block_for(info, favor) for info in infos]


def active_blocks(blocks, enabled_flags=()):
    enabled = set(enabled_flags)
    return [block for block in blocks if block.is_active(enabled)]
