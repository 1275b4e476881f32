from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ChangeSet:
    """Sorted, duplicate-free set of changed file paths for one run."""

    paths: tuple[str, ...] = ()

    @classmethod
    def from_paths(cls, paths: Iterable[str]) -> ChangeSet:
        return cls(paths=tuple(sorted({p for p in paths if p})))

    def __len__(self) -> int:
        return len(self.paths)

    def __iter__(self):
        return iter(self.paths)


@dataclass(frozen=True)
class SourceResult:
    """Outcome of a single diff source: its paths, or an empty contribution."""

    name: str
    paths: tuple[str, ...] = ()
    ok: bool = True
    error: str = ""

    @classmethod
    def success(cls, name: str, paths: Iterable[str]) -> SourceResult:
        return cls(name=name, paths=tuple(paths))

    @classmethod
    def empty(cls, name: str, error: str = "") -> SourceResult:
        return cls(name=name, ok=False, error=error)


@dataclass(frozen=True)
class MappingRule:
    """Path pattern (regex source) mapped to test identifiers."""

    pattern: str
    tests: tuple[str, ...] = ()


@dataclass(frozen=True)
class MappingTable:
    rules: tuple[MappingRule, ...] = ()


@dataclass(frozen=True)
class SuiteDefinition:
    """A named suite and the tags a listing line must carry to belong to it."""

    name: str
    tags: frozenset[str] = frozenset()


@dataclass(frozen=True)
class SuiteCatalog:
    """All configured suites plus the one used when none is requested."""

    default_suite: str
    suites: Mapping[str, SuiteDefinition] = field(default_factory=dict)

    def names(self) -> list[str]:
        return sorted(self.suites)
