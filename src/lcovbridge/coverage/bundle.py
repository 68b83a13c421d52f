"""Read-only traversal contract for analyzer coverage bundles.

An analyzer (JaCoCo, or anything shaped like it) reports coverage per package
and per class. The formatter only needs to walk that hierarchy, so it depends
on the small ``CoverageSource`` protocol rather than on any analyzer types.
``Bundle`` is the in-memory implementation used by the JaCoCo XML adapter and
by tests.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True, slots=True)
class LineCoverage:
    """Execution status of one source line.

    ``hits`` is the execution count reported for the line. Branch counts
    are zero for lines without decision points.
    """

    number: int
    hits: int
    missed_branches: int = 0
    covered_branches: int = 0

    @property
    def branches(self) -> int:
        return self.missed_branches + self.covered_branches

    @property
    def is_executed(self) -> bool:
        return self.hits > 0


@dataclass(frozen=True, slots=True)
class MethodCoverage:
    """Method entry coverage."""

    name: str
    first_line: int
    hits: int
    descriptor: str = ""


@dataclass(frozen=True, slots=True)
class BranchDetail:
    """Exact per-branch outcomes at one line.

    Overrides the missed/covered counts of the matching ``LineCoverage``.
    """

    line: int
    taken: tuple[bool, ...]
    executed: bool = True


@dataclass(frozen=True, slots=True)
class ClassCoverage:
    """Coverage of one analyzed class.

    ``name`` is the VM name (``com/example/Foo$Inner``), ``package_name`` is
    slash separated, ``source_file_name`` is the bare file name or None for
    synthetic classes.
    """

    name: str
    package_name: str
    source_file_name: str | None
    lines: Mapping[int, LineCoverage] = field(default_factory=dict)
    methods: Sequence[MethodCoverage] = ()


@dataclass(frozen=True, slots=True)
class PackageCoverage:
    name: str
    classes: Sequence[ClassCoverage] = ()


class CoverageSource(Protocol):
    """What the formatter needs from a coverage bundle."""

    def packages(self) -> Sequence[PackageCoverage]: ...

    def classes(self, package: PackageCoverage) -> Sequence[ClassCoverage]: ...

    def line_data(self, cls: ClassCoverage) -> Mapping[int, LineCoverage]: ...

    def methods(self, cls: ClassCoverage) -> Sequence[MethodCoverage]: ...


@dataclass(frozen=True, slots=True)
class Bundle:
    """In-memory coverage bundle."""

    name: str = ""
    package_list: Sequence[PackageCoverage] = ()

    def packages(self) -> Sequence[PackageCoverage]:
        return self.package_list

    def classes(self, package: PackageCoverage) -> Sequence[ClassCoverage]:
        return package.classes

    def line_data(self, cls: ClassCoverage) -> Mapping[int, LineCoverage]:
        return cls.lines

    def methods(self, cls: ClassCoverage) -> Sequence[MethodCoverage]:
        return cls.methods

    @classmethod
    def of(cls, *classes: ClassCoverage, name: str = "") -> Bundle:
        """Group classes into packages, keeping first-seen package order."""
        grouped: dict[str, list[ClassCoverage]] = {}
        for clazz in classes:
            grouped.setdefault(clazz.package_name, []).append(clazz)
        packages = tuple(
            PackageCoverage(name=pkg, classes=tuple(members)) for pkg, members in grouped.items()
        )
        return cls(name=name, package_list=packages)
