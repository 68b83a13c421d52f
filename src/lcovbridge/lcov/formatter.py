"""LCOV tracefile emission driven by path resolution.

Each analyzed class is resolved to a declared path. Unresolved classes are
skipped without output. Classes resolving to the same path (nested and inner
classes of one source file) fold into a single record. Each record is
serialized as one block:

- SF:<source file path>
- FN:<line>,<name> / FNDA:<hit count>,<name>
- FNF:<functions found> / FNH:<functions hit>
- BRDA:<line>,<block>,<branch>,<taken|->
- BRF:<branches found> / BRH:<branches hit>
- DA:<line>,<hit count>
- LH:<lines hit> / LF:<lines found>
- end_of_record
"""

from __future__ import annotations

import io
from collections.abc import Iterable, Mapping, Sequence
from typing import TextIO

from lcovbridge.config.models import FormatterConfig
from lcovbridge.core.errors import EmitError
from lcovbridge.core.logging import clear_run_id, get_logger, set_run_id
from lcovbridge.coverage.bundle import BranchDetail, ClassCoverage, CoverageSource, LineCoverage
from lcovbridge.coverage.models import (
    BranchCoverage,
    CoverageReport,
    FileCoverage,
    FunctionCoverage,
)
from lcovbridge.lcov.paths import PathResolver

log = get_logger(__name__)

_BranchKey = tuple[int, int, int]  # (line, block_id, branch_id)


def function_name(class_name: str, method_name: str, descriptor: str = "") -> str:
    """LCOV function name for a method, e.g. ``com/example/Foo::bar (I)V``."""
    name = f"{class_name}::{method_name}"
    return f"{name} {descriptor}" if descriptor else name


def render_record(fc: FileCoverage) -> str:
    """Serialize one FileCoverage as a complete LCOV block."""
    out = [f"SF:{fc.path}"]

    if fc.functions:
        functions = sorted(fc.functions.values(), key=lambda f: (f.start_line, f.name))
        out.extend(f"FN:{fn.start_line},{fn.name}" for fn in functions)
        out.extend(f"FNDA:{fn.hits},{fn.name}" for fn in functions)
        out.append(f"FNF:{fc.functions_found}")
        out.append(f"FNH:{fc.functions_hit}")

    if fc.branches:
        for branch in fc.branches:
            taken = "-" if branch.hits is None else str(branch.hits)
            out.append(f"BRDA:{branch.line},{branch.block_id},{branch.branch_id},{taken}")
        out.append(f"BRF:{fc.branches_found}")
        out.append(f"BRH:{fc.branches_hit}")

    if fc.lines:
        out.extend(f"DA:{line},{fc.lines[line]}" for line in sorted(fc.lines))
        out.append(f"LH:{fc.lines_hit}")
        out.append(f"LF:{fc.lines_found}")

    out.append("end_of_record")
    return "\n".join(out) + "\n"


def _branch_outcomes(
    line: LineCoverage, detail: BranchDetail | None
) -> tuple[bool, Sequence[bool]]:
    if detail is not None:
        return detail.executed, detail.taken
    executed = line.is_executed or line.covered_branches > 0
    return executed, [True] * line.covered_branches + [False] * line.missed_branches


def _max_hits(a: int | None, b: int | None) -> int | None:
    if a is None:
        return b
    if b is None:
        return a
    return max(a, b)


class LcovFormatter:
    """Walks a coverage bundle and writes LCOV for every resolvable class.

    The resolver is shared read-only. Resolution results are cached for the
    duration of a single pass only.
    """

    def __init__(
        self,
        resolver: PathResolver,
        *,
        emit_functions: bool = True,
        emit_branches: bool = True,
        branch_details: Mapping[str, Iterable[BranchDetail]] | None = None,
    ) -> None:
        self.resolver = resolver
        self.emit_functions = emit_functions
        self.emit_branches = emit_branches
        # class name → line → detail
        self._branch_details: dict[str, dict[int, BranchDetail]] = {
            class_name: {detail.line: detail for detail in details}
            for class_name, details in (branch_details or {}).items()
        }

    @classmethod
    def from_config(
        cls,
        paths: Iterable[str],
        config: FormatterConfig | None = None,
        *,
        branch_details: Mapping[str, Iterable[BranchDetail]] | None = None,
    ) -> LcovFormatter:
        config = config or FormatterConfig()
        return cls(
            PathResolver(paths, delimiter=config.path_delimiter),
            emit_functions=config.emit_functions,
            emit_branches=config.emit_branches,
            branch_details=branch_details,
        )

    def collect(self, source: CoverageSource) -> CoverageReport:
        """Build one FileCoverage per resolved path, in first-seen order."""
        report = CoverageReport()
        resolved: dict[tuple[str, str | None], str | None] = {}
        branches: dict[str, dict[_BranchKey, int | None]] = {}

        for package in source.packages():
            for clazz in source.classes(package):
                key = (clazz.package_name, clazz.source_file_name)
                if key not in resolved:
                    resolved[key] = self.resolver.resolve(*key)
                path = resolved[key]
                if path is None:
                    report.unresolved += 1
                    log.debug(
                        "class_unresolved",
                        class_name=clazz.name,
                        package=clazz.package_name,
                        source_file=clazz.source_file_name,
                    )
                    continue

                fc = report.files.get(path)
                if fc is None:
                    fc = report.files[path] = FileCoverage(path=path)
                self._fold_class(fc, branches.setdefault(path, {}), source, clazz)

        for path, merged in branches.items():
            report.files[path].branches = [
                BranchCoverage(line=line, block_id=block, branch_id=branch, hits=hits)
                for (line, block, branch), hits in sorted(merged.items())
            ]
        return report

    def _fold_class(
        self,
        fc: FileCoverage,
        branches: dict[_BranchKey, int | None],
        source: CoverageSource,
        clazz: ClassCoverage,
    ) -> None:
        # Missing line data means an empty record, not an error
        lines = source.line_data(clazz) or {}
        details = self._branch_details.get(clazz.name, {})

        for number in sorted(lines):
            line = lines[number]
            fc.lines[number] = max(fc.lines.get(number, 0), line.hits)
            if not self.emit_branches:
                continue
            executed, outcomes = _branch_outcomes(line, details.get(number))
            for branch_id, taken in enumerate(outcomes):
                hits = (1 if taken else 0) if executed else None
                branch_key = (number, 0, branch_id)
                branches[branch_key] = _max_hits(branches.get(branch_key), hits)

        if not self.emit_functions:
            return
        for method in source.methods(clazz) or ():
            name = function_name(clazz.name, method.name, method.descriptor)
            existing = fc.functions.get(name)
            if existing is not None:
                method_line = min(existing.start_line, method.first_line)
                hits = max(existing.hits, method.hits)
            else:
                method_line, hits = method.first_line, method.hits
            fc.functions[name] = FunctionCoverage(name=name, start_line=method_line, hits=hits)

    def write(self, source: CoverageSource, out: TextIO) -> CoverageReport:
        """Write one LCOV block per resolved file to ``out``.

        Every block goes out in a single ``write`` call, so a failing sink
        never interleaves a partial block with a later one.

        Raises:
            EmitError: If writing or flushing the sink fails.
        """
        report = self.collect(source)
        for fc in report.files.values():
            block = render_record(fc)
            try:
                out.write(block)
            except (OSError, ValueError) as e:
                log.error("lcov_write_failed", path=fc.path, error=str(e))
                raise EmitError.write_failed(fc.path, str(e)) from e

        # Plain write-only sinks have nothing to flush
        flush = getattr(out, "flush", None)
        if flush is not None:
            try:
                flush()
            except (OSError, ValueError) as e:
                raise EmitError.write_failed("<output>", str(e)) from e

        log.info(
            "lcov_pass_complete",
            files=len(report.files),
            unresolved_classes=report.unresolved,
        )
        return report

    def format(self, source: CoverageSource) -> str:
        """Render the whole tracefile as a string."""
        buffer = io.StringIO()
        self.write(source, buffer)
        return buffer.getvalue()


def convert(
    source: CoverageSource,
    paths: Iterable[str],
    out: TextIO,
    *,
    config: FormatterConfig | None = None,
    branch_details: Mapping[str, Iterable[BranchDetail]] | None = None,
) -> CoverageReport:
    """One conversion pass: build a resolver from ``paths`` and write LCOV to ``out``."""
    set_run_id()
    try:
        formatter = LcovFormatter.from_config(paths, config, branch_details=branch_details)
        log.debug("lcov_pass_start", known_paths=len(formatter.resolver))
        return formatter.write(source, out)
    finally:
        clear_run_id()
