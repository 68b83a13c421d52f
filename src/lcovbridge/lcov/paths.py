"""Resolution of analyzer class locations to declared source paths.

An analyzer only knows a class by its package (``com/example``) and the bare
name of its source file (``Foo.java``). The build knows the real paths. Each
known path is either a plain execution path, or an ``original`` path mapped
onto an execution path as ``<original><delimiter><execution>``:

    /parent/dir/com/example/Foo.java
    C:\\parent\\dir\\com\\example\\Foo.java
    /some/other/dir/Foo.java////com/example/Foo.java

A class resolves to the known path whose execution path ends with
``<package>/<file>`` on whole path components. Mapped entries resolve to
their original path.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from lcovbridge.config.models import DEFAULT_PATH_DELIMITER
from lcovbridge.core.logging import get_logger

log = get_logger(__name__)

EXEC_PATH_DELIMITER = DEFAULT_PATH_DELIMITER


def normalize_path(path: str) -> str:
    """Convert Windows separators to forward slashes."""
    return path.replace("\\", "/")


def class_suffix(package_name: str, source_file_name: str) -> str:
    """Expected tail of a path holding ``source_file_name`` in ``package_name``.

    The default (empty) package yields just the file name.
    """
    package = normalize_path(package_name).strip("/")
    file_name = normalize_path(source_file_name).strip("/")
    return f"{package}/{file_name}" if package else file_name


@dataclass(frozen=True, slots=True)
class KnownPath:
    """One entry of the known path universe, separators normalized."""

    execution_path: str
    original_path: str | None = None

    @property
    def output_path(self) -> str:
        """Path written to LCOV output."""
        return self.original_path or self.execution_path

    @property
    def file_name(self) -> str:
        return self.execution_path.rsplit("/", 1)[-1]

    def matches(self, suffix: str) -> bool:
        """Component-exact suffix match against the execution path."""
        return self.execution_path == suffix or self.execution_path.endswith("/" + suffix)

    @classmethod
    def parse(cls, raw: str, delimiter: str = EXEC_PATH_DELIMITER) -> KnownPath | None:
        """Parse one raw entry. Never raises; returns None for empty entries.

        Entries with exactly one delimiter and two non-empty sides become
        mapped entries. Anything else carrying the delimiter is malformed and
        falls back to an execution-only entry built from the last non-empty
        component.
        """
        if not raw:
            return None
        if delimiter not in raw:
            return cls(execution_path=normalize_path(raw))

        parts = raw.split(delimiter)
        if len(parts) == 2 and all(parts):
            original, execution = parts
            return cls(
                execution_path=normalize_path(execution),
                original_path=normalize_path(original),
            )

        remaining = [part for part in parts if part]
        log.debug("path_entry_malformed", entry=raw, usable=bool(remaining))
        if not remaining:
            return None
        return cls(execution_path=normalize_path(remaining[-1]))


def _preference(entry: KnownPath) -> tuple[bool, str]:
    # Among duplicate execution paths: mapped entries first, then smallest original
    return (entry.original_path is None, entry.original_path or "")


class PathResolver:
    """Immutable lookup from (package, source file) to a declared path.

    When several entries match, the one with the lexicographically smallest
    execution path wins, so the result does not depend on the order (or
    lack of order) of the input collection.
    """

    __slots__ = ("_delimiter", "_entries", "_by_file_name")

    def __init__(self, paths: Iterable[str], *, delimiter: str = EXEC_PATH_DELIMITER) -> None:
        if not delimiter:
            raise ValueError("delimiter must not be empty")
        self._delimiter = delimiter

        unique: dict[str, KnownPath] = {}
        for raw in paths:
            entry = KnownPath.parse(raw, delimiter)
            if entry is None:
                continue
            current = unique.get(entry.execution_path)
            if current is None or _preference(entry) < _preference(current):
                unique[entry.execution_path] = entry

        self._entries: tuple[KnownPath, ...] = tuple(
            unique[key] for key in sorted(unique)
        )
        by_file_name: dict[str, list[KnownPath]] = {}
        for entry in self._entries:
            by_file_name.setdefault(entry.file_name, []).append(entry)
        self._by_file_name: dict[str, tuple[KnownPath, ...]] = {
            name: tuple(entries) for name, entries in by_file_name.items()
        }

    @property
    def delimiter(self) -> str:
        return self._delimiter

    @property
    def entries(self) -> tuple[KnownPath, ...]:
        """Known entries, ordered by execution path."""
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[KnownPath]:
        return iter(self._entries)

    def match(self, package_name: str, source_file_name: str | None) -> KnownPath | None:
        """Return the entry declaring this class's source file, if any."""
        if not source_file_name:
            return None
        suffix = class_suffix(package_name, source_file_name)
        file_name = suffix.rsplit("/", 1)[-1]
        for entry in self._by_file_name.get(file_name, ()):
            if entry.matches(suffix):
                return entry
        return None

    def resolve(self, package_name: str, source_file_name: str | None) -> str | None:
        """Resolve to the path LCOV output should carry, or None when unresolved."""
        entry = self.match(package_name, source_file_name)
        return entry.output_path if entry is not None else None
