"""CLI utilities."""

from collections.abc import Iterable
from pathlib import Path

import click


def read_paths_file(path: Path) -> list[str]:
    """Read known source paths, one per line.

    Blank lines and lines starting with ``#`` are skipped.

    Raises:
        click.ClickException: If the file cannot be read
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise click.ClickException(f"Cannot read paths file {path}: {e}") from e
    return [
        line.strip()
        for line in text.splitlines()
        if line.strip() and not line.lstrip().startswith("#")
    ]


def collect_paths(paths_files: Iterable[Path], paths: Iterable[str]) -> list[str]:
    """Merge paths from files and ``--path`` options, files first."""
    collected: list[str] = []
    for paths_file in paths_files:
        collected.extend(read_paths_file(paths_file))
    collected.extend(p for p in paths if p)
    return collected
