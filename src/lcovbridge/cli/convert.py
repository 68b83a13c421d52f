"""lcovbridge convert command - JaCoCo XML to LCOV."""

from pathlib import Path
from typing import TextIO

import click
from rich.console import Console

from lcovbridge.cli.utils import collect_paths
from lcovbridge.config.loader import load_config
from lcovbridge.core.errors import LcovBridgeError
from lcovbridge.core.logging import configure_logging
from lcovbridge.coverage.jacoco import load_jacoco_xml
from lcovbridge.coverage.report import build_text_summary
from lcovbridge.lcov.formatter import convert

_console = Console(stderr=True)


@click.command()
@click.argument("report", type=click.Path(path_type=Path))
@click.option(
    "--paths-file",
    "paths_files",
    multiple=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="File listing known source paths, one per line.",
)
@click.option("--path", "paths", multiple=True, help="Known source path (repeatable).")
@click.option(
    "-o",
    "--output",
    type=click.File("w", encoding="utf-8", lazy=True),
    default="-",
    show_default=True,
    help="LCOV output file, '-' for stdout.",
)
@click.option("--delimiter", default=None, help="Original/execution path pair delimiter.")
@click.option("--no-branches", is_flag=True, help="Omit branch records.")
@click.option("--no-functions", is_flag=True, help="Omit function records.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    default=None,
    help="YAML config file (default: ./.lcovbridge.yaml if present).",
)
@click.option("-q", "--quiet", is_flag=True, help="Do not print the coverage summary.")
@click.pass_context
def convert_command(
    ctx: click.Context,
    report: Path,
    paths_files: tuple[Path, ...],
    paths: tuple[str, ...],
    output: TextIO,
    delimiter: str | None,
    no_branches: bool,
    no_functions: bool,
    config_path: Path | None,
    quiet: bool,
) -> None:
    """Convert a JaCoCo XML REPORT into an LCOV tracefile.

    Classes whose source file matches none of the known paths are left out.
    """
    overrides: dict[str, object] = {}
    if delimiter is not None:
        overrides["path_delimiter"] = delimiter
    if no_branches:
        overrides["emit_branches"] = False
    if no_functions:
        overrides["emit_functions"] = False

    try:
        config = load_config(config_path, **({"formatter": overrides} if overrides else {}))
        if (ctx.obj or {}).get("verbose"):
            config.logging.level = "DEBUG"
        configure_logging(config=config.logging)

        bundle = load_jacoco_xml(report)
        result = convert(
            bundle,
            collect_paths(paths_files, paths),
            output,
            config=config.formatter,
        )
    except LcovBridgeError as e:
        raise click.ClickException(str(e)) from e

    if not quiet:
        summary = build_text_summary(result)
        _console.print(
            f"{summary} [dim]· {len(result.files)} files, "
            f"{result.unresolved} unresolved classes[/dim]"
        )
