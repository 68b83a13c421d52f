"""LCOV emission and source path resolution."""

from lcovbridge.lcov.formatter import LcovFormatter, convert, function_name, render_record
from lcovbridge.lcov.paths import (
    EXEC_PATH_DELIMITER,
    KnownPath,
    PathResolver,
    class_suffix,
    normalize_path,
)

__all__ = [
    "EXEC_PATH_DELIMITER",
    "KnownPath",
    "LcovFormatter",
    "PathResolver",
    "class_suffix",
    "convert",
    "function_name",
    "normalize_path",
    "render_record",
]
