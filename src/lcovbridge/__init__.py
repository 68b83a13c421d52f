"""lcovbridge - convert class-oriented coverage reports into LCOV tracefiles.

Usage:
    from lcovbridge import PathResolver, LcovFormatter, load_jacoco_xml

    bundle = load_jacoco_xml(Path("jacoco.xml"))
    formatter = LcovFormatter(PathResolver(["/repo/src/main/java/com/example/Foo.java"]))
    text = formatter.format(bundle)
"""

from lcovbridge.coverage import (
    BranchDetail,
    Bundle,
    ClassCoverage,
    CoverageReport,
    CoverageSource,
    FileCoverage,
    LineCoverage,
    MethodCoverage,
    PackageCoverage,
    load_jacoco_xml,
)
from lcovbridge.lcov import (
    EXEC_PATH_DELIMITER,
    KnownPath,
    LcovFormatter,
    PathResolver,
    convert,
)

__version__ = "0.1.0"

__all__ = [
    "EXEC_PATH_DELIMITER",
    "BranchDetail",
    "Bundle",
    "ClassCoverage",
    "CoverageReport",
    "CoverageSource",
    "FileCoverage",
    "KnownPath",
    "LcovFormatter",
    "LineCoverage",
    "MethodCoverage",
    "PackageCoverage",
    "PathResolver",
    "convert",
    "load_jacoco_xml",
]
