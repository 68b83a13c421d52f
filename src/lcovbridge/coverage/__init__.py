"""Coverage input contract, output records, and summaries.

Usage:
    from lcovbridge.coverage import load_jacoco_xml, build_text_summary

    bundle = load_jacoco_xml(Path("build/reports/jacoco/test/jacocoTestReport.xml"))
"""

from lcovbridge.coverage.bundle import (
    BranchDetail,
    Bundle,
    ClassCoverage,
    CoverageSource,
    LineCoverage,
    MethodCoverage,
    PackageCoverage,
)
from lcovbridge.coverage.jacoco import load_jacoco_xml
from lcovbridge.coverage.models import (
    BranchCoverage,
    CoverageReport,
    CoverageSummary,
    FileCoverage,
    FunctionCoverage,
)
from lcovbridge.coverage.report import build_text_summary, compute_file_stats

__all__ = [
    # Input
    "BranchDetail",
    "Bundle",
    "ClassCoverage",
    "CoverageSource",
    "LineCoverage",
    "MethodCoverage",
    "PackageCoverage",
    "load_jacoco_xml",
    # Output
    "BranchCoverage",
    "CoverageReport",
    "CoverageSummary",
    "FileCoverage",
    "FunctionCoverage",
    # Report
    "build_text_summary",
    "compute_file_stats",
]
