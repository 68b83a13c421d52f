"""Human-readable summaries of a formatting pass."""

from typing import Any

from lcovbridge.coverage.models import CoverageReport


def compute_file_stats(report: CoverageReport) -> list[dict[str, Any]]:
    """Compute per-file coverage statistics.

    Args:
        report: The coverage report to analyze.

    Returns:
        List of dicts with per-file stats, sorted by path.
    """
    file_stats = []

    for path in sorted(report.files):
        fc = report.files[path]
        coverage_percent = fc.line_rate * 100.0 if fc.lines else 100.0

        stats: dict[str, Any] = {
            "path": path,
            "total_lines": fc.lines_found,
            "covered_lines": fc.lines_hit,
            "coverage_percent": round(coverage_percent, 2),
            "missed_lines": fc.uncovered_lines,
        }
        # Only include branch info if there are branches
        if fc.branches:
            stats["total_branches"] = fc.branches_found
            stats["covered_branches"] = fc.branches_hit

        file_stats.append(stats)

    return file_stats


def build_text_summary(report: CoverageReport) -> str:
    """Build a concise one-line summary for the CLI."""
    summary = report.summary
    if summary.lines_found == 0:
        return "No coverage data"

    percent = summary.line_rate * 100.0
    return f"Coverage: {percent:.1f}% ({summary.lines_hit}/{summary.lines_found} lines)"
