"""Rendering of the final run report."""

from typing import Any

from stress_test.models.report import RunReport


def render_summary(report: RunReport) -> str:
    """Render a human-readable report, one line per non-200 status code."""
    lines = [
        "Test Report",
        "-------------------",
        f"Total execution time: {report.elapsed:.3f}s",
        f"Total number of requests made: {report.completed}",
        f"Number of requests with HTTP status 200: {report.succeeded}",
        "Distribution of other HTTP status codes:",
    ]
    lines.extend(
        f"Status {status}: {count} requests"
        for status, count in sorted(report.status_counts.items())
    )
    return "\n".join(lines)


def format_output(report: RunReport) -> dict[str, Any]:
    """Format the report for JSON output."""
    return {
        "elapsed": report.elapsed,
        "total": report.completed,
        "succeeded": report.succeeded,
        "status_counts": {
            str(status): count for status, count in sorted(report.status_counts.items())
        },
    }
