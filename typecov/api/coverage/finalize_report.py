"""Finalize an aggregate report."""

from .Report import Report


def finalize_report(report: Report) -> None:
    """Compute the aggregate percentage and rank files by gap, worst first.

    ``list.sort`` is stable, so files with equal gaps keep traversal order.
    """
    report.stats.done()
    report.files.sort(key=lambda per_file: per_file.stats.gap(), reverse=True)
