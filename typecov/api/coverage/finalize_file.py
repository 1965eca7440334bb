"""Fold a per-file report into its aggregate report."""

from .FileReport import FileReport
from .Report import Report


def finalize_file(report: Report, per_file: FileReport | None) -> None:
    """Add ``per_file``'s counts to ``report`` and list it if it has incidents.

    Files without incidents still contribute their counts to the aggregate
    stats but are left out of ``report.files``.
    """
    if per_file is None:
        return

    per_file.stats.done()
    report.stats.add(per_file.stats)
    if per_file.incidents:
        report.files.append(per_file)
