"""Assemble finalized reports into the persisted document."""

from .Breakdown import Breakdown
from .CoverageDocument import (
    BreakdownsOutput,
    CoverageDocument,
    FileReportOutput,
    IncidentOutput,
    ReportOutput,
    StatsOutput,
)
from .FileReport import FileReport
from .Report import Report
from .Stats import Stats


def _stats_output(stats: Stats) -> StatsOutput:
    return StatsOutput(
        known_count=stats.known_count,
        total_count=stats.total_count,
        percentage=stats.percentage,
    )


def _file_output(per_file: FileReport) -> FileReportOutput:
    return FileReportOutput(
        filename=per_file.filename,
        stats=_stats_output(per_file.stats),
        incidents=[
            IncidentOutput(name=incident.name, start=incident.start, end=incident.end, text=incident.text)
            for incident in per_file.incidents
        ],
    )


def _report_output(report: Report) -> ReportOutput:
    return ReportOutput(
        stats=_stats_output(report.stats),
        files=[_file_output(per_file) for per_file in report.files],
    )


def build_document(overall: Stats, reports: dict[Breakdown, Report]) -> CoverageDocument:
    """Build the output document from the overall stats and the four breakdown reports.

    Raises:
        KeyError: If one of the breakdown reports is missing
        pydantic.ValidationError: If a stats record violates known <= total
    """
    return CoverageDocument(
        stats=_stats_output(overall),
        breakdowns=BreakdownsOutput(
            identifiers=_report_output(reports[Breakdown.IDENTIFIERS]),
            declarations=_report_output(reports[Breakdown.DECLARATIONS]),
            parameters=_report_output(reports[Breakdown.PARAMETERS]),
            returns=_report_output(reports[Breakdown.RETURNS]),
        ),
    )
