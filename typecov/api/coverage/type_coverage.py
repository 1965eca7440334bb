"""Compute type coverage for a program."""

import logging
from pathlib import Path

from ._CoverageWalker import _CoverageWalker
from ._Sinks import _Sinks
from .Breakdown import Breakdown
from .build_document import build_document
from .CoverageConfig import CoverageConfig
from .finalize_file import finalize_file
from .finalize_report import finalize_report
from .Program import Program
from .Report import Report
from .Stats import Stats
from .TypeOracle import TypeOracle
from .write_document import write_document

logger = logging.getLogger(__name__)


def type_coverage(
    program: Program,
    oracle: TypeOracle,
    coverage_file: Path | None = None,
    config: CoverageConfig | None = None,
) -> Stats:
    """Score every type-bearing position of the program's root files.

    Declaration files and root names without a parsed file are skipped.
    Incident-level detail is only collected when ``coverage_file`` is given,
    in which case the full report is written there.

    Args:
        program: Parsed program providing root files
        oracle: Type oracle answering type, symbol and signature queries
        coverage_file: Optional path of the JSON report to write
        config: Coverage options, defaults when omitted

    Returns:
        Overall identifier coverage stats, finalized

    Raises:
        RuntimeError: If the report cannot be written
    """
    config = config or CoverageConfig()
    overall = Stats()
    reports = {breakdown: Report() for breakdown in Breakdown}
    walker = _CoverageWalker(
        oracle,
        reports,
        overall,
        sentinel=config.sentinel,
        snippet_length=config.snippet_length,
    )

    for filename in program.root_file_names():
        source_file = program.get_source_file(filename)
        if source_file is None:
            logger.debug("Skipping %s: not part of the program", filename)
            continue
        if source_file.is_declaration_file:
            logger.debug("Skipping %s: declaration file", filename)
            continue

        sinks = _Sinks.for_file(filename) if coverage_file is not None else None
        logger.debug("Walking %s", filename)
        walker.walk(source_file.root, sinks)

        if sinks is not None:
            finalize_file(reports[Breakdown.IDENTIFIERS], sinks.identifiers)
            finalize_file(reports[Breakdown.PARAMETERS], sinks.parameters)
            finalize_file(reports[Breakdown.RETURNS], sinks.returns)

    for report in reports.values():
        finalize_report(report)
    overall.done()

    logger.info(
        "Type coverage %.2f%% (%d of %d identifiers known)",
        overall.percentage,
        overall.known_count,
        overall.total_count,
    )

    if coverage_file is not None:
        write_document(build_document(overall, reports), Path(coverage_file), indent=config.indent)

    return overall
