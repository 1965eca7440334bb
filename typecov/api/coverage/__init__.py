"""Coverage module - type coverage computation."""

from .Breakdown import Breakdown
from .build_document import build_document
from .classify_node import classify_node
from .CoverageConfig import CoverageConfig
from .CoverageConfigError import CoverageConfigError
from .CoverageDocument import CoverageDocument
from .FileReport import FileReport
from .finalize_file import finalize_file
from .finalize_report import finalize_report
from .Incident import Incident
from .NodeKind import NodeKind
from .Program import Program
from .Report import Report
from .SourceFile import SourceFile
from .Stats import Stats
from .type_coverage import type_coverage
from .TypeOracle import TypeOracle
from .write_document import write_document

__all__ = [
    "Breakdown",
    "CoverageConfig",
    "CoverageConfigError",
    "CoverageDocument",
    "FileReport",
    "Incident",
    "NodeKind",
    "Program",
    "Report",
    "SourceFile",
    "Stats",
    "TypeOracle",
    "build_document",
    "classify_node",
    "finalize_file",
    "finalize_report",
    "type_coverage",
    "write_document",
]
