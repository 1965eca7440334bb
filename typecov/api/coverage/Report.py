"""Aggregate coverage report."""

from dataclasses import dataclass, field

from .FileReport import FileReport
from .Stats import Stats


@dataclass
class Report:
    """Stats summed over all processed files plus the files that had incidents."""

    stats: Stats = field(default_factory=Stats)
    files: list[FileReport] = field(default_factory=list)
