"""Per-file coverage report."""

from dataclasses import dataclass, field

from .Incident import Incident
from .Stats import Stats


@dataclass
class FileReport:
    """Stats and incidents of one source file for one breakdown."""

    filename: str
    stats: Stats = field(default_factory=Stats)
    incidents: list[Incident] = field(default_factory=list)
