"""Per-file report sinks handed to the walker."""

from dataclasses import dataclass

from .FileReport import FileReport


@dataclass(frozen=True)
class _Sinks:
    """Per-file reports receiving incidents for the file being walked."""

    identifiers: FileReport
    parameters: FileReport
    returns: FileReport

    @classmethod
    def for_file(cls, filename: str) -> "_Sinks":
        return cls(
            identifiers=FileReport(filename),
            parameters=FileReport(filename),
            returns=FileReport(filename),
        )
