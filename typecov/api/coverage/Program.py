"""Abstract interface for a parsed multi-file program."""

from abc import ABC, abstractmethod

from .SourceFile import SourceFile


class Program(ABC):
    """A set of parsed source files with an ordered list of root files."""

    @abstractmethod
    def root_file_names(self) -> list[str]:
        """Names of the files that make up the analysis unit, in order."""
        pass

    @abstractmethod
    def get_source_file(self, filename: str) -> SourceFile | None:
        """Parsed file for ``filename``, or None when it is not part of the program."""
        pass
