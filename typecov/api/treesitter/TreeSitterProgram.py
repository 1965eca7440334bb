"""Program backed by tree-sitter parses of files on disk."""

from __future__ import annotations

import logging
from pathlib import Path

from ..coverage.CoverageConfig import CoverageConfig
from ..coverage.Program import Program
from ..coverage.SourceFile import SourceFile
from ._language_map import is_declaration_file, resolve_language
from ._language_registry import get_parser_for_language

logger = logging.getLogger(__name__)


class TreeSitterProgram(Program):
    """Root files read from disk and parsed lazily, one parse per file.

    Relative names are resolved against ``base_dir`` (the current directory
    when omitted). Names that do not exist on disk are not part of the program.
    """

    def __init__(self, root_file_names: list[str], *, base_dir: Path | None = None, language: str | None = None):
        self._root_file_names = list(root_file_names)
        self._base_dir = Path(base_dir) if base_dir is not None else Path.cwd()
        self._language = language
        self._cache: dict[str, SourceFile] = {}

    @classmethod
    def from_config(
        cls, root_file_names: list[str], config: CoverageConfig, *, base_dir: Path | None = None
    ) -> "TreeSitterProgram":
        """Build a program parsing every root file with ``config.language`` (inferred when unset)."""
        return cls(root_file_names, base_dir=base_dir, language=config.language)

    def root_file_names(self) -> list[str]:
        return list(self._root_file_names)

    def get_source_file(self, filename: str) -> SourceFile | None:
        """Parse ``filename`` on first access.

        Raises:
            ValueError: If no language can be resolved for the file
            RuntimeError: If the file cannot be read or parsed
        """
        if filename in self._cache:
            return self._cache[filename]

        path = Path(filename)
        if not path.is_absolute():
            path = self._base_dir / path
        if not path.is_file():
            return None

        declaration = is_declaration_file(filename)
        language = resolve_language(filename, self._language)
        parser = get_parser_for_language(language)

        try:
            source_bytes = path.read_bytes()
        except OSError as exc:
            raise RuntimeError(f"Failed to read source file {path}: {exc}") from exc

        try:
            tree = parser.parse(source_bytes)
        except Exception as exc:
            raise RuntimeError(f"Tree-sitter parse failed for {path}: {exc}") from exc

        if tree.root_node.has_error:
            logger.warning("Syntax errors in %s; coverage may be incomplete", path)
        logger.debug("Parsed %s as %s", path, language)

        source_file = SourceFile(filename=filename, root=tree.root_node, is_declaration_file=declaration)
        self._cache[filename] = source_file
        return source_file
