"""Tree-sitter module - parsing root files into a coverage program."""

from ._language_map import is_declaration_file, resolve_language
from ._language_registry import UnsupportedTreeSitterLanguageError, get_parser_for_language, supported_languages
from .TreeSitterProgram import TreeSitterProgram

__all__ = [
    "TreeSitterProgram",
    "UnsupportedTreeSitterLanguageError",
    "get_parser_for_language",
    "is_declaration_file",
    "resolve_language",
    "supported_languages",
]
