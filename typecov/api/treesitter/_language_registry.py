"""Tree-sitter language registry."""

from __future__ import annotations

import importlib

from tree_sitter import Language, Parser

# Canonical language name -> (module, distribution, factory returning the grammar pointer)
_LANGUAGE_SOURCES: dict[str, tuple[str, str, str]] = {
    "typescript": ("tree_sitter_typescript", "tree-sitter-typescript", "language_typescript"),
    "tsx": ("tree_sitter_typescript", "tree-sitter-typescript", "language_tsx"),
    "javascript": ("tree_sitter_javascript", "tree-sitter-javascript", "language"),
}

_CACHE: dict[str, Language] = {}


class UnsupportedTreeSitterLanguageError(ValueError):
    """Raised when a requested tree-sitter language is unavailable."""


def _load_language(language: str) -> Language:
    cached = _CACHE.get(language)
    if cached is not None:
        return cached

    try:
        module_name, distribution, factory_name = _LANGUAGE_SOURCES[language]
    except KeyError:
        raise UnsupportedTreeSitterLanguageError(
            f"Unsupported tree-sitter language: {language!r} (expected one of {sorted(_LANGUAGE_SOURCES)})"
        ) from None

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ImportError(
            f"Grammar for '{language}' needs the '{module_name}' module. Install it with: pip install {distribution}"
        ) from exc

    # Grammar packages hand out a raw pointer; Language wraps it.
    _CACHE[language] = Language(getattr(module, factory_name)())
    return _CACHE[language]


def get_parser_for_language(language: str) -> Parser:
    """Return a parser for one of the supported languages."""
    return Parser(_load_language(language))


def supported_languages() -> tuple[str, ...]:
    return tuple(_LANGUAGE_SOURCES)
