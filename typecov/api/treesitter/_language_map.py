"""Language inference for root files."""

from __future__ import annotations

from pathlib import PurePath

_EXTENSION_TO_LANGUAGE: dict[str, str] = {
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".jsx": "javascript",
}

_DECLARATION_SUFFIXES: tuple[str, ...] = (".d.ts", ".d.mts", ".d.cts")


def resolve_language(filename: str, explicit: str | None = None) -> str:
    """Resolve a tree-sitter language from an explicit choice or the file extension."""
    if explicit is not None:
        if not isinstance(explicit, str) or not explicit.strip():
            raise ValueError("language must be a non-empty string when provided.")
        return explicit.strip()

    extension = PurePath(filename).suffix.lower()
    if extension in _EXTENSION_TO_LANGUAGE:
        return _EXTENSION_TO_LANGUAGE[extension]

    raise ValueError(
        f"Cannot infer a tree-sitter language for {filename!r} "
        f"(extension={extension!r}, expected one of {sorted(_EXTENSION_TO_LANGUAGE)})"
    )


def is_declaration_file(filename: str) -> bool:
    """Return True for declaration-only files such as ``*.d.ts``."""
    return PurePath(filename).name.lower().endswith(_DECLARATION_SUFFIXES)


__all__ = ["is_declaration_file", "resolve_language"]
