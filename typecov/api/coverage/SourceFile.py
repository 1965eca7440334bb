"""Parsed source file."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SourceFile:
    """A parsed file of a program."""

    filename: str
    root: Any
    is_declaration_file: bool = False
