"""Incident record."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Incident:
    """One position whose type resolved to the unknown sentinel."""

    name: str
    start: int
    end: int
    text: str
