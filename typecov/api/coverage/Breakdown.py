"""Breakdown enum naming the accounting categories."""

from enum import Enum


class Breakdown(str, Enum):
    IDENTIFIERS = "identifiers"
    DECLARATIONS = "declarations"
    PARAMETERS = "parameters"
    RETURNS = "returns"
