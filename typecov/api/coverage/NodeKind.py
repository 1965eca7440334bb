"""NodeKind enum for node classification."""

from enum import Enum


class NodeKind(str, Enum):
    IDENTIFIER = "identifier"
    FUNCTION = "function"
    PARAMETER = "parameter"
    NONE = "none"
