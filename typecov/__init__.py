"""Type coverage metrics for tree-sitter parsed programs."""

__version__ = "0.1.0"
