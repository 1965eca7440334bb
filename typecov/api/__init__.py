"""API module for typecov.

Coverage computation lives in ``typecov.api.coverage``; the tree-sitter backed
program loader lives in ``typecov.api.treesitter``.
"""

__all__ = []
