"""Classify a syntax node into a coverage category."""

from typing import Any

from ._syntax import (
    CATCH_CLAUSE,
    DECLARATION_NAME_PARENTS,
    FUNCTION_TYPES,
    IDENTIFIER_TYPES,
    METHOD_DEFINITION,
    PARAMETER_TYPES,
    is_accessor,
    is_constructor,
    is_parameter_position,
)
from .NodeKind import NodeKind


def _is_declaration_name(node: Any) -> bool:
    parent = node.parent
    if parent is None:
        return False
    if parent.type in DECLARATION_NAME_PARENTS:
        return True
    if parent.type == METHOD_DEFINITION:
        # The constructor keyword is a name token only in the tree-sitter grammars.
        return is_constructor(parent) and parent.child_by_field_name("name") == node
    return parent.type == CATCH_CLAUSE


def _is_function(node: Any) -> bool:
    if node.type not in FUNCTION_TYPES:
        return False
    if node.type == METHOD_DEFINITION:
        return not is_constructor(node) and not is_accessor(node)
    return True


def classify_node(node: Any) -> NodeKind:
    """Return the coverage category of a node.

    Rules are checked in order and the first match wins:

    1. identifier tokens, except the names of function and class declarations
       and the bound variable of a catch clause;
    2. methods, functions, arrow functions and function expressions
       (constructors and get/set accessors are not methods);
    3. parameters of a function-like signature.

    Anything else is ``NodeKind.NONE``. Anonymous tokens (keywords,
    punctuation) never match, even when their type string collides with a
    named node type such as ``function``.

    A bare parameter (``a`` in ``function f(a)`` in JavaScript, ``x`` in
    ``x => x``) is the declaration and its name token at once. It classifies
    as ``NodeKind.PARAMETER``; the walker scores its name as an identifier too.
    """
    if not node.is_named:
        return NodeKind.NONE

    if node.type in PARAMETER_TYPES or is_parameter_position(node):
        return NodeKind.PARAMETER
    if node.type in IDENTIFIER_TYPES:
        if _is_declaration_name(node):
            return NodeKind.NONE
        return NodeKind.IDENTIFIER
    if _is_function(node):
        return NodeKind.FUNCTION
    return NodeKind.NONE
