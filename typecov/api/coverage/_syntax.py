"""Tree-sitter node kinds and span/text helpers used by coverage."""

from __future__ import annotations

from typing import Any

IDENTIFIER_TYPES: frozenset[str] = frozenset(
    {
        "identifier",
        "property_identifier",
        "shorthand_property_identifier",
        "shorthand_property_identifier_pattern",
        "type_identifier",
        "private_property_identifier",
        "statement_identifier",
    }
)

# Identifiers directly under these nodes name the declaration itself.
DECLARATION_NAME_PARENTS: frozenset[str] = frozenset(
    {
        "function_declaration",
        "generator_function_declaration",
        "class_declaration",
        "abstract_class_declaration",
    }
)

CATCH_CLAUSE = "catch_clause"
IMPORT_SPECIFIER = "import_specifier"

FUNCTION_TYPES: frozenset[str] = frozenset(
    {
        "method_definition",
        "function_declaration",
        "generator_function_declaration",
        "arrow_function",
        "function_expression",
        "function",
        "generator_function",
    }
)

PARAMETER_TYPES: frozenset[str] = frozenset({"required_parameter", "optional_parameter"})

# Bare parameters sit directly under these (JavaScript lists, single arrow parameter).
FORMAL_PARAMETERS = "formal_parameters"
ARROW_FUNCTION = "arrow_function"

METHOD_DEFINITION = "method_definition"
ACCESSOR_KEYWORDS: frozenset[str] = frozenset({"get", "set"})
CONSTRUCTOR_NAME = "constructor"

# Node types usable as a label; computed and private names fall back to "unknown".
LABEL_TYPES: frozenset[str] = frozenset({"identifier", "property_identifier"})

UNKNOWN_LABEL = "unknown"


def node_text(node: Any) -> str:
    """Return the source text of a node."""
    text = node.text
    if text is None:
        return ""
    if isinstance(text, bytes):
        return text.decode("utf-8", errors="replace")
    return str(text)


def full_start(node: Any) -> int:
    """Return the start offset of a node including its leading trivia.

    Leading trivia begins where the previous non-extra token ends; a node
    without a previous sibling shares the full start of its parent.
    """
    current = node
    while current is not None:
        sibling = current.prev_sibling
        while sibling is not None and sibling.is_extra:
            sibling = sibling.prev_sibling
        if sibling is not None:
            return sibling.end_byte
        current = current.parent
    return 0


def label_of(node: Any, field_name: str) -> str:
    """Return the text of ``node``'s ``field_name`` child when it is a plain name."""
    child = node.child_by_field_name(field_name)
    if child is not None and child.type in LABEL_TYPES:
        return node_text(child)
    return UNKNOWN_LABEL


def import_local_name(specifier: Any) -> Any:
    """Return the node binding the local name of an import specifier."""
    alias = specifier.child_by_field_name("alias")
    if alias is not None:
        return alias
    return specifier.child_by_field_name("name")


def is_parameter_position(node: Any) -> bool:
    """Return True for a parameter declared without a wrapping parameter node."""
    parent = node.parent
    if parent is None or node.is_extra:
        return False
    if parent.type == FORMAL_PARAMETERS:
        return node.type not in PARAMETER_TYPES
    if parent.type == ARROW_FUNCTION:
        return parent.child_by_field_name("parameter") == node
    return False


def binding_name(parameter: Any) -> Any | None:
    """Return the identifier bound by a parameter, or None for destructuring."""
    node = parameter
    if node.type in PARAMETER_TYPES:
        node = node.child_by_field_name("pattern")
    while node is not None:
        if node.type in LABEL_TYPES:
            return node
        if node.type == "rest_pattern":
            node = next((child for child in node.children if child.is_named), None)
        elif node.type == "assignment_pattern":
            node = node.child_by_field_name("left")
        else:
            return None
    return None


def is_constructor(method: Any) -> bool:
    name = method.child_by_field_name("name")
    return name is not None and node_text(name) == CONSTRUCTOR_NAME


def is_accessor(method: Any) -> bool:
    return any(not child.is_named and child.type in ACCESSOR_KEYWORDS for child in method.children)
