"""Shared pytest configuration and fixtures for all tests."""

from __future__ import annotations

from typing import Any

import pytest

from typecov.api.coverage.Program import Program
from typecov.api.coverage.SourceFile import SourceFile
from typecov.api.coverage.TypeOracle import TypeOracle


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Fake syntax trees
# =============================================================================


class FakeNode:
    """Minimal stand-in for a tree-sitter node.

    Leaves carry ``text``; ``layout_tree`` joins leaf texts with single spaces
    and assigns byte offsets, so an inner node's text is the source slice it spans.
    """

    def __init__(
        self,
        type: str,
        *children: FakeNode,
        text: str | None = None,
        field: str | None = None,
        named: bool = True,
        extra: bool = False,
    ):
        self.type = type
        self.children = list(children)
        self.leaf_text = text
        self.field = field
        self.is_named = named
        self.is_extra = extra
        self.parent: FakeNode | None = None
        self.start_byte = 0
        self.end_byte = 0
        self.text: bytes | None = None

    @property
    def prev_sibling(self) -> FakeNode | None:
        if self.parent is None:
            return None
        siblings = self.parent.children
        index = next(i for i, sibling in enumerate(siblings) if sibling is self)
        return siblings[index - 1] if index > 0 else None

    def child_by_field_name(self, name: str) -> FakeNode | None:
        for child in self.children:
            if child.field == name:
                return child
        return None

    def __repr__(self) -> str:
        return f"FakeNode({self.type!r}, {self.text!r})"


def layout_tree(root: FakeNode) -> FakeNode:
    """Assign parents, offsets and text to every node under ``root``."""
    leaves: list[str] = []
    position = 0

    def place(node: FakeNode, parent: FakeNode | None) -> None:
        nonlocal position
        node.parent = parent
        if node.leaf_text is not None:
            if leaves:
                position += 1
            node.start_byte = position
            position += len(node.leaf_text)
            node.end_byte = position
            leaves.append(node.leaf_text)
            return
        for child in node.children:
            place(child, node)
        if node.children:
            node.start_byte = node.children[0].start_byte
            node.end_byte = node.children[-1].end_byte
        else:
            node.start_byte = node.end_byte = position

    place(root, None)
    source = " ".join(leaves).encode("utf-8")

    stack = [root]
    while stack:
        node = stack.pop()
        node.text = source[node.start_byte : node.end_byte]
        stack.extend(node.children)
    return root


def fake_text(node: Any) -> str:
    return node.text.decode("utf-8") if node.text is not None else ""


# =============================================================================
# Fake oracle and program
# =============================================================================


class FakeOracle(TypeOracle):
    """Oracle answering from dicts keyed by node text.

    - ``types``: identifier / parameter text -> printed type
    - ``returns``: function name (or full text when unnamed) -> printed return type
    - ``declared``: import name -> printed declared type
    - annotations denote the type written after the colon
    - ``unsigned``: function names whose signature cannot be resolved
    """

    def __init__(
        self,
        types: dict[str, str] | None = None,
        returns: dict[str, str] | None = None,
        declared: dict[str, str] | None = None,
        unsigned: set[str] | None = None,
    ):
        self.types = types or {}
        self.returns = returns or {}
        self.declared = declared or {}
        self.unsigned = unsigned or set()
        self.calls: list[tuple[str, str]] = []

    def _function_key(self, node: Any) -> str:
        name = node.child_by_field_name("name")
        return fake_text(name) if name is not None else fake_text(node)

    def type_at(self, node):
        self.calls.append(("type_at", fake_text(node)))
        return self.types.get(fake_text(node))

    def type_to_string(self, type_):
        return type_

    def symbol_at(self, node):
        self.calls.append(("symbol_at", fake_text(node)))
        text = fake_text(node)
        return text if text in self.declared else None

    def declared_type_of(self, symbol):
        return self.declared.get(symbol)

    def signature_of(self, declaration):
        if self._function_key(declaration) in self.unsigned:
            return None
        return declaration

    def return_type_of(self, signature):
        return self.returns.get(self._function_key(signature))

    def type_from_annotation(self, annotation):
        self.calls.append(("type_from_annotation", fake_text(annotation)))
        return fake_text(annotation).lstrip(":").strip() or None


class FakeProgram(Program):
    """Program over prebuilt source files."""

    def __init__(self, files: list[SourceFile], roots: list[str] | None = None):
        self.files = {source_file.filename: source_file for source_file in files}
        self.roots = roots if roots is not None else [source_file.filename for source_file in files]

    def root_file_names(self):
        return list(self.roots)

    def get_source_file(self, filename):
        return self.files.get(filename)


@pytest.fixture
def make_node():
    """Constructor for fake syntax nodes."""
    return FakeNode


@pytest.fixture
def make_tree():
    """Lay out a fake syntax tree and return its root."""
    return layout_tree


@pytest.fixture
def make_oracle():
    """Constructor for the dict-backed fake oracle."""
    return FakeOracle


@pytest.fixture
def make_program():
    """Constructor for a program over prebuilt source files."""
    return FakeProgram


@pytest.fixture
def sample_source(make_node, make_tree):
    """``function add(a: number, b) { return a }`` as a fake tree.

    Oracle answers for it come from ``sample_oracle``.
    """
    N = make_node
    root = N(
        "program",
        N(
            "function_declaration",
            N("function", text="function", named=False),
            N("identifier", text="add", field="name"),
            N(
                "formal_parameters",
                N("(", text="(", named=False),
                N(
                    "required_parameter",
                    N("identifier", text="a", field="pattern"),
                    N("type_annotation", N(":", text=":", named=False), N("predefined_type", text="number"), field="type"),
                ),
                N(",", text=",", named=False),
                N("required_parameter", N("identifier", text="b", field="pattern")),
                N(")", text=")", named=False),
                field="parameters",
            ),
            N(
                "statement_block",
                N("{", text="{", named=False),
                N("return_statement", N("return", text="return", named=False), N("identifier", text="a")),
                N("}", text="}", named=False),
                field="body",
            ),
        ),
    )
    return make_tree(root)


@pytest.fixture
def sample_oracle(make_oracle):
    """Oracle where ``a`` is a number, ``b`` is any and ``add`` returns any."""
    return make_oracle(types={"a": "number", "b": "any"}, returns={"add": "any"})
