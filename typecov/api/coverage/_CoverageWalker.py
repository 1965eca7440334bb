"""Traversal engine that scores every node of a syntax tree."""

from __future__ import annotations

from typing import Any

from ._Sinks import _Sinks
from ._syntax import (
    IDENTIFIER_TYPES,
    IMPORT_SPECIFIER,
    UNKNOWN_LABEL,
    binding_name,
    full_start,
    import_local_name,
    label_of,
    node_text,
)
from .Breakdown import Breakdown
from .classify_node import classify_node
from .FileReport import FileReport
from .Incident import Incident
from .NodeKind import NodeKind
from .Report import Report
from .Stats import Stats
from .TypeOracle import TypeOracle


class _CoverageWalker:
    """Walk syntax trees and fold oracle answers into coverage reports.

    Counts go into the per-file sink when one is given (``finalize_file``
    folds them into the aggregate later) and straight into the aggregate
    report otherwise. Identifier counts also feed the overall stats.
    """

    def __init__(
        self,
        oracle: TypeOracle,
        reports: dict[Breakdown, Report],
        overall: Stats,
        *,
        sentinel: str = "any",
        snippet_length: int = 40,
    ):
        self._oracle = oracle
        self._reports = reports
        self._overall = overall
        self._sentinel = sentinel
        self._snippet_length = snippet_length

    def walk(self, root: Any, sinks: _Sinks | None = None) -> None:
        """Visit every node under ``root`` once, in pre-order."""
        stack = [root]
        while stack:
            node = stack.pop()
            self._visit(node, sinks)
            stack.extend(reversed(node.children))

    def _visit(self, node: Any, sinks: _Sinks | None) -> None:
        kind = classify_node(node)
        if kind is NodeKind.IDENTIFIER:
            self._visit_identifier(node, sinks.identifiers if sinks else None)
        elif kind is NodeKind.FUNCTION:
            self._visit_function(node, sinks.returns if sinks else None)
        elif kind is NodeKind.PARAMETER:
            self._visit_parameter(node, sinks.parameters if sinks else None)
            if node.type in IDENTIFIER_TYPES:
                self._visit_identifier(node, sinks.identifiers if sinks else None)

    def _is_sentinel(self, type_: Any) -> bool:
        return self._oracle.type_to_string(type_) == self._sentinel

    def _stats_for(self, breakdown: Breakdown, sink: FileReport | None) -> Stats:
        if sink is not None:
            return sink.stats
        return self._reports[breakdown].stats

    def _visit_identifier(self, node: Any, sink: FileReport | None) -> None:
        type_ = self._oracle.type_at(node)
        if type_ is None:
            return

        unknown = self._is_sentinel(type_)
        parent = node.parent
        if unknown and parent is not None and parent.type == IMPORT_SPECIFIER:
            # Re-exports resolve to the sentinel directly; their declared type may not.
            local = import_local_name(parent)
            symbol = self._oracle.symbol_at(local) if local is not None else None
            if symbol is not None:
                declared = self._oracle.declared_type_of(symbol)
                if declared is not None:
                    unknown = self._is_sentinel(declared)

        stats = self._stats_for(Breakdown.IDENTIFIERS, sink)
        self._overall.total_count += 1
        stats.total_count += 1
        if not unknown:
            self._overall.known_count += 1
            stats.known_count += 1
        elif sink is not None:
            text = node_text(node)
            sink.incidents.append(
                Incident(
                    name=text,
                    start=full_start(node),
                    end=node.end_byte,
                    text=text[: self._snippet_length],
                )
            )

    def _visit_function(self, node: Any, sink: FileReport | None) -> None:
        signature = self._oracle.signature_of(node)
        if signature is None:
            return
        return_type = self._oracle.return_type_of(signature)
        if return_type is None:
            return

        stats = self._stats_for(Breakdown.RETURNS, sink)
        stats.total_count += 1
        if not self._is_sentinel(return_type):
            stats.known_count += 1
        elif sink is not None:
            sink.incidents.append(
                Incident(
                    name=label_of(node, "name"),
                    start=full_start(node),
                    end=node.end_byte,
                    text=node_text(node)[: self._snippet_length],
                )
            )

    def _visit_parameter(self, node: Any, sink: FileReport | None) -> None:
        """Score a parameter; bare parameters are their own name and carry no annotation."""
        stats = self._stats_for(Breakdown.PARAMETERS, sink)
        stats.total_count += 1

        annotation = node.child_by_field_name("type")
        if annotation is not None:
            type_ = self._oracle.type_from_annotation(annotation)
        else:
            type_ = self._oracle.type_at(node)

        if type_ is not None and not self._is_sentinel(type_):
            stats.known_count += 1
        elif sink is not None:
            name = binding_name(node)
            # Parameter snippets are never truncated.
            sink.incidents.append(
                Incident(
                    name=node_text(name) if name is not None else UNKNOWN_LABEL,
                    start=full_start(node),
                    end=node.end_byte,
                    text=node_text(node),
                )
            )
