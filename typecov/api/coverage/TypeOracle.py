"""Abstract interface for the semantic type oracle."""

from abc import ABC, abstractmethod
from typing import Any


class TypeOracle(ABC):
    """Resolves types, symbols and signatures for syntax nodes.

    Coverage never inspects types structurally: a type counts as unknown only
    when ``type_to_string`` prints it as the configured sentinel. Every
    resolver may return ``None`` when nothing can be resolved.
    """

    @abstractmethod
    def type_at(self, node: Any) -> Any | None:
        """Type of the expression or declaration at ``node``."""
        pass

    @abstractmethod
    def type_to_string(self, type_: Any) -> str:
        """Canonical printed form of a type."""
        pass

    @abstractmethod
    def symbol_at(self, node: Any) -> Any | None:
        """Symbol bound at ``node``."""
        pass

    @abstractmethod
    def declared_type_of(self, symbol: Any) -> Any | None:
        """Declared type of a symbol."""
        pass

    @abstractmethod
    def signature_of(self, declaration: Any) -> Any | None:
        """Call signature of a function-like declaration."""
        pass

    @abstractmethod
    def return_type_of(self, signature: Any) -> Any | None:
        """Return type of a call signature."""
        pass

    @abstractmethod
    def type_from_annotation(self, annotation: Any) -> Any | None:
        """Type denoted by an explicit type annotation node."""
        pass
