"""Ports the domain depends on. Implementations live in infrastructure."""

from typing import Optional, Protocol

import astroid

from open_closed_linter.domain.entities import SemanticType
from open_closed_linter.domain.registry_types import RuleRegistryEntry


class TypeResolverProtocol(Protocol):
    """Semantic binding context: resolves expressions to their types."""

    def is_available(self, module: astroid.nodes.Module) -> bool:
        """Return False when no type information exists for the whole module."""
        ...

    def resolve_type(self, node: astroid.nodes.NodeNG) -> Optional[SemanticType]:
        """Return the resolved type of an expression, or None if unknown."""
        ...


class GuidanceServiceProtocol(Protocol):
    """Protocol for the rule registry loader."""

    def get_registry(self) -> dict[str, RuleRegistryEntry]: ...
