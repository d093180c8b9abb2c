"""Domain models for rules and violations."""

from dataclasses import dataclass

__all__ = [
    "Checkable",
    "Violation",
]

from typing import Optional, Protocol

import astroid

from open_closed_linter.domain.constants import REMEDIATION_MINUTES, SEVERITY_CODE_SMELL

Span = tuple[int, int, Optional[int], Optional[int]]


@dataclass(frozen=True)
class Violation:
    """A rule violation: what was found, where, and what fixing it costs."""

    code: str
    message: str
    location: str
    node: astroid.nodes.NodeNG
    rule_name: str = ""
    severity: str = SEVERITY_CODE_SMELL
    remediation_minutes: int = REMEDIATION_MINUTES
    span: Optional[Span] = None
    """(lineno, col_offset, end_lineno, end_col_offset) of the whole reported construct."""
    message_args: tuple[str, ...] | None = None
    """Args for Pylint add_message, matching the registry message_template."""

    @staticmethod
    def _location_from_node(node: astroid.nodes.NodeNG) -> str:
        """Compute path:lineno:col_offset from an astroid node. Used by from_node."""
        root = node.root()
        path = getattr(root, "file", "") or ""
        lineno = getattr(node, "lineno", 0)
        col_offset = getattr(node, "col_offset", 0)
        return f"{path}:{lineno}:{col_offset}"

    @staticmethod
    def _span_from_node(node: astroid.nodes.NodeNG) -> Span:
        return (
            getattr(node, "lineno", 0) or 0,
            getattr(node, "col_offset", 0) or 0,
            getattr(node, "end_lineno", None),
            getattr(node, "end_col_offset", None),
        )

    @classmethod
    def from_node(
        cls,
        *,
        code: str,
        message: str,
        node: astroid.nodes.NodeNG,
        rule_name: str = "",
        message_args: tuple[str, ...] | None = None,
    ) -> "Violation":
        """Build a Violation with location and span derived from node."""
        return cls(
            code=code,
            message=message,
            location=cls._location_from_node(node),
            node=node,
            rule_name=rule_name,
            span=cls._span_from_node(node),
            message_args=message_args,
        )


class Checkable(Protocol):
    """One-and-done check: given a node, return violations."""

    code: str
    description: str

    def check(self, node: astroid.nodes.NodeNG) -> list[Violation]:
        """Interrogate a node for a design breach."""
        ...
