"""Open-closed principle checks (W9101, W9102)."""

from collections.abc import Mapping
from typing import TYPE_CHECKING

import astroid
from pylint.checkers import BaseChecker

if TYPE_CHECKING:
    from pylint.lint import PyLinter

from open_closed_linter.domain.config import ConfigurationLoader
from open_closed_linter.domain.protocols import TypeResolverProtocol
from open_closed_linter.domain.registry_types import RuleRegistryEntry
from open_closed_linter.domain.rule_msgs import RuleMsgBuilder
from open_closed_linter.domain.rules import Violation
from open_closed_linter.domain.rules.open_closed import OpenClosedRule


class OpenClosedChecker(BaseChecker):
    """Dispatch on enums and type checks. Thin: delegates to OpenClosedRule.

    Pylint's walker visits every node depth-first, so match statements and
    if chains nested inside other dispatch branches are each checked.
    """

    name: str = "open-closed-principle"
    CODES = ["W9101", "W9102"]

    def __init__(
        self,
        linter: "PyLinter",
        type_resolver: TypeResolverProtocol,
        config_loader: ConfigurationLoader,
        registry: Mapping[str, RuleRegistryEntry],
    ) -> None:
        self.msgs = RuleMsgBuilder.build_msgs_for_codes(
            registry, self.CODES)  # type: ignore[assignment]
        super().__init__(linter)
        self._open_closed_rule = OpenClosedRule(
            resolver=type_resolver,
            config_loader=config_loader,
            registry=registry,
        )

    def visit_match(self, node: astroid.nodes.Match) -> None:
        self._emit(self._open_closed_rule.check(node))

    def visit_if(self, node: astroid.nodes.If) -> None:
        self._emit(self._open_closed_rule.check(node))

    def _emit(self, violations: list[Violation]) -> None:
        for v in violations:
            self.add_message(v.code, node=v.node, args=v.message_args or ())
