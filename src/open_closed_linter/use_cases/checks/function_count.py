"""Function count check (W9201)."""

from collections.abc import Mapping
from typing import TYPE_CHECKING

import astroid
from pylint.checkers import BaseChecker

if TYPE_CHECKING:
    from pylint.lint import PyLinter

from open_closed_linter.domain.config import ConfigurationLoader
from open_closed_linter.domain.registry_types import RuleRegistryEntry
from open_closed_linter.domain.rule_msgs import RuleMsgBuilder
from open_closed_linter.domain.rules.function_count import FunctionCountRule


class FunctionCountChecker(BaseChecker):
    """Too many function declarations in one module. Thin: delegates to FunctionCountRule."""

    name: str = "open-closed-function-count"
    CODES = ["W9201"]

    def __init__(
        self,
        linter: "PyLinter",
        config_loader: ConfigurationLoader,
        registry: Mapping[str, RuleRegistryEntry],
    ) -> None:
        self.msgs = RuleMsgBuilder.build_msgs_for_codes(
            registry, self.CODES)  # type: ignore[assignment]
        super().__init__(linter)
        self._function_count_rule = FunctionCountRule(
            config_loader=config_loader,
            registry=registry,
        )

    def visit_module(self, node: astroid.nodes.Module) -> None:
        for v in self._function_count_rule.check(node):
            self.add_message(v.code, node=v.node, args=v.message_args or ())
