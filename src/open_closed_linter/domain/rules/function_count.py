"""Function count rule (W9201): too many function declarations in one module."""

from collections.abc import Mapping
from typing import TYPE_CHECKING

import astroid

from open_closed_linter.domain.constants import CODE_TOO_MANY_FUNCTIONS, FUNCTION_COUNT_RULE_NAME
from open_closed_linter.domain.registry_types import RuleRegistryEntry
from open_closed_linter.domain.rule_msgs import RuleMsgBuilder
from open_closed_linter.domain.rules import Checkable, Violation

if TYPE_CHECKING:
    from open_closed_linter.domain.config import ConfigurationLoader

_FUNCTION_NODES = (astroid.nodes.FunctionDef, astroid.nodes.AsyncFunctionDef)


class FunctionCountRule(Checkable):
    """Rule for W9201: report a module with an excessive function count."""

    code: str = CODE_TOO_MANY_FUNCTIONS
    description: str = "This rule reports a file with an excessive function count."

    def __init__(
        self,
        config_loader: "ConfigurationLoader",
        registry: Mapping[str, RuleRegistryEntry],
    ) -> None:
        self._config_loader = config_loader
        self._template = RuleMsgBuilder.get_template(registry, self.code)

    @property
    def threshold(self) -> int:
        return self._config_loader.max_functions_per_file

    def check(self, node: astroid.nodes.NodeNG) -> list[Violation]:
        if not isinstance(node, astroid.nodes.Module):
            return []
        amount = self.count_functions(node, 0)
        if amount <= self.threshold:
            return []
        name = self._module_label(node)
        args = (name, str(amount), str(self.threshold))
        return [
            Violation.from_node(
                code=self.code,
                message=self._template % args,
                node=node,
                rule_name=FUNCTION_COUNT_RULE_NAME,
                message_args=args,
            )
        ]

    def count_functions(self, node: astroid.nodes.NodeNG, amount: int) -> int:
        """Count named functions under node, added to amount.

        A function's own body is not descended into: nested helpers do not count.
        Methods count, since class bodies are walked.
        """
        for child in node.get_children():
            if isinstance(child, _FUNCTION_NODES):
                amount += 1
                continue
            amount = self.count_functions(child, amount)
        return amount

    def _module_label(self, module: astroid.nodes.Module) -> str:
        # in-memory modules (stdin, editor buffers) carry a placeholder such as "<?>"
        path = getattr(module, "file", None)
        if path and not str(path).startswith("<"):
            return str(path).replace("\\", "/").rsplit("/", 1)[-1]
        return module.name or "<module>"
