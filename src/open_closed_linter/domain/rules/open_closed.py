"""Open-closed principle rule (W9101, W9102).

Only the easiest cases are caught: dispatch on an enum subject and dispatch by
repeated type tests. Compound conditions inside branches are out of reach.

    match color:                  if isinstance(shape, Square):
        case Color.RED: ...           ...
        case Color.BLUE: ...      elif isinstance(shape, Circle):
                                      ...
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import astroid

from open_closed_linter.domain.constants import (
    CODE_ENUM_DISPATCH,
    CODE_TYPE_DISPATCH,
    OPEN_CLOSED_RULE_NAME,
)
from open_closed_linter.domain.dispatch import DispatchExtractor
from open_closed_linter.domain.entities import (
    DispatchExpression,
    EnumDiscrimination,
    SemanticType,
    TypeCheckDiscrimination,
    Verdict,
)
from open_closed_linter.domain.exceptions import RuleContractError
from open_closed_linter.domain.registry_types import RuleRegistryEntry
from open_closed_linter.domain.rule_msgs import RuleMsgBuilder
from open_closed_linter.domain.rules import Checkable, Violation

if TYPE_CHECKING:
    from open_closed_linter.domain.config import ConfigurationLoader
    from open_closed_linter.domain.protocols import TypeResolverProtocol


class DispatchClassifier:
    """Reaches one verdict per dispatch construct. Holds no per-file state."""

    def __init__(
        self,
        resolver: "TypeResolverProtocol",
        ignored_enums: frozenset[str] = frozenset(),
    ) -> None:
        self._resolver = resolver
        self._ignored_enums = ignored_enums

    def classify(self, expression: DispatchExpression) -> Verdict:
        if not self._resolver.is_available(expression.node.root()):
            return None
        enum_type = self.enum_subject_type(expression)
        if enum_type is not None:
            return EnumDiscrimination(enum_type.name)
        if self.is_type_check_dispatch(expression):
            return TypeCheckDiscrimination(tuple(expression.tested_type_names()))
        return None

    def enum_subject_type(self, expression: DispatchExpression) -> Optional[SemanticType]:
        """The subject's type when it is an enum, regardless of what the branches test."""
        if expression.subject is None:
            return None
        semantic_type = self._resolver.resolve_type(expression.subject)
        if semantic_type is None or not semantic_type.is_enum:
            return None
        if semantic_type.name in self._ignored_enums or semantic_type.qname in self._ignored_enums:
            return None
        return semantic_type

    def is_type_check_dispatch(self, expression: DispatchExpression) -> bool:
        # One branch without a type test is tolerated, usually the default arm.
        tally = expression.tally
        return tally > 0 and tally >= expression.total - 1


@dataclass(frozen=True)
class ComposedMessage:
    code: str
    text: str
    args: tuple[str, ...]


class OpenClosedMessageComposer:
    """Builds diagnostic text from a verdict using the registry's message templates."""

    def __init__(self, registry: Mapping[str, RuleRegistryEntry]) -> None:
        self._templates = {
            code: RuleMsgBuilder.get_template(registry, code)
            for code in (CODE_ENUM_DISPATCH, CODE_TYPE_DISPATCH)
        }

    def compose(self, verdict: Verdict) -> ComposedMessage:
        if isinstance(verdict, EnumDiscrimination):
            return self._render(CODE_ENUM_DISPATCH, f"`{verdict.enum_name}`")
        if isinstance(verdict, TypeCheckDiscrimination):
            if not verdict.type_names:
                raise RuleContractError(
                    "Type-check verdict carries no type names; tally and collection disagree."
                )
            return self._render(CODE_TYPE_DISPATCH, self.join_type_names(verdict.type_names))
        raise RuleContractError(f"No message for verdict {verdict!r}")

    @staticmethod
    def join_type_names(names: tuple[str, ...]) -> str:
        return ", ".join(f"`{name}`" for name in names)

    def _render(self, code: str, subject: str) -> ComposedMessage:
        args = (subject,)
        return ComposedMessage(code=code, text=self._templates[code] % args, args=args)


class OpenClosedRule(Checkable):
    """Rule for W9101 (enum dispatch) and W9102 (type-check dispatch)."""

    code: str = CODE_ENUM_DISPATCH
    codes: tuple[str, ...] = (CODE_ENUM_DISPATCH, CODE_TYPE_DISPATCH)
    description: str = (
        "Switching on enums and classes may be a sign of violating the open-closed principle."
    )

    def __init__(
        self,
        resolver: "TypeResolverProtocol",
        config_loader: "ConfigurationLoader",
        registry: Mapping[str, RuleRegistryEntry],
    ) -> None:
        self._config_loader = config_loader
        self._extractor = DispatchExtractor()
        self._classifier = DispatchClassifier(resolver, config_loader.ignored_enums)
        self._composer = OpenClosedMessageComposer(registry)

    @property
    def classifier(self) -> DispatchClassifier:
        return self._classifier

    def check(self, node: astroid.nodes.NodeNG) -> list[Violation]:
        """Check a Match or If node. Returns at most one violation."""
        expression = self._extractor.extract(node)
        if expression is None:
            return []
        return self.check_expression(expression)

    def check_module(self, module: astroid.nodes.Module) -> list[Violation]:
        """Check every dispatch construct in a module, nested ones included."""
        violations: list[Violation] = []
        for expression in self._extractor.iter_dispatch_expressions(module):
            violations.extend(self.check_expression(expression))
        return violations

    def check_expression(self, expression: DispatchExpression) -> list[Violation]:
        if not self._is_enabled(expression):
            return []
        verdict = self._classifier.classify(expression)
        if verdict is None:
            return []
        message = self._composer.compose(verdict)
        return [
            Violation.from_node(
                code=message.code,
                message=message.text,
                node=expression.node,
                rule_name=OPEN_CLOSED_RULE_NAME,
                message_args=message.args,
            )
        ]

    def _is_enabled(self, expression: DispatchExpression) -> bool:
        if expression.kind == "match":
            return self._config_loader.check_match_statements
        return self._config_loader.check_if_chains
