"""Value objects describing dispatch constructs and the verdicts reached on them."""

from dataclasses import dataclass, field
from typing import Literal, Optional, Union

import astroid

TypeTestKind = Literal["isinstance", "type-compare", "class-pattern"]
DispatchKind = Literal["match", "if-chain"]


@dataclass(frozen=True)
class SemanticType:
    """Resolved type of an expression."""

    name: str
    qname: str
    is_enum: bool = False


@dataclass(frozen=True)
class TypeTest:
    """An explicit 'is instance of T' test, as a call/compare or as a class pattern."""

    kind: TypeTestKind
    type_names: tuple[str, ...]
    node: astroid.nodes.NodeNG = field(compare=False, repr=False)


@dataclass(frozen=True)
class DispatchBranch:
    """One arm of a dispatch construct.

    ``conditions`` holds the type tests found in the arm's own test (case
    pattern and guard, or the if/elif test). ``type_tests`` holds every type
    test in the arm, body included, in source order.
    """

    conditions: tuple[TypeTest, ...] = ()
    type_tests: tuple[TypeTest, ...] = ()

    @property
    def has_single_type_test(self) -> bool:
        return len(self.conditions) == 1


@dataclass(frozen=True)
class DispatchExpression:
    """A match statement or an if/elif chain."""

    kind: DispatchKind
    node: astroid.nodes.NodeNG = field(compare=False, repr=False)
    subject: Optional[astroid.nodes.NodeNG] = field(default=None, compare=False, repr=False)
    branches: tuple[DispatchBranch, ...] = ()

    @property
    def tally(self) -> int:
        """Branches discriminated by exactly one type test."""
        return sum(1 for branch in self.branches if branch.has_single_type_test)

    @property
    def total(self) -> int:
        return len(self.branches)

    def tested_type_names(self) -> list[str]:
        """Every tested type name across all branches, left to right, duplicates kept."""
        names: list[str] = []
        for branch in self.branches:
            for test in branch.type_tests:
                names.extend(test.type_names)
        return names


@dataclass(frozen=True)
class EnumDiscrimination:
    enum_name: str


@dataclass(frozen=True)
class TypeCheckDiscrimination:
    type_names: tuple[str, ...]


Verdict = Optional[Union[EnumDiscrimination, TypeCheckDiscrimination]]
