"""Locates dispatch constructs in an astroid tree and describes their branches."""

from collections.abc import Iterable, Iterator
from typing import Optional

import astroid

from open_closed_linter.domain.entities import DispatchBranch, DispatchExpression, TypeTest

_TYPE_TEST_NODES = (astroid.nodes.Call, astroid.nodes.Compare, astroid.nodes.MatchClass)
_TYPE_COMPARE_OPS = frozenset({"is", "=="})


class DispatchExtractor:
    """
    Turns astroid nodes into DispatchExpression values.

    Two shapes are dispatch constructs:
      match subject:            (subject form)
          case ...: ...
      if a: ... elif b: ...     (subject-less form, needs at least one elif)
    """

    def iter_dispatch_expressions(self, root: astroid.nodes.NodeNG) -> Iterator[DispatchExpression]:
        """Yield every dispatch construct under root, depth-first, nested ones included."""
        for node in root.nodes_of_class((astroid.nodes.Match, astroid.nodes.If)):
            expression = self.extract(node)
            if expression is not None:
                yield expression

    def extract(self, node: astroid.nodes.NodeNG) -> Optional[DispatchExpression]:
        if isinstance(node, astroid.nodes.Match):
            return self._from_match(node)
        if isinstance(node, astroid.nodes.If):
            return self._from_if_chain(node)
        return None

    def is_elif(self, node: astroid.nodes.If) -> bool:
        """True when node continues an enclosing if chain rather than starting one."""
        parent = node.parent
        return (
            isinstance(parent, astroid.nodes.If)
            and self._has_elif(parent)
            and parent.orelse[0] is node
        )

    def _from_match(self, node: astroid.nodes.Match) -> DispatchExpression:
        branches = tuple(self._case_branch(case) for case in node.cases)
        return DispatchExpression(
            kind="match", node=node, subject=node.subject, branches=branches
        )

    def _case_branch(self, case: astroid.nodes.MatchCase) -> DispatchBranch:
        conditions: list[astroid.nodes.NodeNG] = [case.pattern]
        if case.guard is not None:
            conditions.append(case.guard)
        return self._branch(conditions, case.body)

    def _from_if_chain(self, node: astroid.nodes.If) -> Optional[DispatchExpression]:
        if self.is_elif(node) or not self._has_elif(node):
            return None
        branches: list[DispatchBranch] = []
        current = node
        while True:
            branches.append(self._branch([current.test], current.body))
            if self._has_elif(current):
                current = current.orelse[0]
                continue
            if current.orelse:
                branches.append(self._branch([], current.orelse))
            break
        return DispatchExpression(kind="if-chain", node=node, branches=tuple(branches))

    def _has_elif(self, node: astroid.nodes.If) -> bool:
        """An elif arm starts at its chain's column; ``else:`` holding an ``if`` is indented."""
        if len(node.orelse) != 1:
            return False
        child = node.orelse[0]
        return isinstance(child, astroid.nodes.If) and child.col_offset == node.col_offset

    def _branch(
        self,
        conditions: list[astroid.nodes.NodeNG],
        body: list[astroid.nodes.NodeNG],
    ) -> DispatchBranch:
        condition_tests = tuple(self.find_type_tests(conditions))
        body_tests = tuple(self.find_type_tests(body))
        return DispatchBranch(
            conditions=condition_tests,
            type_tests=condition_tests + body_tests,
        )

    def find_type_tests(self, nodes: Iterable[astroid.nodes.NodeNG]) -> Iterator[TypeTest]:
        """Yield the type tests under the given nodes in source order."""
        for top in nodes:
            for candidate in top.nodes_of_class(_TYPE_TEST_NODES):
                test = self.as_type_test(candidate)
                if test is not None:
                    yield test

    def as_type_test(self, node: astroid.nodes.NodeNG) -> Optional[TypeTest]:
        if isinstance(node, astroid.nodes.MatchClass):
            return TypeTest(kind="class-pattern", type_names=(node.cls.as_string(),), node=node)
        if isinstance(node, astroid.nodes.Call):
            return self._isinstance_test(node)
        if isinstance(node, astroid.nodes.Compare):
            return self._type_compare_test(node)
        return None

    def _isinstance_test(self, node: astroid.nodes.Call) -> Optional[TypeTest]:
        if not self._calls_builtin(node, "isinstance") or len(node.args) != 2:
            return None
        classinfo = node.args[1]
        if isinstance(classinfo, astroid.nodes.Tuple):
            names = tuple(elt.as_string() for elt in classinfo.elts)
        else:
            names = (classinfo.as_string(),)
        return TypeTest(kind="isinstance", type_names=names, node=node)

    def _type_compare_test(self, node: astroid.nodes.Compare) -> Optional[TypeTest]:
        """type(x) is T, type(x) == T."""
        if len(node.ops) != 1:
            return None
        op, right = node.ops[0]
        if op not in _TYPE_COMPARE_OPS:
            return None
        left = node.left
        if not isinstance(left, astroid.nodes.Call) or not self._calls_builtin(left, "type"):
            return None
        if len(left.args) != 1:
            return None
        return TypeTest(kind="type-compare", type_names=(right.as_string(),), node=node)

    def _calls_builtin(self, node: astroid.nodes.Call, name: str) -> bool:
        func = node.func
        return isinstance(func, astroid.nodes.Name) and func.name == name
