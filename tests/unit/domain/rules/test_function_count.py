"""Unit tests for FunctionCountRule (W9201)."""

import unittest

import astroid

from open_closed_linter.domain.rules.function_count import FunctionCountRule
from tests.unit.checker_test_utils import make_config, packaged_registry


class TestFunctionCountRule(unittest.TestCase):
    def _rule(self, **config) -> FunctionCountRule:
        return FunctionCountRule(config_loader=make_config(**config), registry=packaged_registry())

    def test_count_includes_methods_and_async_but_not_nested_helpers(self) -> None:
        module = astroid.parse(
            """
            def outer():
                def helper():
                    pass
                return helper

            async def fetch():
                pass

            class Service:
                def run(self):
                    pass

                @property
                def name(self):
                    return "svc"

            square = lambda x: x * x
            """
        )

        self.assertEqual(self._rule().count_functions(module, 0), 4)

    def test_count_adds_to_the_given_amount(self) -> None:
        module = astroid.parse("def a():\n    pass\n")

        self.assertEqual(self._rule().count_functions(module, 5), 6)

    def test_reports_when_over_threshold(self) -> None:
        module = astroid.parse("def a():\n    pass\n\ndef b():\n    pass\n", path="pkg/shapes.py")
        violations = self._rule().check(module)

        self.assertEqual(len(violations), 1)
        self.assertEqual(violations[0].code, "W9201")
        self.assertEqual(
            violations[0].message,
            "The file shapes.py has 2 function declarations. Threshold is specified with 1.",
        )
        self.assertEqual(violations[0].rule_name, "TooManyFunctions")

    def test_threshold_is_inclusive(self) -> None:
        module = astroid.parse("def a():\n    pass\n")

        self.assertEqual(self._rule().check(module), [])

    def test_threshold_from_config(self) -> None:
        module = astroid.parse("def a():\n    pass\n\ndef b():\n    pass\n")

        self.assertEqual(self._rule(max_functions_per_file=2).check(module), [])

    def test_only_modules_are_checked(self) -> None:
        node = astroid.extract_node("def a():\n    pass\n")

        self.assertEqual(self._rule().check(node), [])

    def test_module_without_file_uses_module_name(self) -> None:
        module = astroid.parse("def a():\n    pass\n\ndef b():\n    pass\n", module_name="pkg.shapes")

        self.assertEqual(self._rule().check(module)[0].message_args, ("pkg.shapes", "2", "1"))

    def test_unnamed_in_memory_module_has_placeholder_label(self) -> None:
        module = astroid.parse("def a():\n    pass\n\ndef b():\n    pass\n")

        self.assertEqual(self._rule().check(module)[0].message_args, ("<module>", "2", "1"))
