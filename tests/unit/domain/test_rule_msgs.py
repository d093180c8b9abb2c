"""Unit tests for RuleMsgBuilder."""

import unittest

from open_closed_linter.domain.exceptions import RegistryEntryMissingError
from open_closed_linter.domain.rule_msgs import RuleMsgBuilder

REGISTRY = {
    "ocp.W9101": {
        "symbol": "open-closed-enum-dispatch",
        "display_name": "Enum dispatch",
        "message_template": "Enum %s",
    },
    "ocp.W9102": {"symbol": "open-closed-type-dispatch"},
    "other.W9101": {"symbol": "not-ours", "message_template": "x"},
}


class TestRuleMsgBuilder(unittest.TestCase):
    def test_get_entry_by_code_and_symbol(self) -> None:
        by_code = RuleMsgBuilder.get_entry(REGISTRY, "W9101")
        by_symbol = RuleMsgBuilder.get_entry(REGISTRY, "open-closed-type-dispatch")

        self.assertEqual(by_code["symbol"], "open-closed-enum-dispatch")
        self.assertEqual(by_symbol, {"symbol": "open-closed-type-dispatch"})
        self.assertIsNone(RuleMsgBuilder.get_entry(REGISTRY, "not-ours"))

    def test_build_msgs_skips_entries_without_template(self) -> None:
        msgs = RuleMsgBuilder.build_msgs_for_codes(REGISTRY, ["W9101", "W9102", "W9999"])

        self.assertEqual(
            msgs, {"W9101": ("Enum %s", "open-closed-enum-dispatch", "Enum dispatch")}
        )

    def test_get_template_raises_when_missing(self) -> None:
        self.assertEqual(RuleMsgBuilder.get_template(REGISTRY, "W9101"), "Enum %s")
        with self.assertRaises(RegistryEntryMissingError) as ctx:
            RuleMsgBuilder.get_template(REGISTRY, "W9102")
        self.assertEqual(ctx.exception.rule_code, "W9102")

    def test_description_carries_manual_instructions(self) -> None:
        entry = {
            "symbol": "too-many-functions",
            "short_description": "Too many functions",
            "message_template": "%s",
            "manual_instructions": "Split the module.",
        }

        self.assertEqual(
            RuleMsgBuilder.to_msg_tuple(entry, "W9201"),
            ("%s", "too-many-functions", "Too many functions. Split the module."),
        )
