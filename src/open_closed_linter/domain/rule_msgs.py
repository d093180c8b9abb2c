"""Turns rule registry entries into pylint msgs and message templates."""

from collections.abc import Iterable, Mapping
from typing import Optional, cast

from open_closed_linter.domain.constants import RULE_PREFIX
from open_closed_linter.domain.exceptions import RegistryEntryMissingError
from open_closed_linter.domain.registry_types import RuleRegistryEntry

MsgTuple = tuple[str, str, str]


class RuleMsgBuilder:
    """Stateless lookups over a registry mapping keyed ``ocp.<code>``."""

    @staticmethod
    def get_entry(
        registry: Mapping[str, RuleRegistryEntry], rule_code: str
    ) -> Optional[RuleRegistryEntry]:
        """Entry for a message code (W9101) or symbol (open-closed-enum-dispatch)."""
        direct = registry.get(RULE_PREFIX + rule_code)
        if isinstance(direct, dict):
            return cast(RuleRegistryEntry, dict(direct))
        ours = (
            entry for key, entry in registry.items()
            if key.startswith(RULE_PREFIX) and isinstance(entry, dict)
        )
        for entry in ours:
            if entry.get("symbol") == rule_code:
                return cast(RuleRegistryEntry, dict(entry))
        return None

    @staticmethod
    def get_template(registry: Mapping[str, RuleRegistryEntry], rule_code: str) -> str:
        entry = RuleMsgBuilder.get_entry(registry, rule_code)
        template = entry.get("message_template") if entry else None
        if not template:
            raise RegistryEntryMissingError(rule_code)
        return str(template)

    @staticmethod
    def to_msg_tuple(entry: RuleRegistryEntry, rule_code: str) -> MsgTuple:
        """(message_template, symbol, description) as pylint expects in ``msgs``."""
        title = entry.get("display_name") or entry.get("short_description") or rule_code
        instructions = entry.get("manual_instructions")
        description = f"{title}. {instructions}" if instructions else title
        return (
            str(entry["message_template"]),
            str(entry.get("symbol") or rule_code),
            str(description),
        )

    @staticmethod
    def build_msgs_for_codes(
        registry: Mapping[str, RuleRegistryEntry], codes: Iterable[str]
    ) -> dict[str, MsgTuple]:
        """Checker ``msgs`` for the given codes. Codes without a template are left out."""
        msgs: dict[str, MsgTuple] = {}
        for code in codes:
            entry = RuleMsgBuilder.get_entry(registry, code)
            if entry and entry.get("message_template"):
                msgs[code] = RuleMsgBuilder.to_msg_tuple(entry, code)
        return msgs
