"""Shape of one entry in resources/rule_registry.yaml."""

from typing import TypedDict


class RuleRegistryEntry(TypedDict, total=False):
    symbol: str
    display_name: str
    short_description: str
    # printf-style, one %s per pylint message arg
    message_template: str
    # appended to the description pylint shows for --help-msg
    manual_instructions: str
