"""Errors raised by the open-closed linter."""


class OpenClosedLinterError(Exception):
    """Base class for linter errors."""


class RuleContractError(OpenClosedLinterError):
    """A rule reached a state its own logic should have made impossible."""


class RegistryEntryMissingError(OpenClosedLinterError):
    """The rule registry has no usable entry for a rule code."""

    def __init__(self, rule_code: str) -> None:
        super().__init__(f"No message_template in rule registry for {rule_code}")
        self.rule_code = rule_code
