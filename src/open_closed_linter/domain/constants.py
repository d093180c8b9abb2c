"""
Rule identity and fixed bookkeeping for the open-closed checks.
"""

RULE_PREFIX: str = "ocp."

OPEN_CLOSED_RULE_NAME: str = "OpenClosedPrinciple"
FUNCTION_COUNT_RULE_NAME: str = "TooManyFunctions"

CODE_ENUM_DISPATCH: str = "W9101"
CODE_TYPE_DISPATCH: str = "W9102"
CODE_TOO_MANY_FUNCTIONS: str = "W9201"

SEVERITY_CODE_SMELL: str = "code smell"
REMEDIATION_MINUTES: int = 20

ENUM_BASE_QNAME: str = "enum.Enum"

# Upper bound on named function declarations per module before W9201 fires.
DEFAULT_MAX_FUNCTIONS_PER_FILE: int = 1
