"""
Contract Validation Module

Модуль для валидации JSON контрактов на границе с хостом-интерпретатором.
"""

from .validators import (
    ACTION_INVOCATION,
    ACTION_SPEC,
    CONTRACTS,
    TERM,
    contract_errors,
    contract_validator,
    load_schema,
    validate_action_invocation,
    validate_action_spec,
    validate_term,
)

__all__ = [
    # Contract names
    "TERM",
    "ACTION_INVOCATION",
    "ACTION_SPEC",
    "CONTRACTS",
    # Functions
    "load_schema",
    "contract_validator",
    "contract_errors",
    "validate_term",
    "validate_action_invocation",
    "validate_action_spec",
]
