"""
Domain models and value objects.

Contains the Term model with its widening rules and the ActionSpec contract.
"""

from agentmath.core.domain.action_spec import ActionSpec, Discipline
from agentmath.core.domain.term import (
    Number,
    Term,
    as_float,
    as_int,
    ensure_number,
    is_number,
    is_sequence,
)

__all__ = [
    # Term model
    "Number",
    "Term",
    "is_number",
    "is_sequence",
    "ensure_number",
    "as_float",
    "as_int",
    # Action spec
    "ActionSpec",
    "Discipline",
]
