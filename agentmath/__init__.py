"""
agentmath — numeric actions для интерпретатора agent-скриптов.

Каждый action принимает упорядоченные Terms (числа или вложенные
последовательности чисел), разворачивает их в плоский поток, группирует
(elementwise, парами, целиком) и добавляет результаты в output sink.
"""

from agentmath.actions import Action, ActionRegistry, RegistryConfig, build_math_registry
from agentmath.core.errors import (
    ActionError,
    ArityError,
    DomainError,
    TermTypeError,
    UnknownActionError,
)

__version__ = "0.1.0"

__all__ = [
    "Action",
    "ActionRegistry",
    "RegistryConfig",
    "build_math_registry",
    "ActionError",
    "ArityError",
    "DomainError",
    "TermTypeError",
    "UnknownActionError",
]
