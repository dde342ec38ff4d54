"""
Term — модель аргументов и результатов action

Term — это либо Number (int/float), либо Sequence из Terms произвольной
вложенности. Дерево ацикличное, принадлежит вызывающей стороне и не
модифицируется во время исполнения action.

Правила расширения/сужения типов (widening):
- float-domain функции: каждый Number приводится через float(x)
- int-domain функции (комбинаторика, простые числа): усечение к нулю int(x)
- bool НЕ является Number (хотя в Python bool — подкласс int)
- str/bytes НЕ являются Sequence
"""

import math
from typing import Final, Sequence, Union

from agentmath.core.errors import DomainError, TermTypeError

# Number и Term в терминах Python типов
Number = Union[int, float]
Term = Union[int, float, Sequence["Term"]]

# Диапазон сужения int-domain аргументов (64-битное целое)
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1


# =============================================================================
# КЛАССИФИКАЦИЯ
# =============================================================================


def is_number(value: object) -> bool:
    """
    Проверка, является ли значение Number-листом.

    Examples:
        >>> is_number(1), is_number(2.5), is_number(True)
        (True, True, False)
    """
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float))


def is_sequence(value: object) -> bool:
    """
    Проверка, является ли значение Sequence-узлом (list/tuple).

    Examples:
        >>> is_sequence([1, 2]), is_sequence((1,)), is_sequence("12")
        (True, True, False)
    """
    return isinstance(value, (list, tuple))


def ensure_number(value: object, action: str | None = None) -> Number:
    """
    Проверка скалярного Term.

    Raises:
        TermTypeError: если value не Number (в том числе Sequence)
    """
    if not is_number(value):
        raise TermTypeError(
            f"expected a number, got {type(value).__name__}: {value!r}", action
        )
    return value  # type: ignore[return-value]


# =============================================================================
# WIDENING
# =============================================================================


def as_float(value: Number) -> float:
    """
    Расширение Number до float.

    int вне диапазона float даёт ±inf (IEEE), а не OverflowError.

    Examples:
        >>> as_float(3), as_float(-10**400)
        (3.0, -inf)
    """
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def as_int(value: Number, action: str | None = None) -> int:
    """
    Сужение Number до int с усечением к нулю.

    Args:
        value: Number
        action: имя action для сообщения об ошибке

    Returns:
        int(value), например 2.8 → 2, -2.8 → -2

    Raises:
        DomainError: если value NaN/Inf или вне int64
    """
    if isinstance(value, float) and not math.isfinite(value):
        raise DomainError(f"cannot narrow non-finite value {value} to int", action)
    narrowed = int(value)
    if narrowed < INT64_MIN or narrowed > INT64_MAX:
        raise DomainError(f"cannot narrow {value!r} to a 64-bit integer", action)
    return narrowed
