"""
Reductions — агрегатные функции над flat stream

Простые reductions: sum, average, min, max.
Специализированные: harmonic mean, geometric mean, индекс экстремума.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Суммирование через math.fsum: результат точно округлён и не зависит от
   порядка слагаемых (детерминизм при любом parallel hint)
2. Суммы следуют IEEE-семантике: переполнение → ±inf, inf + (-inf) → nan
3. Count и сумма вычисляются по одному материализованному списку
4. Пустой вход → DomainError (кроме sum, где результат 0.0)

ФОРМУЛЫ:
    harmonic_mean  = n / Σ(1/x_i)          x_i ≠ 0, Σ(1/x_i) ≠ 0
    geometric_mean = exp(Σ ln(x_i) / n)    x_i > 0
"""

import math
from typing import Sequence

from agentmath.core.domain.term import Number, as_float
from agentmath.core.errors import DomainError
from agentmath.core.math.numerical_safeguards import (
    ieee_fsum,
    validate_non_empty,
    validate_non_zero,
    validate_positive,
)


# =============================================================================
# ПРОСТЫЕ REDUCTIONS
# =============================================================================


def _widened(values: Sequence[Number]) -> list[float]:
    return [as_float(value) for value in values]


def total(values: Sequence[Number]) -> float:
    """
    Точно округлённая сумма.

    Examples:
        >>> total([0.1] * 10)
        1.0
        >>> total([])
        0.0
        >>> total([1e308, 1e308])
        inf
    """
    return ieee_fsum(_widened(values))


def average(values: Sequence[Number], action: str | None = None) -> float:
    """
    Арифметическое среднее.

    Raises:
        DomainError: если values пустой

    Examples:
        >>> average([1, 2, 3, 4])
        2.5
    """
    validate_non_empty(values, action)
    return ieee_fsum(_widened(values)) / len(values)


def minimum(values: Sequence[Number], action: str | None = None) -> float:
    """Минимум (как float)."""
    validate_non_empty(values, action)
    return as_float(min(values))


def maximum(values: Sequence[Number], action: str | None = None) -> float:
    """Максимум (как float)."""
    validate_non_empty(values, action)
    return as_float(max(values))


# =============================================================================
# СРЕДНИЕ
# =============================================================================


def harmonic_mean(values: Sequence[Number], action: str | None = None) -> float:
    """
    Гармоническое среднее n / Σ(1/x_i).

    n — длина именно того списка, по которому считается сумма обратных.

    Raises:
        DomainError: если values пустой, содержит 0 или Σ(1/x_i) == 0

    Examples:
        >>> harmonic_mean([150, 50])
        75.0
    """
    validate_non_empty(values, action)
    for value in values:
        validate_non_zero(value, "harmonic mean value", action)
    reciprocal_sum = ieee_fsum([1.0 / value for value in _widened(values)])
    if reciprocal_sum == 0:
        raise DomainError("sum of reciprocals is zero", action)
    return len(values) / reciprocal_sum


def geometric_mean(values: Sequence[Number], action: str | None = None) -> float:
    """
    Геометрическое среднее через среднее логарифмов.

    Произведение не вычисляется напрямую: exp(mean(ln x)) устойчиво
    к переполнению на длинных входах.

    Raises:
        DomainError: если values пустой или содержит x ≤ 0

    Examples:
        >>> round(geometric_mean([1.05, 1.03, 0.94, 1.02, 1.04]), 12)
        1.015213952203
    """
    validate_non_empty(values, action)
    for value in values:
        validate_positive(value, "geometric mean value", action)
    mean_log = ieee_fsum([math.log(value) for value in _widened(values)]) / len(values)
    return math.exp(mean_log)


# =============================================================================
# ИНДЕКС ЭКСТРЕМУМА
# =============================================================================


def max_index(values: Sequence[Number], action: str | None = None) -> int:
    """
    Позиция первого максимума (zero-based).

    Examples:
        >>> max_index([3, 4, 9, 1, 7, 9])
        2
    """
    validate_non_empty(values, action)
    best = 0
    for index in range(1, len(values)):
        if values[index] > values[best]:
            best = index
    return best


def min_index(values: Sequence[Number], action: str | None = None) -> int:
    """
    Позиция первого минимума (zero-based).

    Examples:
        >>> min_index([3, 4, 9, 1, 7, 1])
        3
    """
    validate_non_empty(values, action)
    best = 0
    for index in range(1, len(values)):
        if values[index] < values[best]:
            best = index
    return best
