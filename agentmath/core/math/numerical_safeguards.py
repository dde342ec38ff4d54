"""
Numerical Safeguards — IEEE-семантика и проверки численного домена

Модуль фиксирует две политики обработки численных ошибок:
- float-domain функции: IEEE-754 pass-through. NaN/±Inf возвращаются как
  результат, исключения не выбрасываются (acos(2) → nan, log(0) → -inf)
- int-domain функции: 64-битный целочисленный домен. Отрицательные аргументы
  и переполнение int64 → DomainError

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Float-функции никогда не выбрасывают ValueError/OverflowError
2. Целочисленные результаты всегда лежат в [INT64_MIN, INT64_MAX]
3. Float сравнения в тестах и проверках учитывают машинную точность
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Callable, Final, Sequence

import numpy as np

from agentmath.core.domain.term import INT64_MAX, INT64_MIN
from agentmath.core.errors import DomainError

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для is_close
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# IEEE PASS-THROUGH
# =============================================================================


def ieee_unary(ufunc: Callable[[float], object]) -> Callable[[float], float]:
    """
    Обёртка numpy ufunc с IEEE-семантикой для одного аргумента.

    numpy сообщает о invalid/overflow/divide через RuntimeWarning;
    внутри np.errstate они подавлены, значение NaN/Inf возвращается как есть.

    Args:
        ufunc: numpy ufunc (например, np.arccos)

    Returns:
        Функция float → float (Python float, не np.float64)

    Examples:
        >>> ieee_unary(np.sqrt)(4.0)
        2.0
        >>> math.isnan(ieee_unary(np.arccos)(2.0))
        True
    """

    def apply(value: float) -> float:
        with np.errstate(all="ignore"):
            return float(ufunc(np.float64(value)))

    apply.__name__ = getattr(ufunc, "__name__", "ieee_unary")
    return apply


def ieee_binary(
    ufunc: Callable[[float, float], object],
) -> Callable[[float, float], float]:
    """
    Обёртка numpy ufunc с IEEE-семантикой для двух аргументов.

    Examples:
        >>> ieee_binary(np.hypot)(3.0, 4.0)
        5.0
        >>> math.isnan(ieee_binary(np.power)(-8.0, 1.0 / 3.0))
        True
    """

    def apply(left: float, right: float) -> float:
        with np.errstate(all="ignore"):
            return float(ufunc(np.float64(left), np.float64(right)))

    apply.__name__ = getattr(ufunc, "__name__", "ieee_binary")
    return apply


# Масштаб для повторного суммирования после переполнения частичной суммы
_FSUM_DOWNSCALE: Final[float] = 2.0**-64
_FSUM_UPSCALE: Final[float] = 2.0**64


def ieee_fsum(values: Sequence[float]) -> float:
    """
    math.fsum с IEEE-семантикой вместо исключений.

    math.fsum выбрасывает OverflowError при переполнении промежуточной
    суммы и ValueError при inf + (-inf). Здесь:
    - переполнение → повторное суммирование в масштабе 2^-64, затем
      обратное умножение (итог ±inf только если переполнена точная сумма)
    - inf + (-inf) → nan

    values читается повторно, поэтому должен быть Sequence, не генератором.

    Examples:
        >>> ieee_fsum([1e308, 1e308])
        inf
        >>> ieee_fsum([1e308, 1e308, -1e308])
        1e+308
        >>> math.isnan(ieee_fsum([math.inf, -math.inf]))
        True
    """
    try:
        try:
            return math.fsum(values)
        except OverflowError:
            # float * float не выбрасывает исключений, переполнение даёт ±inf
            return math.fsum(v * _FSUM_DOWNSCALE for v in values) * _FSUM_UPSCALE
    except ValueError:
        return math.nan


# =============================================================================
# FLOAT ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Returns:
        True если значение finite
    """
    return math.isfinite(value)


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    NaN считается равным NaN (результаты IEEE pass-through сравнимы).

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(float('nan'), float('nan'))
        True
        >>> is_close(1.0, 1.1)
        False
    """
    if math.isnan(a) or math.isnan(b):
        return math.isnan(a) and math.isnan(b)
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# ВАЛИДАЦИЯ ДОМЕНА
# =============================================================================


def check_int64(value: int, name: str, action: str | None = None) -> int:
    """
    Проверка, что целочисленный результат помещается в int64.

    Raises:
        DomainError: если value вне [INT64_MIN, INT64_MAX]
    """
    if value < INT64_MIN or value > INT64_MAX:
        raise DomainError(f"{name} overflows a 64-bit integer", action)
    return value


def validate_int64_input(value: int, name: str, action: str | None = None) -> int:
    """
    Проверка, что целочисленный аргумент лежит в int64.

    Выполняется до вычисления: вход вне домена не должен запускать
    вычисления над большими целыми.

    Raises:
        DomainError: если value вне [INT64_MIN, INT64_MAX]
    """
    if value < INT64_MIN or value > INT64_MAX:
        raise DomainError(f"{name} is outside the 64-bit integer domain, got {value}", action)
    return value


def validate_non_negative(value: int, name: str, action: str | None = None) -> None:
    """
    Валидация, что целое значение неотрицательное.

    Raises:
        DomainError: если value < 0
    """
    if value < 0:
        raise DomainError(f"{name} must be non-negative, got {value}", action)


def validate_positive(value: float, name: str, action: str | None = None) -> None:
    """
    Валидация, что значение строго положительное (NaN отвергается).

    Raises:
        DomainError: если value <= 0 или NaN
    """
    if not value > 0:
        raise DomainError(f"{name} must be positive, got {value}", action)


def validate_non_zero(value: float, name: str, action: str | None = None) -> None:
    """
    Валидация, что значение ненулевое.

    Raises:
        DomainError: если value == 0
    """
    if value == 0:
        raise DomainError(f"{name} must be non-zero, got {value}", action)


def validate_non_empty(values: Sequence[float], action: str | None = None) -> None:
    """
    Валидация, что flat stream непустой.

    Raises:
        DomainError: если values пустой
    """
    if not values:
        raise DomainError("requires at least one numeric value", action)
