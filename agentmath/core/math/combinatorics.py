"""
Combinatorics — целочисленные комбинаторные функции

Factorial, binomial coefficient, Stirling numbers of the second kind.
Все результаты — int в 64-битном домене.

ФОРМУЛЫ:
    n! = 1 · 2 · … · n,                          0! = 1
    C(n, k) = n! / (k! (n-k)!),                  C(n, k) = 0 при k > n
    S(0, 0) = 1
    S(n, 0) = 0                                  n > 0
    S(n, k) = 0                                  k > n
    S(n, k) = k · S(n-1, k) + S(n-1, k-1)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Отрицательные n или k → DomainError
2. Аргументы и результат вне int64 → DomainError
3. Переполнение обнаруживается по ходу вычисления, а не после него:
   промежуточные значения никогда не выходят далеко за int64
"""

from typing import Final

from agentmath.core.errors import DomainError
from agentmath.core.math.numerical_safeguards import (
    check_int64,
    validate_int64_input,
    validate_non_negative,
)

# 20! = 2432902008176640000 — наибольший факториал в int64
MAX_FACTORIAL_ARGUMENT: Final[int] = 20


def _validate_arguments(n: int, k: int, action: str | None) -> None:
    validate_int64_input(n, "n", action)
    validate_int64_input(k, "k", action)
    validate_non_negative(n, "n", action)
    validate_non_negative(k, "k", action)


def factorial(n: int, action: str | None = None) -> int:
    """
    Факториал n!.

    Raises:
        DomainError: если n < 0 или n! не помещается в int64 (n > 20)

    Examples:
        >>> factorial(5)
        120
        >>> factorial(0)
        1
    """
    validate_non_negative(n, "n", action)
    if n > MAX_FACTORIAL_ARGUMENT:
        raise DomainError(f"{n}! overflows a 64-bit integer", action)
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def binomial(n: int, k: int, action: str | None = None) -> int:
    """
    Биномиальный коэффициент C(n, k).

    Мультипликативная формула по min(k, n-k) шагам. После i шагов
    результат равен C(n, i), а C(n, i) растёт по i вплоть до n/2,
    поэтому переполнение на любом шаге означает переполнение итога.

    Raises:
        DomainError: если n < 0, k < 0 или результат не помещается в int64

    Examples:
        >>> binomial(49, 30)
        18851684897584
        >>> binomial(6, 5)
        6
        >>> binomial(3, 5)
        0
    """
    _validate_arguments(n, k, action)
    if k > n:
        return 0
    name = f"C({n}, {k})"
    result = 1
    for i in range(min(k, n - k)):
        result = result * (n - i) // (i + 1)
        check_int64(result, name, action)
    return result


def stirling_s2(n: int, k: int, action: str | None = None) -> int:
    """
    Число Стирлинга второго рода S(n, k).

    Количество разбиений n помеченных элементов на k непустых
    непомеченных групп. Вычисляется построчно по рекуррентному
    соотношению, но только в полосе k - (n - i) ≤ j ≤ k: лишь эти
    S(i, j) влияют на S(n, k), и для каждого из них S(n, k) ≥ S(i, j).
    Поэтому первое же значение полосы вне int64 означает переполнение
    результата, и вычисление останавливается.

    Raises:
        DomainError: если n < 0, k < 0 или результат не помещается в int64

    Examples:
        >>> stirling_s2(3, 2)
        3
        >>> stirling_s2(8, 3)
        966
        >>> stirling_s2(0, 0), stirling_s2(4, 0), stirling_s2(2, 5)
        (1, 0, 0)
        >>> stirling_s2(100, 99)
        4950
    """
    _validate_arguments(n, k, action)

    if k > n:
        return 0
    if k == 0:
        return 1 if n == 0 else 0
    if k == n or k == 1:
        return 1
    if k == n - 1:
        # единственная пара в одной группе
        return binomial(n, 2, action)

    gap = n - k
    name = f"S({n}, {k})"
    # row[j] = S(i, j) для j в полосе строки i
    row = {1: 1}
    for i in range(2, n + 1):
        next_row = {}
        for j in range(max(1, i - gap), min(i, k) + 1):
            value = j * row.get(j, 0) + row.get(j - 1, 0)
            next_row[j] = check_int64(value, name, action)
        row = next_row

    return row[k]
