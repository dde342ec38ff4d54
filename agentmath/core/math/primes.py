"""
Primes — простые числа в 64-битном домене

is_prime: детерминированный Miller-Rabin (набор оснований, точный для n < 3.3·10^24)
next_prime: наименьшее простое ≥ n
prime_factors: пробное деление малыми делителями, затем Pollard rho (Brent)

Аргументы вне int64 → DomainError до начала вычислений.
"""

import math
from itertools import count
from typing import Final

from agentmath.core.math.numerical_safeguards import (
    check_int64,
    validate_int64_input,
    validate_non_negative,
)

# Основания Miller-Rabin, детерминированные для всех n < 3.3·10^24
_MILLER_RABIN_BASES: Final[tuple[int, ...]] = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)

_SMALL_PRIMES: Final[tuple[int, ...]] = _MILLER_RABIN_BASES

# Граница пробного деления перед Pollard rho
_TRIAL_DIVISION_LIMIT: Final[int] = 1000

# Размер пачки умножений между вычислениями gcd в Pollard-Brent
_RHO_BATCH: Final[int] = 128


def is_prime(n: int, action: str | None = None) -> bool:
    """
    Проверка простоты.

    Для n < 2 (включая отрицательные) возвращает False.

    Raises:
        DomainError: если n вне int64

    Examples:
        >>> [is_prime(n) for n in (-2, 0, 1, 2, 9, 49, 97)]
        [False, False, False, True, False, False, True]
    """
    validate_int64_input(n, "n", action)
    return _is_probable_prime(n)


def _is_probable_prime(n: int) -> bool:
    if n < 2:
        return False
    for p in _SMALL_PRIMES:
        if n % p == 0:
            return n == p

    # n - 1 = d · 2^s
    d = n - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1

    for a in _MILLER_RABIN_BASES:
        x = pow(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(s - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


def next_prime(n: int, action: str | None = None) -> int:
    """
    Наименьшее простое число ≥ n.

    Raises:
        DomainError: если n < 0, n вне int64 или результат не помещается в int64

    Examples:
        >>> [next_prime(n) for n in (0, 2, 9, 111, 889)]
        [2, 2, 11, 113, 907]
    """
    validate_int64_input(n, "n", action)
    validate_non_negative(n, "n", action)
    if n <= 2:
        return 2
    candidate = n if n % 2 else n + 1
    while not _is_probable_prime(candidate):
        candidate += 2
    return check_int64(candidate, "next prime", action)


def _pollard_brent(n: int) -> int:
    """Нетривиальный делитель нечётного составного n без малых множителей."""
    for c in count(1):
        y, r, q, g = 2, 1, 1, 1
        x = ys = y
        while g == 1:
            x = y
            for _ in range(r):
                y = (y * y + c) % n
            k = 0
            while k < r and g == 1:
                ys = y
                for _ in range(min(_RHO_BATCH, r - k)):
                    y = (y * y + c) % n
                    q = q * abs(x - y) % n
                g = math.gcd(q, n)
                k += _RHO_BATCH
            r *= 2
        if g == n:
            # пачка проскочила делитель: повтор по одному шагу
            g = 1
            while g == 1:
                ys = (ys * ys + c) % n
                g = math.gcd(abs(x - ys), n)
        if g != n:
            return g


def prime_factors(n: int, action: str | None = None) -> list[int]:
    """
    Простые множители n по возрастанию, с кратностью.

    Для n < 2 разложение пустое.

    Raises:
        DomainError: если n < 0 или n вне int64

    Examples:
        >>> prime_factors(120)
        [2, 2, 2, 3, 5]
        >>> prime_factors(1)
        []
        >>> prime_factors(4611686014132420609)
        [2147483647, 2147483647]
    """
    validate_int64_input(n, "n", action)
    validate_non_negative(n, "n", action)
    factors = []
    while n % 2 == 0 and n > 1:
        factors.append(2)
        n //= 2
    divisor = 3
    while divisor < _TRIAL_DIVISION_LIMIT and divisor * divisor <= n:
        while n % divisor == 0:
            factors.append(divisor)
            n //= divisor
        divisor += 2

    # остаток не имеет множителей меньше _TRIAL_DIVISION_LIMIT
    pending = [n] if n > 1 else []
    while pending:
        m = pending.pop()
        if _is_probable_prime(m):
            factors.append(m)
        else:
            d = _pollard_brent(m)
            pending.extend((d, m // d))
    return sorted(factors)
