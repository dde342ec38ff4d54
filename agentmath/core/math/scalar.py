"""
Scalar — скалярные float-функции с IEEE-семантикой

Все функции принимают float и возвращают float (round — int).
Выход за область определения не выбрасывает исключение, а даёт NaN/±Inf:
    acos(2) → nan, log(0) → -inf, sqrt(-1) → nan, cosh(1000) → inf
"""

import math
from typing import Callable, Final

import numpy as np

from agentmath.core.math.numerical_safeguards import ieee_binary, ieee_unary

# =============================================================================
# ТРИГОНОМЕТРИЯ И ГИПЕРБОЛИЧЕСКИЕ
# =============================================================================

sin = ieee_unary(np.sin)
cos = ieee_unary(np.cos)
tan = ieee_unary(np.tan)
asin = ieee_unary(np.arcsin)
acos = ieee_unary(np.arccos)
atan = ieee_unary(np.arctan)
sinh = ieee_unary(np.sinh)
cosh = ieee_unary(np.cosh)
tanh = ieee_unary(np.tanh)

degrees = ieee_unary(np.degrees)
radians = ieee_unary(np.radians)

# =============================================================================
# ЭКСПОНЕНТА, ЛОГАРИФМЫ, СТЕПЕНИ
# =============================================================================

exp = ieee_unary(np.exp)
log = ieee_unary(np.log)
log10 = ieee_unary(np.log10)
sqrt = ieee_unary(np.sqrt)

hypot = ieee_binary(np.hypot)
_power = ieee_binary(np.power)

# =============================================================================
# ЗНАК И ОКРУГЛЕНИЕ
# =============================================================================

absolute = ieee_unary(np.abs)
signum = ieee_unary(np.sign)
ceil = ieee_unary(np.ceil)
floor = ieee_unary(np.floor)


_divide = ieee_binary(np.divide)
_multiply = ieee_binary(np.multiply)
_add = ieee_binary(np.add)


def round_half_up(value: float) -> int | float:
    """
    Округление half-up до целого: floor(x), плюс 1 если дробная часть ≥ 0.5.

    Дробная часть x - floor(x) вычисляется точно, поэтому 0.49999999999999994
    даёт 0, а большие нечётные float (> 2^52) не сдвигаются.

    В отличие от встроенного round() (banker's rounding): 2.5 → 3, -2.5 → -2.
    NaN/±Inf возвращаются без изменений.

    Examples:
        >>> round_half_up(2.5), round_half_up(-2.5), round_half_up(1.3)
        (3, -2, 1)
    """
    if not math.isfinite(value):
        return value
    whole = math.floor(value)
    return whole + (1 if value - whole >= 0.5 else 0)


def power(exponent: float, base: float) -> float:
    """
    base ** exponent с IEEE-семантикой (параметр идёт первым).

    Examples:
        >>> power(2.0, 3.0), power(2.0, 0.5)
        (9.0, 0.25)
    """
    return _power(base, exponent)


def sigmoid(alpha: float, beta: float, gamma: float, t: float) -> float:
    """
    Параметризованная сигмоида α / (β + e^(−γ·t)).

    Examples:
        >>> sigmoid(1.0, 1.0, 1.0, 0.0)
        0.5
    """
    return _divide(alpha, _add(beta, exp(_multiply(-gamma, t))))


# Таблица float-функций для elementwise actions
FLOAT_FUNCTIONS: Final[dict[str, Callable[[float], float]]] = {
    "abs": absolute,
    "acos": acos,
    "asin": asin,
    "atan": atan,
    "ceil": ceil,
    "cos": cos,
    "cosh": cosh,
    "degrees": degrees,
    "exp": exp,
    "floor": floor,
    "log": log,
    "log10": log10,
    "radians": radians,
    "signum": signum,
    "sin": sin,
    "sinh": sinh,
    "sqrt": sqrt,
    "tan": tan,
    "tanh": tanh,
}
