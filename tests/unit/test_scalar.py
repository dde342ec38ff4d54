"""
Тесты для Scalar — float-функции с IEEE-семантикой

Проверяет:
1. Совпадение с эталонной библиотекой math в области определения
2. NaN/±Inf вне области определения (без исключений)
3. Round half-up, signum
4. Параметризованные sigmoid и pow
"""

import math

import pytest

from agentmath.core.math import scalar
from agentmath.core.math.numerical_safeguards import is_close

# Эталонный набор входов (смешанные int/float, вне и внутри областей определения)
INPUTS = [-2, -6, 4, -1, -5, 3, 49, 30, 6, 5, 1.3, 2.8, 9.7, 1, 8, 180, math.pi]


def guarded(function):
    """Эталон: math-функция, вне области определения → NaN."""

    def apply(x):
        try:
            return function(x)
        except ValueError:
            return math.nan

    return apply


REFERENCE = {
    "abs": abs,
    "acos": guarded(math.acos),
    "asin": guarded(math.asin),
    "atan": math.atan,
    "ceil": lambda x: float(math.ceil(x)),
    "cos": math.cos,
    "cosh": math.cosh,
    "degrees": math.degrees,
    "exp": math.exp,
    "floor": lambda x: float(math.floor(x)),
    "log": guarded(math.log),
    "log10": guarded(math.log10),
    "radians": math.radians,
    "signum": lambda x: math.copysign(1.0, x) if x else 0.0,
    "sin": math.sin,
    "sinh": math.sinh,
    "sqrt": guarded(math.sqrt),
    "tan": math.tan,
    "tanh": math.tanh,
}


# =============================================================================
# ТЕСТЫ: таблица float-функций
# =============================================================================


class TestFloatFunctions:
    """Сравнение FLOAT_FUNCTIONS с эталоном."""

    def test_table_complete(self):
        assert set(scalar.FLOAT_FUNCTIONS) == set(REFERENCE)

    @pytest.mark.parametrize("name", sorted(REFERENCE))
    def test_matches_reference(self, name):
        function = scalar.FLOAT_FUNCTIONS[name]
        for x in INPUTS:
            result = function(float(x))
            expected = REFERENCE[name](float(x))
            assert type(result) is float
            assert is_close(result, expected), f"{name}({x}) = {result}, expected {expected}"


class TestIEEESemantics:
    """Выход за область определения не выбрасывает исключений."""

    def test_nan_results(self):
        assert math.isnan(scalar.acos(2.0))
        assert math.isnan(scalar.asin(-2.0))
        assert math.isnan(scalar.sqrt(-1.0))
        assert math.isnan(scalar.log(-1.0))

    def test_infinite_results(self):
        assert scalar.log(0.0) == -math.inf
        assert scalar.log10(0.0) == -math.inf
        assert scalar.exp(1000.0) == math.inf
        assert scalar.cosh(1000.0) == math.inf

    def test_nan_propagates(self):
        assert math.isnan(scalar.sin(math.nan))


# =============================================================================
# ТЕСТЫ: округление
# =============================================================================


class TestRoundHalfUp:
    """Тесты round_half_up."""

    @pytest.mark.parametrize(
        "value,expected",
        [(2.5, 3), (-2.5, -2), (1.3, 1), (2.8, 3), (9.7, 10), (math.pi, 3), (-0.5, 0), (0.49999, 0),
         (0.49999999999999994, 0), (-0.5000000000000001, -1), (2.0**52 + 1, 2**52 + 1), (-(2.0**52) - 1, -(2**52) - 1)],
    )
    def test_values(self, value, expected):
        result = scalar.round_half_up(value)
        assert result == expected
        assert type(result) is int

    def test_non_finite_passed_through(self):
        assert math.isnan(scalar.round_half_up(math.nan))
        assert scalar.round_half_up(math.inf) == math.inf


# =============================================================================
# ТЕСТЫ: параметризованные функции
# =============================================================================


class TestParameterizedFunctions:
    """Тесты sigmoid и power."""

    def test_sigmoid_midpoint(self):
        assert scalar.sigmoid(1.0, 1.0, 1.0, 0.0) == 0.5

    def test_sigmoid_reference_values(self):
        assert is_close(scalar.sigmoid(1.0, 1.0, 1.0, 10.0), 0.9999546021312976)
        assert is_close(scalar.sigmoid(1.0, 1.0, 1.0, 20.0), 0.9999999979388463)
        assert is_close(scalar.sigmoid(1.0, 1.0, 1.0, 30.0), 0.9999999999999065)

    def test_sigmoid_scaled(self):
        """α масштабирует, β сдвигает асимптоту: α/β при t → ∞."""
        assert is_close(scalar.sigmoid(4.0, 2.0, 1.0, 100.0), 2.0)

    def test_sigmoid_zero_denominator(self):
        """β + e^(−γt) == 0 → ±inf, без исключения."""
        assert scalar.sigmoid(1.0, -1.0, 1.0, 0.0) == math.inf

    def test_power(self):
        assert scalar.power(2.0, 3.0) == 9.0
        assert scalar.power(2.0, 4.0) == 16.0
        assert scalar.power(2.0, 0.5) == 0.25

    def test_power_invalid(self):
        """Отрицательное основание в дробной степени → NaN."""
        assert math.isnan(scalar.power(0.5, -4.0))

    def test_hypot(self):
        assert scalar.hypot(3.0, 4.0) == 5.0
        assert scalar.hypot(-5.0, 12.0) == 13.0
