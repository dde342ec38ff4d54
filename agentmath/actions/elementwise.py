"""Elementwise actions — f(x) для каждого элемента flat stream.

Float-domain: тригонометрия, экспонента/логарифмы, округление, знак.
Int-domain: isprime, nextprime, factorial, primefactors.

Результат i-го элемента зависит только от i-го входа, порядок сохраняется.
"""

from typing import Any, Callable, Final, Sequence

from agentmath.actions.base import Action
from agentmath.core.domain.action_spec import Discipline
from agentmath.core.domain.term import Number, Term, as_float, as_int
from agentmath.core.math import scalar
from agentmath.core.math.combinatorics import factorial
from agentmath.core.math.grouping import evaluate_elementwise
from agentmath.core.math.primes import is_prime, next_prime, prime_factors

# (value, action name) → результат
ElementFunction = Callable[[Number, str], Any]


class ElementwiseAction(Action):
    """Action, применяющий скалярную функцию к каждому элементу."""

    discipline = Discipline.ELEMENTWISE

    def __init__(
        self,
        name: str,
        function: ElementFunction,
        description: str = "",
        minimal_arguments: int = 1,
    ):
        super().__init__(name, minimal_arguments, description)
        self._function = function

    def evaluate(self, arguments: Sequence[Term], parallel: bool) -> list[Any]:
        return evaluate_elementwise(
            lambda value: self._function(value, self.name),
            arguments,
            self.name,
        )


# =============================================================================
# WIDENING ADAPTERS
# =============================================================================


def float_domain(function: Callable[[float], Any]) -> ElementFunction:
    """Адаптер float-функции: Number → float → function."""
    return lambda value, action: function(as_float(value))


def _is_prime(value: Number, action: str) -> bool:
    return is_prime(as_int(value, action), action)


def _next_prime(value: Number, action: str) -> int:
    return next_prime(as_int(value, action), action)


def _factorial(value: Number, action: str) -> int:
    return factorial(as_int(value, action), action)


def _prime_factors(value: Number, action: str) -> list[float]:
    # Производный Sequence: множители как float
    return [float(p) for p in prime_factors(as_int(value, action), action)]


# =============================================================================
# TABLE
# =============================================================================

ELEMENTWISE_FUNCTIONS: Final[dict[str, tuple[ElementFunction, str]]] = {
    **{
        short_name: (float_domain(function), f"{short_name}(x) for each value")
        for short_name, function in scalar.FLOAT_FUNCTIONS.items()
    },
    "round": (float_domain(scalar.round_half_up), "round half up to an integer"),
    "isprime": (_is_prime, "primality test of int(x)"),
    "nextprime": (_next_prime, "smallest prime >= int(x)"),
    "factorial": (_factorial, "int(x)! in the 64-bit domain"),
    "primefactors": (_prime_factors, "prime factors of int(x) with multiplicity"),
}
