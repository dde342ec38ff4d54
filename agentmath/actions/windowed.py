"""Windowed actions — g(a, b) для каждой непересекающейся пары flat stream.

hypot(a, b), stirling(n, k), binomial(n, k).
Нечётный хвост потока молча отбрасывается: [3, 2, 8, 3, 5] → 2 результата.
"""

from typing import Any, Callable, Final, Sequence

from agentmath.actions.base import Action
from agentmath.core.domain.action_spec import Discipline
from agentmath.core.domain.term import Number, Term, as_float, as_int
from agentmath.core.math import scalar
from agentmath.core.math.combinatorics import binomial, stirling_s2
from agentmath.core.math.grouping import PAIR_WINDOW, WindowConfig, evaluate_windowed

# (window values..., action name) → результат
WindowFunction = Callable[..., Any]


class WindowedAction(Action):
    """Action над окнами фиксированного размера."""

    discipline = Discipline.WINDOWED

    def __init__(
        self,
        name: str,
        function: WindowFunction,
        description: str = "",
        window: WindowConfig = PAIR_WINDOW,
        minimal_arguments: int | None = None,
    ):
        if minimal_arguments is None:
            minimal_arguments = window.size
        super().__init__(name, minimal_arguments, description)
        self._function = function
        self.window = window

    def evaluate(self, arguments: Sequence[Term], parallel: bool) -> list[Any]:
        return evaluate_windowed(
            lambda *values: self._function(*values, self.name),
            arguments,
            self.window,
            self.name,
        )


def _hypot(a: Number, b: Number, action: str) -> float:
    return scalar.hypot(as_float(a), as_float(b))


def _stirling(n: Number, k: Number, action: str) -> int:
    return stirling_s2(as_int(n, action), as_int(k, action), action)


def _binomial(n: Number, k: Number, action: str) -> int:
    return binomial(as_int(n, action), as_int(k, action), action)


WINDOWED_FUNCTIONS: Final[dict[str, tuple[WindowFunction, str]]] = {
    "hypot": (_hypot, "sqrt(a^2 + b^2) for each pair"),
    "stirling": (_stirling, "Stirling number of the second kind S(n, k) for each pair"),
    "binomial": (_binomial, "binomial coefficient C(n, k) for each pair"),
}
