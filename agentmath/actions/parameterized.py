"""Parameterized actions — скалярные параметры + данные.

Первые parameter_count unflattened аргументов — параметры, данные —
flatten(arguments) без первых skip элементов.

sigmoid: параметры α, β, γ; skip = 2. γ попадает в данные первым элементом:
    sigmoid(1, 1, 1, 10, 20, 30) → [σ(1), σ(10), σ(20), σ(30)]
pow: параметр exponent; skip = 1:
    pow(2, 3, 4, 0.5) → [9.0, 16.0, 0.25]
"""

from dataclasses import dataclass
from typing import Any, Callable, Final, Sequence

from agentmath.actions.base import Action
from agentmath.core.domain.action_spec import Discipline
from agentmath.core.domain.term import Term, as_float
from agentmath.core.math import scalar
from agentmath.core.math.grouping import evaluate_parameterized


@dataclass(frozen=True)
class ParameterLayout:
    """Раскладка аргументов parameterized action."""

    parameter_count: int
    skip: int


class ParameterizedAction(Action):
    """Action вида f(p_0, ..., p_{k-1}, t) над потоком данных."""

    discipline = Discipline.PARAMETERIZED

    def __init__(
        self,
        name: str,
        function: Callable[..., Any],
        layout: ParameterLayout,
        description: str = "",
        minimal_arguments: int | None = None,
    ):
        if minimal_arguments is None:
            minimal_arguments = layout.parameter_count
        super().__init__(name, minimal_arguments, description)
        self._function = function
        self.layout = layout

    def evaluate(self, arguments: Sequence[Term], parallel: bool) -> list[Any]:
        return evaluate_parameterized(
            lambda *values: self._function(*(as_float(v) for v in values)),
            arguments,
            self.layout.parameter_count,
            self.layout.skip,
            self.name,
        )


SIGMOID_LAYOUT: Final[ParameterLayout] = ParameterLayout(parameter_count=3, skip=2)
POW_LAYOUT: Final[ParameterLayout] = ParameterLayout(parameter_count=1, skip=1)

PARAMETERIZED_FUNCTIONS: Final[dict[str, tuple[Callable[..., Any], ParameterLayout, int, str]]] = {
    "sigmoid": (scalar.sigmoid, SIGMOID_LAYOUT, 3, "alpha / (beta + exp(-gamma * t)) for each t"),
    "pow": (scalar.power, POW_LAYOUT, 2, "t ** exponent for each t"),
}
