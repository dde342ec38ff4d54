"""Aggregate actions — весь flat stream сворачивается в один скаляр.

sum, average, min, max, harmonicmean, geometricmean, maxindex, minindex.

Parallel hint принимается, но не влияет на вычисление: все reductions
детерминированы (math.fsum, фиксированный порядок обхода).
"""

from typing import Any, Callable, Final, Sequence

from agentmath.actions.base import Action
from agentmath.core.domain.action_spec import Discipline
from agentmath.core.domain.term import Number, Term
from agentmath.core.math import reductions
from agentmath.core.math.grouping import evaluate_aggregate

# (values, action name) → результат
Reduction = Callable[[Sequence[Number], str], Any]


class AggregateAction(Action):
    """Action, сворачивающий весь поток одной reduction."""

    discipline = Discipline.AGGREGATE

    def __init__(
        self,
        name: str,
        reduction: Reduction,
        description: str = "",
        minimal_arguments: int = 1,
    ):
        super().__init__(name, minimal_arguments, description)
        self._reduction = reduction

    def evaluate(self, arguments: Sequence[Term], parallel: bool) -> list[Any]:
        return [
            evaluate_aggregate(
                lambda values: self._reduction(values, self.name),
                arguments,
                self.name,
            )
        ]


AGGREGATE_FUNCTIONS: Final[dict[str, tuple[Reduction, str]]] = {
    "sum": (lambda values, action: reductions.total(values), "exactly rounded sum"),
    "average": (reductions.average, "arithmetic mean"),
    "min": (reductions.minimum, "smallest value"),
    "max": (reductions.maximum, "largest value"),
    "harmonicmean": (reductions.harmonic_mean, "n / sum(1/x)"),
    "geometricmean": (reductions.geometric_mean, "exp(mean(ln x))"),
    "maxindex": (reductions.max_index, "zero-based position of the first maximum"),
    "minindex": (reductions.min_index, "zero-based position of the first minimum"),
}
