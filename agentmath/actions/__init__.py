"""Actions — numeric actions, вызываемые хостом-интерпретатором.

Дисциплины:
- elementwise: f(x) для каждого элемента
- windowed: g(a, b) для каждой пары
- aggregate: reduce(поток) → скаляр
- parameterized: f(параметры..., t) для каждого t
"""

from .aggregate import AGGREGATE_FUNCTIONS, AggregateAction
from .base import Action
from .elementwise import ELEMENTWISE_FUNCTIONS, ElementwiseAction
from .parameterized import (
    PARAMETERIZED_FUNCTIONS,
    POW_LAYOUT,
    SIGMOID_LAYOUT,
    ParameterizedAction,
    ParameterLayout,
)
from .registry import ActionRegistry, RegistryConfig, build_math_registry
from .windowed import WINDOWED_FUNCTIONS, WindowedAction

__all__ = [
    "Action",
    "ElementwiseAction",
    "WindowedAction",
    "AggregateAction",
    "ParameterizedAction",
    "ParameterLayout",
    "SIGMOID_LAYOUT",
    "POW_LAYOUT",
    "ELEMENTWISE_FUNCTIONS",
    "WINDOWED_FUNCTIONS",
    "AGGREGATE_FUNCTIONS",
    "PARAMETERIZED_FUNCTIONS",
    "ActionRegistry",
    "RegistryConfig",
    "build_math_registry",
]
