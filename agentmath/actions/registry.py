"""ActionRegistry — явная таблица символическое имя → action.

Реестр строится и принадлежит хосту; ядро лишь предоставляет
build_math_registry() со всеми numeric actions под namespace 'math'.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Sequence

from agentmath.actions.aggregate import AGGREGATE_FUNCTIONS, AggregateAction
from agentmath.actions.base import Action
from agentmath.actions.elementwise import ELEMENTWISE_FUNCTIONS, ElementwiseAction
from agentmath.actions.parameterized import PARAMETERIZED_FUNCTIONS, ParameterizedAction
from agentmath.actions.windowed import WINDOWED_FUNCTIONS, WindowedAction
from agentmath.core.contracts.validators import validate_action_invocation
from agentmath.core.domain.term import Term
from agentmath.core.errors import UnknownActionError

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class RegistryConfig:
    """Конфигурация реестра.

    namespace — префикс имён ('' → имена без префикса).
    """

    namespace: str = "math"

    def qualify(self, short_name: str) -> str:
        """'sigmoid' → 'math/sigmoid'"""
        return f"{self.namespace}/{short_name}" if self.namespace else short_name


# =============================================================================
# REGISTRY
# =============================================================================


class ActionRegistry:
    """Таблица actions по полному имени."""

    def __init__(self):
        self._actions: Dict[str, Action] = {}

    def register(self, action: Action) -> Action:
        """Регистрация action.

        Raises:
            ValueError: если имя уже занято
        """
        if action.name in self._actions:
            raise ValueError(f"action {action.name!r} is already registered")
        self._actions[action.name] = action
        logger.debug("Registered %r", action)
        return action

    def get(self, name: str) -> Action:
        """Поиск action по имени.

        Raises:
            UnknownActionError: если имя не зарегистрировано
        """
        try:
            return self._actions[name]
        except KeyError:
            raise UnknownActionError("unknown action", name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._actions

    def __iter__(self) -> Iterator[Action]:
        return iter(self._actions.values())

    def __len__(self) -> int:
        return len(self._actions)

    def names(self) -> list[str]:
        """Отсортированный список имён."""
        return sorted(self._actions)

    def invoke(
        self,
        name: str,
        arguments: Sequence[Term],
        parallel: bool = False,
        context: Any = None,
    ) -> list[Any]:
        """Исполнение action по имени в свежий output.

        Returns:
            список результатов в порядке эмиссии
        """
        output: list[Any] = []
        self.get(name).execute(parallel, context, arguments, output)
        return output

    def invoke_payload(self, payload: Dict[str, Any], context: Any = None) -> list[Any]:
        """Исполнение JSON payload формата action_invocation.

        Raises:
            ValidationError: payload не соответствует схеме
        """
        validate_action_invocation(payload)
        return self.invoke(
            payload["action"],
            payload["arguments"],
            parallel=payload.get("parallel", False),
            context=context,
        )

    def manifest(self) -> list[dict[str, Any]]:
        """Записи action_spec для всех actions, отсортированные по имени."""
        return [
            self._actions[name].spec.model_dump(mode="json") for name in self.names()
        ]


# =============================================================================
# DEFAULT TABLE
# =============================================================================


def build_math_registry(config: RegistryConfig | None = None) -> ActionRegistry:
    """Реестр со всеми numeric actions.

    Args:
        config: конфигурация (опционально, используется default)

    Returns:
        ActionRegistry с elementwise, windowed, aggregate и parameterized actions
    """
    config = config or RegistryConfig()
    registry = ActionRegistry()

    for short_name, (function, description) in ELEMENTWISE_FUNCTIONS.items():
        registry.register(
            ElementwiseAction(config.qualify(short_name), function, description)
        )

    for short_name, (function, description) in WINDOWED_FUNCTIONS.items():
        registry.register(
            WindowedAction(config.qualify(short_name), function, description)
        )

    for short_name, (reduction, description) in AGGREGATE_FUNCTIONS.items():
        registry.register(
            AggregateAction(config.qualify(short_name), reduction, description)
        )

    for short_name, (function, layout, minimal, description) in PARAMETERIZED_FUNCTIONS.items():
        registry.register(
            ParameterizedAction(
                config.qualify(short_name),
                function,
                layout,
                description,
                minimal_arguments=minimal,
            )
        )

    return registry
