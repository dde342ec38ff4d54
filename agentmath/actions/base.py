"""Action — базовый контракт исполнения numeric action.

Сигнатура вызова со стороны хоста:
    execute(parallel, context, arguments, output) → None

Порядок исполнения:
1. Проверка арности (до flattening)
2. Вычисление всех результатов в свежий список
3. Добавление списка в output sink одним шагом

При любой ошибке на шагах 1-2 output не модифицируется.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, MutableSequence, Sequence

from agentmath.core.domain.action_spec import ActionSpec, Discipline
from agentmath.core.domain.term import Term
from agentmath.core.errors import ArityError

logger = logging.getLogger(__name__)


class Action(ABC):
    """Базовый action: арность, логирование, fail-fast эмиссия.

    Подклассы реализуют только evaluate(), выбирая дисциплину группировки.
    """

    discipline: Discipline

    def __init__(self, name: str, minimal_arguments: int, description: str = ""):
        """Инициализация action.

        Args:
            name: иерархическое имя (например, 'math/sigmoid')
            minimal_arguments: минимальное количество входных terms
            description: описание для manifest
        """
        self.spec = ActionSpec(
            name=name,
            minimal_arguments=minimal_arguments,
            discipline=self.discipline,
            description=description,
        )

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def minimal_arguments(self) -> int:
        return self.spec.minimal_arguments

    def check_arity(self, arguments: Sequence[Term]) -> None:
        """Проверка минимальной арности.

        Raises:
            ArityError: если len(arguments) < minimal_arguments
        """
        if len(arguments) < self.minimal_arguments:
            raise ArityError(self.minimal_arguments, len(arguments), self.name)

    def execute(
        self,
        parallel: bool,
        context: Any,
        arguments: Sequence[Term],
        output: MutableSequence[Any],
    ) -> None:
        """Исполнение action с добавлением результатов в output.

        Args:
            parallel: parallel hint (результат от него не зависит)
            context: контекст исполнения хоста (не используется)
            arguments: упорядоченные входные terms
            output: append-only sink для результатов

        Raises:
            ArityError: недостаточно аргументов
            TermTypeError: лист не является числом
            DomainError: нарушено численное предусловие
        """
        self.check_arity(arguments)
        logger.debug(
            "Executing %s with %d argument(s), parallel=%s",
            self.name,
            len(arguments),
            parallel,
        )
        results = self.evaluate(arguments, parallel)
        output.extend(results)

    def __call__(self, *arguments: Term, parallel: bool = False) -> list[Any]:
        """Вызов без внешнего sink: возвращает список результатов."""
        output: list[Any] = []
        self.execute(parallel, None, arguments, output)
        return output

    @abstractmethod
    def evaluate(self, arguments: Sequence[Term], parallel: bool) -> list[Any]:
        """Вычисление результатов (без эмиссии)."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"
