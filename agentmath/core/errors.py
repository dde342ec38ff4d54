"""
Action Errors — типизированные ошибки исполнения actions

Иерархия:
- ActionError: базовый класс для всех ошибок actions
- ArityError: аргументов меньше, чем объявленный минимум
- TermTypeError: лист дерева Term не является числом
- DomainError: нарушено численное предусловие функции
- UnknownActionError: action не найден в реестре

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все ошибки обнаруживаются синхронно внутри вызова
2. При ошибке output sink не модифицируется (нет частичных результатов)
"""


class ActionError(Exception):
    """Базовая ошибка исполнения action."""

    def __init__(self, message: str, action: str | None = None):
        self.action = action
        if action:
            message = f"{action}: {message}"
        super().__init__(message)


class ArityError(ActionError):
    """
    Количество входных terms меньше объявленного минимума.

    Проверяется до flattening, вычисления не начинаются.
    """

    def __init__(self, required: int, actual: int, action: str | None = None):
        self.required = required
        self.actual = actual
        super().__init__(
            f"requires at least {required} argument(s), got {actual}", action
        )


class TermTypeError(ActionError, TypeError):
    """Term не является ни числом, ни последовательностью."""


class DomainError(ActionError, ValueError):
    """
    Нарушение численного предусловия.

    Примеры: ноль в harmonic mean, неположительное значение в geometric mean,
    отрицательные аргументы Stirling/binomial, переполнение int64.
    """


class UnknownActionError(ActionError, KeyError):
    """Action с указанным именем не зарегистрирован."""

    def __str__(self) -> str:
        # KeyError по умолчанию оборачивает сообщение в repr()
        return self.args[0] if self.args else ""
