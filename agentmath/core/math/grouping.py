"""
Grouping — дисциплины группировки flat stream

Три переиспользуемые дисциплины, в которые подключаются численные функции
конкретных actions:
- elementwise: f(x) для каждого элемента, 1:1, порядок сохраняется
- windowed: g(window) для каждого полного окна (size/step), хвост отбрасывается
- aggregate: reduce(все элементы) → один скаляр

И префикс параметров для multi-argument функций (sigmoid, pow):
первые k unflattened terms — скалярные параметры, данные — flatten(terms)
со сдвигом skip.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результаты возвращаются списком: вычисление завершается целиком до эмиссии
2. Неполное последнее окно молча отбрасывается (не ошибка)
3. Aggregate видит один материализованный список (count и reduction согласованы)
"""

import logging
from dataclasses import dataclass
from itertools import islice
from typing import Callable, Iterable, Iterator, Sequence, TypeVar

from agentmath.core.domain.term import Number, Term, ensure_number
from agentmath.core.errors import TermTypeError
from agentmath.core.math.flatten import flatten, flatten_list

logger = logging.getLogger(__name__)

R = TypeVar("R")


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class WindowConfig:
    """Конфигурация windowed-дисциплины.

    По умолчанию — непересекающиеся пары (size=2, step=2).
    """

    size: int = 2
    step: int = 2

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError(f"window size must be >= 1, got {self.size}")
        if self.step < 1:
            raise ValueError(f"window step must be >= 1, got {self.step}")


PAIR_WINDOW = WindowConfig()


# =============================================================================
# ELEMENTWISE
# =============================================================================


def evaluate_elementwise(
    function: Callable[[Number], R],
    terms: Iterable[Term],
    action: str | None = None,
) -> list[R]:
    """
    output[i] = function(input[i]) для каждого элемента flat stream.

    Examples:
        >>> evaluate_elementwise(abs, [-1, [2, -3]])
        [1, 2, 3]
    """
    return [function(value) for value in flatten(terms, action)]


# =============================================================================
# WINDOWED
# =============================================================================


def windowed(
    values: Iterable[Number], config: WindowConfig = PAIR_WINDOW
) -> Iterator[tuple[Number, ...]]:
    """
    Окна фиксированного размера по потоку, слева направо.

    Между окнами пропускается step - size элементов (если step > size);
    при step < size окна перекрываются. Неполное окно в конце отбрасывается.

    Examples:
        >>> list(windowed([1, 2, 3, 4, 5]))
        [(1, 2), (3, 4)]
        >>> list(windowed([1, 2, 3, 4], WindowConfig(size=2, step=1)))
        [(1, 2), (2, 3), (3, 4)]
    """
    iterator = iter(values)
    window: list[Number] = []
    while True:
        needed = config.size - len(window)
        window.extend(islice(iterator, needed))
        if len(window) < config.size:
            if window:
                logger.debug("Dropping %d trailing element(s) of an incomplete window", len(window))
            return
        yield tuple(window)

        if config.step >= config.size:
            skipped = config.step - config.size
            if skipped:
                # Пропуск элементов между окнами
                for _ in islice(iterator, skipped):
                    pass
            window = []
        else:
            window = window[config.step:]


def evaluate_windowed(
    function: Callable[..., R],
    terms: Iterable[Term],
    config: WindowConfig = PAIR_WINDOW,
    action: str | None = None,
) -> list[R]:
    """
    function(*window) для каждого полного окна flat stream.

    Examples:
        >>> evaluate_windowed(lambda a, b: a - b, [10, 3, [7, 5], 1])
        [7, 2]
    """
    return [function(*window) for window in windowed(flatten(terms, action), config)]


# =============================================================================
# AGGREGATE
# =============================================================================


def evaluate_aggregate(
    reduction: Callable[[Sequence[Number]], R],
    terms: Iterable[Term],
    action: str | None = None,
) -> R:
    """
    reduction(весь flat stream) → один результат.

    Поток материализуется один раз; и длина, и сумма в reduction
    вычисляются по одному и тому же списку.

    Examples:
        >>> evaluate_aggregate(len, [1, [2, 3]])
        3
    """
    return reduction(flatten_list(terms, action))


# =============================================================================
# PARAMETERIZED
# =============================================================================


def split_parameters(
    terms: Sequence[Term], count: int, action: str | None = None
) -> tuple[Number, ...]:
    """
    Извлечение первых count unflattened terms как скалярных параметров.

    Raises:
        TermTypeError: если параметр — Sequence или не Number
    """
    parameters = []
    for index, term in enumerate(terms[:count]):
        try:
            parameters.append(ensure_number(term))
        except TermTypeError as e:
            raise TermTypeError(f"parameter #{index} {e}", action) from e
    return tuple(parameters)


def evaluate_parameterized(
    function: Callable[..., R],
    terms: Sequence[Term],
    parameter_count: int,
    skip: int,
    action: str | None = None,
) -> list[R]:
    """
    function(*parameters, value) для каждого элемента данных.

    Данные — flatten(terms) без первых skip элементов. При skip <
    parameter_count последние параметры повторно попадают в данные.

    Args:
        function: функция (p_0, ..., p_{k-1}, value) → результат
        terms: unflattened аргументы
        parameter_count: количество скалярных параметров
        skip: сколько элементов flat stream пропустить

    Examples:
        >>> evaluate_parameterized(lambda e, t: t ** e, [2, 3, [4]], 1, 1)
        [9, 16]
    """
    parameters = split_parameters(terms, parameter_count, action)
    data = islice(flatten(terms, action), skip, None)
    return [function(*parameters, value) for value in data]
