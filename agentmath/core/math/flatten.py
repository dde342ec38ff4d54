"""
Flatten — развёртка вложенных Terms в плоский поток чисел

Depth-first, left-to-right обход дерева Terms: каждый Sequence-узел
раскрывается на месте, каждый Number-лист передаётся без изменений.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Порядок листьев сохраняется
2. Длина потока == количеству Number-листьев
3. flatten(flat) == flat (идемпотентность на плоском входе)
4. Лист, не являющийся Number/Sequence → TermTypeError
"""

from typing import Final, Iterable, Iterator

from agentmath.core.domain.term import Number, Term, is_number, is_sequence
from agentmath.core.errors import TermTypeError

# Маркер исчерпанного итератора в стеке обхода
_EXHAUSTED: Final = object()


def _invalid_term(term: object, action: str | None) -> TermTypeError:
    return TermTypeError(
        f"term must be a number or a sequence, got {type(term).__name__}: {term!r}",
        action,
    )


def flatten(terms: Iterable[Term], action: str | None = None) -> Iterator[Number]:
    """
    Ленивая развёртка последовательности Terms.

    Обход итеративный (явный стек итераторов), глубина вложенности
    не ограничена стеком вызовов Python.

    Args:
        terms: упорядоченная последовательность Terms
        action: имя action для сообщения об ошибке

    Yields:
        Numbers в порядке depth-first обхода

    Raises:
        TermTypeError: при листе, который не Number и не Sequence

    Examples:
        >>> list(flatten([1, [2, [3, 4]], 5]))
        [1, 2, 3, 4, 5]
        >>> list(flatten([[], [[]]]))
        []
    """
    stack: list[Iterator[Term]] = [iter(terms)]
    while stack:
        term = next(stack[-1], _EXHAUSTED)
        if term is _EXHAUSTED:
            stack.pop()
        elif is_number(term):
            yield term  # type: ignore[misc]
        elif is_sequence(term):
            stack.append(iter(term))  # type: ignore[arg-type]
        else:
            raise _invalid_term(term, action)


def flatten_list(terms: Iterable[Term], action: str | None = None) -> list[Number]:
    """
    Материализованная развёртка.

    Используется там, где поток читается дважды (count + reduction)
    или где результат должен быть вычислен целиком до эмиссии.

    Examples:
        >>> flatten_list([(1.5, [2]), 3])
        [1.5, 2, 3]
    """
    return list(flatten(terms, action))


def count_leaves(terms: Iterable[Term]) -> int:
    """
    Количество Number-листьев без построения потока.

    Examples:
        >>> count_leaves([1, [2, [3]], []])
        3
    """
    total = 0
    stack: list[Iterator[Term]] = [iter(terms)]
    while stack:
        term = next(stack[-1], _EXHAUSTED)
        if term is _EXHAUSTED:
            stack.pop()
        elif is_sequence(term):
            stack.append(iter(term))  # type: ignore[arg-type]
        elif is_number(term):
            total += 1
        else:
            raise _invalid_term(term, None)
    return total
