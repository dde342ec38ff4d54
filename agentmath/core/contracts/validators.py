"""
JSON Schema Contracts — граница с хостом-интерпретатором

Хост передаёт вызовы action как JSON payload и читает manifest
зарегистрированных actions. Оба формата описаны JSON Schema (draft 2020-12),
схемы поставляются внутри пакета (schema/ рядом с модулем).

Контракты:
- term: число или вложенный массив чисел
- action_invocation: вызов action {action, arguments, parallel}
- action_spec: запись manifest для одного action

Каждая схема загружается и проходит meta-validation один раз; скомпилированный
Draft202012Validator кэшируется по имени контракта и переиспользуется всеми
вызовами (invoke_payload проверяет каждый payload без повторной сборки).
"""

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator

# Имена контрактов (файл schema/<name>.json)
TERM: Final[str] = "term"
ACTION_INVOCATION: Final[str] = "action_invocation"
ACTION_SPEC: Final[str] = "action_spec"

CONTRACTS: Final[tuple[str, ...]] = (TERM, ACTION_INVOCATION, ACTION_SPEC)


# =============================================================================
# ЗАГРУЗКА СХЕМ
# =============================================================================


def load_schema(contract: str) -> Dict[str, Any]:
    """
    Чтение и meta-validation схемы контракта.

    Raises:
        KeyError: если контракт неизвестен
        ValueError: если схема не проходит meta-validation
    """
    if contract not in CONTRACTS:
        raise KeyError(f"unknown contract {contract!r}, expected one of {CONTRACTS}")
    source = resources.files(__package__) / "schema" / f"{contract}.json"
    schema = json.loads(source.read_text(encoding="utf-8"))
    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema for contract {contract!r}: {e.message}") from e
    return schema


@lru_cache(maxsize=None)
def contract_validator(contract: str) -> Draft202012Validator:
    """
    Скомпилированный validator контракта (один экземпляр на контракт).

    Examples:
        >>> contract_validator(TERM) is contract_validator(TERM)
        True
        >>> contract_validator(TERM).is_valid([1, [2.5]])
        True
    """
    return Draft202012Validator(load_schema(contract))


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def contract_errors(contract: str, data: Any) -> list[str]:
    """
    Все нарушения контракта в виде строк '<json path>: <message>'.

    Порядок детерминирован (по пути внутри документа), пустой список
    означает валидный документ. Предназначено для отчёта хосту без
    исключения.

    Examples:
        >>> contract_errors(ACTION_INVOCATION, {"arguments": []})
        ["$: 'action' is a required property"]
        >>> contract_errors(TERM, [1, [2.5]])
        []
    """
    errors = sorted(
        contract_validator(contract).iter_errors(data),
        key=lambda error: list(map(str, error.absolute_path)),
    )
    return [f"{error.json_path}: {error.message}" for error in errors]


def validate_term(data: Any) -> None:
    """
    Валидация одного Term.

    Raises:
        ValidationError: если данные не соответствуют схеме
    """
    contract_validator(TERM).validate(data)


def validate_action_invocation(data: Dict[str, Any]) -> None:
    """
    Валидация payload вызова action.

    Raises:
        ValidationError: если данные не соответствуют схеме
    """
    contract_validator(ACTION_INVOCATION).validate(data)


def validate_action_spec(data: Dict[str, Any]) -> None:
    """
    Валидация записи manifest.

    Raises:
        ValidationError: если данные не соответствуют схеме
    """
    contract_validator(ACTION_SPEC).validate(data)
