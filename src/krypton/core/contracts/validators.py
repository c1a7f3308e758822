"""
Wire-контракты krypton: JSON Schema для transport и portfolio.

Схемы (Draft 2020-12) лежат в schema/ рядом с модулем. Валидатор
расширен ключевым словом "finite": JSON-числа NaN/Infinity проходят
"minimum": 0, но не могут стать PDecimal, поэтому отклоняются здесь,
а не при декодировании.

Для каждой схемы строится один валидатор (кэш), ошибка отдаётся как
ContractViolation с JSON path нарушения.
"""

import json
import math
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator, List

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import best_match
from jsonschema.validators import extend


SCHEMA_DIR: Path = Path(__file__).parent / "schema"

TRANSPORT = "transport"
PORTFOLIO = "portfolio"


# =============================================================================
# ERRORS
# =============================================================================


class ContractViolation(ValidationError):
    """
    Нарушение wire-контракта.

    Подкласс jsonschema.ValidationError: сообщение содержит имя контракта
    и JSON path (например, "transport contract violated at $.update.value").
    """

    def __init__(self, contract: str, error: ValidationError):
        self.contract = contract
        # json_path — property, вычисляется из absolute path исходной ошибки
        super().__init__(
            f"{contract} contract violated at {error.json_path}: {error.message}",
            path=error.absolute_path,
            schema_path=error.absolute_schema_path,
            cause=error.cause,
        )


# =============================================================================
# VALIDATOR
# =============================================================================


def _finite(validator, finite: bool, instance: Any, schema: Dict[str, Any]) -> Iterator[ValidationError]:
    if finite and isinstance(instance, float) and not math.isfinite(instance):
        yield ValidationError(f"{instance!r} is not a finite decimal")


# Draft 2020-12 + "finite"
PDecimalAwareValidator = extend(Draft202012Validator, {"finite": _finite})


def load_schema(name: str, schema_dir: Path = SCHEMA_DIR) -> Dict[str, Any]:
    """
    Загрузка и meta-validation схемы.

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если схема не проходит meta-validation
    """
    schema_path = schema_dir / f"{name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        PDecimalAwareValidator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {name}.json: {e.message}") from e
    return schema


@lru_cache(maxsize=None)
def contract_validator(name: str) -> "jsonschema.protocols.Validator":
    """Валидатор для встроенной схемы; строится один раз на схему."""
    return PDecimalAwareValidator(load_schema(name))


def contract_errors(name: str, data: Any) -> List[str]:
    """Все нарушения контракта в виде "<json path>: <message>" (пусто, если данные валидны)."""
    return [
        f"{error.json_path}: {error.message}"
        for error in contract_validator(name).iter_errors(data)
    ]


def check_contract(name: str, data: Any) -> None:
    """
    Проверка данных против контракта.

    Raises:
        ContractViolation: наиболее релевантное нарушение (best_match)
    """
    error = best_match(contract_validator(name).iter_errors(data))
    if error is not None:
        raise ContractViolation(name, error)


def validate_transport(data: Dict[str, Any]) -> None:
    check_contract(TRANSPORT, data)


def validate_portfolio(data: Dict[str, Any]) -> None:
    check_contract(PORTFOLIO, data)
