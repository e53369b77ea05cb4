"""
Entity Contracts — граница между движком и слоем хранения.

Слой хранения сериализует Order / Reservation в JSON и обратно.
Контракт сущности связывает JSON Schema (contracts/schema/<name>.json)
с Pydantic моделью:

- load(data)   → проверка схемы, затем model_validate()
- dump(entity) → model_dump(mode="json"), затем проверка схемы

Нарушение схемы — ContractViolation со списком всех ошибок (а не только
первой), чтобы запись можно было диагностировать целиком.
"""

from dataclasses import dataclass
from functools import lru_cache
import json
from pathlib import Path
from typing import Any, Dict, List, Type

import jsonschema
from jsonschema import Draft202012Validator
from pydantic import BaseModel

from src.core.domain.order import Order
from src.core.domain.reservation import Reservation


# contracts/schema/ в корне проекта (4 уровня вверх от этого файла)
SCHEMA_DIR = Path(__file__).resolve().parents[3] / "contracts" / "schema"


class ContractViolation(ValueError):
    """Данные не соответствуют контракту сущности."""

    def __init__(self, contract_name: str, messages: List[str]):
        self.contract_name = contract_name
        self.messages = tuple(messages)
        super().__init__(
            f"{contract_name} contract violated: " + "; ".join(self.messages)
        )


# =============================================================================
# SCHEMAS
# =============================================================================


@lru_cache(maxsize=None)
def schema_validator(contract_name: str) -> Draft202012Validator:
    """
    Загрузка схемы и построение валидатора (кэшируется по имени).

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если схема не проходит meta-валидацию
    """
    schema_path = SCHEMA_DIR / f"{contract_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {contract_name}.json: {e.message}") from e

    return Draft202012Validator(schema)


def _format_error(error: jsonschema.ValidationError) -> str:
    path = "/".join(str(p) for p in error.absolute_path) or "<root>"
    return f"{path}: {error.message}"


# =============================================================================
# ENTITY CONTRACT
# =============================================================================


@dataclass(frozen=True)
class EntityContract:
    """Контракт сериализованной формы одной сущности."""

    name: str
    model: Type[BaseModel]

    def violations(self, data: Dict[str, Any]) -> List[str]:
        """Все нарушения схемы в порядке пути внутри документа."""
        errors = schema_validator(self.name).iter_errors(data)
        ordered = sorted(errors, key=lambda e: [str(p) for p in e.absolute_path])
        return [_format_error(e) for e in ordered]

    def check(self, data: Dict[str, Any]) -> None:
        messages = self.violations(data)
        if messages:
            raise ContractViolation(self.name, messages)

    def load(self, data: Dict[str, Any]) -> BaseModel:
        """
        Восстановление сущности из хранилища.

        Raises:
            ContractViolation: Если данные не соответствуют схеме
            pydantic.ValidationError: Если нарушены инварианты модели
        """
        self.check(data)
        return self.model.model_validate(data)

    def dump(self, entity: BaseModel) -> Dict[str, Any]:
        """
        Сериализация сущности для хранилища.

        Raises:
            TypeError: Если entity не является моделью контракта
            ContractViolation: Если сериализованная форма разошлась со схемой
        """
        if not isinstance(entity, self.model):
            raise TypeError(
                f"{self.name} contract expects {self.model.__name__}, "
                f"got {type(entity).__name__}"
            )
        data = entity.model_dump(mode="json")
        self.check(data)
        return data


ORDER_CONTRACT = EntityContract(name="order", model=Order)
RESERVATION_CONTRACT = EntityContract(name="reservation", model=Reservation)


# =============================================================================
# PERSISTENCE ENTRY POINTS
# =============================================================================


def load_order(data: Dict[str, Any]) -> Order:
    return ORDER_CONTRACT.load(data)


def dump_order(order: Order) -> Dict[str, Any]:
    return ORDER_CONTRACT.dump(order)


def load_reservation(data: Dict[str, Any]) -> Reservation:
    return RESERVATION_CONTRACT.load(data)


def dump_reservation(reservation: Reservation) -> Dict[str, Any]:
    return RESERVATION_CONTRACT.dump(reservation)
