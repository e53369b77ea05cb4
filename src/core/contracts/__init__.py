"""
Entity contracts — сериализованная форма сущностей для слоя хранения.
"""

from .entities import (
    ORDER_CONTRACT,
    RESERVATION_CONTRACT,
    ContractViolation,
    EntityContract,
    dump_order,
    dump_reservation,
    load_order,
    load_reservation,
    schema_validator,
)

__all__ = [
    "ORDER_CONTRACT",
    "RESERVATION_CONTRACT",
    "ContractViolation",
    "EntityContract",
    "schema_validator",
    "load_order",
    "dump_order",
    "load_reservation",
    "dump_reservation",
]
