"""Fulfillment — движок переходов состояния заказов и бронирований.

- process(order): отгрузка заказа через подключаемую стратегию стоимости
- cancel(reservation): отмена бронирования через политику отмены
"""

from .engine import (
    CancelResult,
    FulfillmentEngine,
    OrderError,
    ProcessResult,
    ReservationError,
)
from .reservation_state import (
    ReservationStateMachine,
    ReservationTransitionResult,
)

__all__ = [
    "FulfillmentEngine",
    "ProcessResult",
    "CancelResult",
    "OrderError",
    "ReservationError",
    "ReservationStateMachine",
    "ReservationTransitionResult",
]
