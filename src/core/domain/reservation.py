"""
Reservation — Модель бронирования и клиента

Immutable Pydantic модели бронирования (Reservation) и клиента (Customer).

Классификация клиента не хранится, а вычисляется:
- GOLD: loyalty_points > GOLD_LOYALTY_THRESHOLD
- REGULAR: иначе
"""

from datetime import datetime
from enum import Enum
from typing import Final

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# КОНСТАНТЫ
# =============================================================================
# Порог loyalty points для GOLD (строго больше)
GOLD_LOYALTY_THRESHOLD: Final[int] = 100


# =============================================================================
# ENUMS
# =============================================================================


class CustomerTier(str, Enum):
    """Классификация клиента"""

    GOLD = "GOLD"
    REGULAR = "REGULAR"


class ReservationState(str, Enum):
    """
    Состояние бронирования.

    ACTIVE → CANCELED (терминальное, выхода нет)
    """

    ACTIVE = "ACTIVE"
    CANCELED = "CANCELED"


# =============================================================================
# CUSTOMER
# =============================================================================


class Customer(BaseModel):
    """
    Клиент. Жизненный цикл внешний, для политики — read-only.
    """

    customer_id: str = Field(..., min_length=1, description="Идентификатор клиента")
    loyalty_points: int = Field(0, ge=0, description="Баллы лояльности")

    model_config = {"frozen": True}


def classify_customer(
    customer: Customer, gold_threshold: int = GOLD_LOYALTY_THRESHOLD
) -> CustomerTier:
    """
    Классификация клиента по баллам лояльности.

    Args:
        customer: Клиент
        gold_threshold: Порог GOLD (loyalty_points строго больше порога)

    Returns:
        CustomerTier.GOLD или CustomerTier.REGULAR
    """
    if customer.loyalty_points > gold_threshold:
        return CustomerTier.GOLD
    return CustomerTier.REGULAR


# =============================================================================
# RESERVATION
# =============================================================================


class Reservation(BaseModel):
    """
    Модель бронирования.

    Immutable модель (frozen=True). is_canceled монотонен (False → True),
    изменяется только через FulfillmentEngine.cancel(), который возвращает
    новый экземпляр.
    """

    reservation_id: str = Field(..., min_length=1, description="Идентификатор брони")
    customer: Customer = Field(..., description="Клиент")
    start_time: datetime = Field(..., description="Начало (timezone-aware)")
    is_canceled: bool = Field(False, description="Отменено ли бронирование")

    model_config = {"frozen": True}

    @field_validator("start_time")
    @classmethod
    def validate_timezone_aware(cls, v: datetime) -> datetime:
        """Наивные datetime запрещены: сравнение с Clock.now() требует tz."""
        if v.tzinfo is None or v.utcoffset() is None:
            raise ValueError("start_time must be timezone-aware")
        return v

    @property
    def state(self) -> ReservationState:
        return ReservationState.CANCELED if self.is_canceled else ReservationState.ACTIVE

    def canceled(self) -> "Reservation":
        """Новый экземпляр в состоянии CANCELED."""
        return self.model_copy(update={"is_canceled": True})
