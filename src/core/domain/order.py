"""
Order — Модель заказа и отгрузки

Immutable Pydantic модели заказа (Order), позиции заказа (OrderItem)
и отгрузки (Shipment).

Инварианты:
- Order переходит в "shipped" не более одного раза
- shipment установлен тогда и только тогда, когда заказ отгружен
- Shipment создаётся только FulfillmentEngine.process() и не меняется
"""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .money import to_money


# =============================================================================
# ENUMS
# =============================================================================


class LocationType(str, Enum):
    """Тип направления доставки (классификация для location-based тарифа)"""

    DOMESTIC = "DOMESTIC"
    INTERNATIONAL = "INTERNATIONAL"
    REMOTE = "REMOTE"


# =============================================================================
# SHIPMENT
# =============================================================================


class Shipment(BaseModel):
    """
    Отгрузка заказа.

    Создаётся только как результат успешного FulfillmentEngine.process().
    """

    cost: Decimal = Field(..., ge=0, description="Стоимость доставки (до центов)")
    shipping_date: date = Field(..., description="Дата отгрузки")

    model_config = {"frozen": True}

    @field_validator("cost", mode="before")
    @classmethod
    def normalize_cost(cls, v):
        """Приведение стоимости к денежному формату (Decimal, центы)."""
        return to_money(v)


# =============================================================================
# ORDER ITEM
# =============================================================================


class OrderItem(BaseModel):
    """Позиция заказа. Содержимое непрозрачно для движка, читается стратегиями."""

    sku: str = Field(..., min_length=1, description="Артикул")
    quantity: int = Field(..., ge=1, description="Количество единиц")
    unit_weight_kg: float = Field(0.0, ge=0, description="Вес единицы (кг)")

    model_config = {"frozen": True}

    @property
    def total_weight_kg(self) -> float:
        return self.quantity * self.unit_weight_kg


# =============================================================================
# ORDER MODEL
# =============================================================================


class Order(BaseModel):
    """
    Модель заказа.

    Immutable модель (frozen=True). Переход в "shipped" создаёт новый
    экземпляр через model_copy(); исходный заказ никогда не изменяется,
    поэтому частично обработанное состояние не наблюдаемо.
    """

    order_id: str = Field(..., min_length=1, description="Идентификатор заказа")
    items: tuple[OrderItem, ...] = Field((), description="Позиции заказа (immutable)")
    destination: LocationType = Field(
        LocationType.DOMESTIC, description="Тип направления доставки"
    )
    shipment: Optional[Shipment] = Field(
        None, description="Отгрузка (None пока заказ не отгружен)"
    )

    model_config = {"frozen": True}

    @property
    def is_shipped(self) -> bool:
        return self.shipment is not None

    @property
    def total_weight_kg(self) -> float:
        """Суммарный вес всех позиций (кг)."""
        return sum(item.total_weight_kg for item in self.items)

    def with_shipment(self, shipment: Shipment) -> "Order":
        """
        Новый экземпляр заказа с прикреплённой отгрузкой.

        Raises:
            ValueError: Если заказ уже отгружен (инвариант "shipped at most once")
        """
        if self.is_shipped:
            raise ValueError(f"Order {self.order_id} is already shipped")
        return self.model_copy(update={"shipment": shipment})
