"""Shipping cost strategies — расчёт стоимости доставки заказа.

Контракт: calculate(order) → ShippingQuote
- Чистая функция, без побочных эффектов
- Не читает и не изменяет shipment заказа
- Не бросает исключений для бизнес-отказов: заказ, который невозможно
  оценить, возвращает ShippingQuote с pricing_error

Реализации:
- FlatRateShipping: фиксированный тариф
- WeightBasedShipping: base_fee + вес × тариф за кг (с лимитом веса)
- LocationBasedShipping: тариф по типу направления (LocationType)
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Mapping, Optional, Protocol

from src.core.domain.money import add_money, multiply_money, to_money
from src.core.domain.order import LocationType, Order


# =============================================================================
# RESULT
# =============================================================================


class PricingErrorCode(str, Enum):
    """Причина, по которой стратегия не может оценить заказ."""

    NO_ITEMS = "NO_ITEMS"
    OVERWEIGHT = "OVERWEIGHT"
    UNSUPPORTED_DESTINATION = "UNSUPPORTED_DESTINATION"


@dataclass(frozen=True)
class ShippingQuote:
    """Результат расчёта стоимости доставки."""

    cost: Optional[Decimal]
    pricing_error: Optional[PricingErrorCode]

    # Диагностика
    strategy_name: str
    details: str

    @property
    def is_priced(self) -> bool:
        return self.pricing_error is None and self.cost is not None

    @classmethod
    def priced(cls, cost: Decimal, strategy_name: str, details: str) -> "ShippingQuote":
        return cls(
            cost=to_money(cost),
            pricing_error=None,
            strategy_name=strategy_name,
            details=details,
        )

    @classmethod
    def unpriceable(
        cls, error: PricingErrorCode, strategy_name: str, details: str
    ) -> "ShippingQuote":
        return cls(
            cost=None,
            pricing_error=error,
            strategy_name=strategy_name,
            details=details,
        )


class ShippingCostStrategy(Protocol):
    """Контракт стратегии расчёта стоимости доставки."""

    name: str

    def calculate(self, order: Order) -> ShippingQuote:
        ...


# =============================================================================
# FLAT RATE
# =============================================================================


class FlatRateShipping:
    """Фиксированный тариф независимо от содержимого заказа."""

    name = "flat_rate"

    def __init__(self, rate: Decimal = Decimal("5.00")):
        """
        Args:
            rate: стоимость доставки (неотрицательная)
        """
        self.rate = to_money(rate)

    def calculate(self, order: Order) -> ShippingQuote:
        return ShippingQuote.priced(
            cost=self.rate,
            strategy_name=self.name,
            details=f"Flat rate {self.rate}",
        )


# =============================================================================
# WEIGHT BASED
# =============================================================================


@dataclass(frozen=True)
class WeightBasedShippingConfig:
    """Конфигурация weight-based тарифа."""

    base_fee: Decimal = Decimal("2.00")
    rate_per_kg: Decimal = Decimal("1.50")
    max_weight_kg: float = 30.0

    def __post_init__(self):
        to_money(self.base_fee)
        to_money(self.rate_per_kg)
        if self.max_weight_kg <= 0:
            raise ValueError(f"max_weight_kg must be positive, got {self.max_weight_kg}")


class WeightBasedShipping:
    """Тариф по весу: base_fee + total_weight_kg × rate_per_kg.

    Порядок проверок:
    1. Пустой заказ → NO_ITEMS
    2. Вес выше max_weight_kg → OVERWEIGHT
    3. Расчёт стоимости
    """

    name = "weight_based"

    def __init__(self, config: Optional[WeightBasedShippingConfig] = None):
        self.config = config or WeightBasedShippingConfig()

    def calculate(self, order: Order) -> ShippingQuote:
        if not order.items:
            return ShippingQuote.unpriceable(
                error=PricingErrorCode.NO_ITEMS,
                strategy_name=self.name,
                details=f"Order {order.order_id} has no items to weigh",
            )

        weight_kg = order.total_weight_kg
        if weight_kg > self.config.max_weight_kg:
            return ShippingQuote.unpriceable(
                error=PricingErrorCode.OVERWEIGHT,
                strategy_name=self.name,
                details=(
                    f"Order weight {weight_kg:.3f}kg exceeds "
                    f"max {self.config.max_weight_kg:.3f}kg"
                ),
            )

        cost = add_money(
            self.config.base_fee,
            multiply_money(self.config.rate_per_kg, weight_kg),
        )
        return ShippingQuote.priced(
            cost=cost,
            strategy_name=self.name,
            details=(
                f"base={self.config.base_fee} + {weight_kg:.3f}kg × "
                f"{self.config.rate_per_kg}/kg"
            ),
        )


# =============================================================================
# LOCATION BASED
# =============================================================================


def _default_location_rates() -> dict:
    return {
        LocationType.DOMESTIC: Decimal("4.99"),
        LocationType.INTERNATIONAL: Decimal("19.99"),
    }


@dataclass(frozen=True)
class LocationBasedShippingConfig:
    """Конфигурация тарифа по типу направления.

    Направление, отсутствующее в rates, не обслуживается (REMOTE по умолчанию).
    """

    rates: Mapping[LocationType, Decimal] = field(default_factory=_default_location_rates)

    def __post_init__(self):
        for rate in self.rates.values():
            to_money(rate)


class LocationBasedShipping:
    """Тариф по LocationType заказа."""

    name = "location_based"

    def __init__(self, config: Optional[LocationBasedShippingConfig] = None):
        self.config = config or LocationBasedShippingConfig()

    def calculate(self, order: Order) -> ShippingQuote:
        rate = self.config.rates.get(order.destination)
        if rate is None:
            return ShippingQuote.unpriceable(
                error=PricingErrorCode.UNSUPPORTED_DESTINATION,
                strategy_name=self.name,
                details=f"No rate for destination {order.destination.value}",
            )

        return ShippingQuote.priced(
            cost=rate,
            strategy_name=self.name,
            details=f"destination={order.destination.value}, rate={to_money(rate)}",
        )
