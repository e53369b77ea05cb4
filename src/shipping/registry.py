"""Реестр именованных стратегий доставки.

Набор стратегий фиксирован и мал: вызывающая сторона выбирает стратегию
по имени (ShippingStrategyName), а не конструирует произвольные правила.
"""

from decimal import Decimal
from enum import Enum
from typing import Optional, Union

from src.shipping.strategies import (
    FlatRateShipping,
    LocationBasedShipping,
    LocationBasedShippingConfig,
    ShippingCostStrategy,
    WeightBasedShipping,
    WeightBasedShippingConfig,
)


class ShippingStrategyName(str, Enum):
    FLAT_RATE = "flat_rate"
    WEIGHT_BASED = "weight_based"
    LOCATION_BASED = "location_based"


def build_shipping_strategy(
    name: Union[ShippingStrategyName, str],
    flat_rate: Optional[Decimal] = None,
    weight_config: Optional[WeightBasedShippingConfig] = None,
    location_config: Optional[LocationBasedShippingConfig] = None,
) -> ShippingCostStrategy:
    """Создание стратегии по имени.

    Args:
        name: ShippingStrategyName или его строковое значение
        flat_rate: тариф для FLAT_RATE (по умолчанию тариф стратегии)
        weight_config: конфигурация для WEIGHT_BASED
        location_config: конфигурация для LOCATION_BASED

    Returns:
        Экземпляр стратегии

    Raises:
        ValueError: Если имя стратегии неизвестно
    """
    try:
        strategy_name = ShippingStrategyName(name)
    except ValueError:
        known = ", ".join(s.value for s in ShippingStrategyName)
        raise ValueError(f"Unknown shipping strategy {name!r}, expected one of: {known}") from None

    if strategy_name == ShippingStrategyName.FLAT_RATE:
        if flat_rate is None:
            return FlatRateShipping()
        return FlatRateShipping(rate=flat_rate)
    elif strategy_name == ShippingStrategyName.WEIGHT_BASED:
        return WeightBasedShipping(config=weight_config)
    else:
        return LocationBasedShipping(config=location_config)
