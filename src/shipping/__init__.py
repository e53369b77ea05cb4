"""Shipping — подключаемые стратегии расчёта стоимости доставки.

- FlatRateShipping: фиксированный тариф
- WeightBasedShipping: тариф по весу
- LocationBasedShipping: тариф по типу направления
"""

from .registry import ShippingStrategyName, build_shipping_strategy
from .strategies import (
    FlatRateShipping,
    LocationBasedShipping,
    LocationBasedShippingConfig,
    PricingErrorCode,
    ShippingCostStrategy,
    ShippingQuote,
    WeightBasedShipping,
    WeightBasedShippingConfig,
)

__all__ = [
    "ShippingCostStrategy",
    "ShippingQuote",
    "PricingErrorCode",
    "FlatRateShipping",
    "WeightBasedShipping",
    "WeightBasedShippingConfig",
    "LocationBasedShipping",
    "LocationBasedShippingConfig",
    "ShippingStrategyName",
    "build_shipping_strategy",
]
