"""
Domain models and value objects.

Contains fundamental domain entities like Order, Shipment, Reservation, Customer.
"""

from src.core.domain.money import (
    MONEY_QUANT,
    ZERO_MONEY,
    add_money,
    multiply_money,
    to_money,
)
from src.core.domain.order import LocationType, Order, OrderItem, Shipment
from src.core.domain.reservation import (
    GOLD_LOYALTY_THRESHOLD,
    Customer,
    CustomerTier,
    Reservation,
    ReservationState,
    classify_customer,
)

__all__ = [
    # Money module
    "MONEY_QUANT",
    "ZERO_MONEY",
    "to_money",
    "add_money",
    "multiply_money",
    # Order model
    "Order",
    "OrderItem",
    "Shipment",
    "LocationType",
    # Reservation model
    "Reservation",
    "ReservationState",
    "Customer",
    "CustomerTier",
    "GOLD_LOYALTY_THRESHOLD",
    "classify_customer",
]
