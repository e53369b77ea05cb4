"""Fulfillment Engine — переходы состояния заказов и бронирований.

Публичная поверхность — две операции:
- process(order)       → ProcessResult  (отгрузка заказа)
- cancel(reservation)  → CancelResult   (отмена бронирования)

Бизнес-отказы возвращаются как типизированные результаты, а не исключения.
Сущности immutable: успешный переход возвращает новый экземпляр, при отказе
возвращается исходный экземпляр без изменений.

Внешние зависимости (инжектируются при конструировании):
- Clock: now() / today()
- ShippingCostStrategy: calculate(order)
- CancellationPolicy: is_cancelable(tier, now, start_time)
"""

import logging
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Optional

from src.core.clock import Clock, SystemClock
from src.core.domain.order import Order, Shipment
from src.core.domain.reservation import CustomerTier, Reservation, ReservationState
from src.fulfillment.reservation_state import ReservationStateMachine
from src.policy.cancellation import CancellationPolicy, CancellationReason
from src.shipping.strategies import PricingErrorCode, ShippingCostStrategy


logger = logging.getLogger(__name__)

# Отгрузка на следующий день после обработки
SHIPPING_LEAD_TIME = timedelta(days=1)


# =============================================================================
# ERRORS
# =============================================================================


class OrderError(str, Enum):
    """Отказ process()."""

    ALREADY_SHIPPED = "ALREADY_SHIPPED"
    UNPRICEABLE_ORDER = "UNPRICEABLE_ORDER"


class ReservationError(str, Enum):
    """Отказ cancel().

    TOO_LATE_TO_CANCEL уточняется через CancellationReason
    (ALREADY_STARTED / INSUFFICIENT_NOTICE).
    """

    TOO_LATE_TO_CANCEL = "TOO_LATE_TO_CANCEL"
    ALREADY_CANCELED = "ALREADY_CANCELED"


# =============================================================================
# RESULTS
# =============================================================================


@dataclass(frozen=True)
class ProcessResult:
    """Результат process()."""

    success: bool
    order: Order
    error: Optional[OrderError]

    # Ошибка стратегии (только для UNPRICEABLE_ORDER)
    pricing_error: Optional[PricingErrorCode]

    # Детали
    details: str

    @property
    def is_retryable(self) -> bool:
        """Решение о повторе за вызывающей стороной; ALREADY_SHIPPED финален."""
        return self.error == OrderError.UNPRICEABLE_ORDER


@dataclass(frozen=True)
class CancelResult:
    """Результат cancel()."""

    success: bool
    reservation: Reservation
    error: Optional[ReservationError]

    # Причина решения политики (None если политика не вызывалась)
    reason: Optional[CancellationReason]

    # Класс клиента, по которому решала политика (None если не вызывалась)
    tier: Optional[CustomerTier]

    # Детали
    details: str

    @property
    def is_retryable(self) -> bool:
        """Все отказы отмены детерминированы и финальны."""
        return False


# =============================================================================
# ENGINE
# =============================================================================


class FulfillmentEngine:
    """Оркестратор переходов Order / Reservation.

    Порядок проверок process():
    1. Заказ уже отгружен → ALREADY_SHIPPED
    2. Стратегия не может оценить заказ → UNPRICEABLE_ORDER
    3. PASS → shipment = {cost, today + 1 day}

    Порядок проверок cancel():
    1. Машина состояний: CANCELED терминально → ALREADY_CANCELED
    2. Политика отмены → TOO_LATE_TO_CANCEL (ALREADY_STARTED / INSUFFICIENT_NOTICE)
    3. PASS → is_canceled = True
    """

    def __init__(
        self,
        shipping_strategy: ShippingCostStrategy,
        cancellation_policy: Optional[CancellationPolicy] = None,
        clock: Optional[Clock] = None,
        state_machine: Optional[ReservationStateMachine] = None,
    ):
        """
        Args:
            shipping_strategy: стратегия расчёта стоимости доставки
            cancellation_policy: политика отмены (default CancellationPolicy())
            clock: источник времени (default SystemClock())
            state_machine: машина состояний бронирования
        """
        self.shipping_strategy = shipping_strategy
        self.cancellation_policy = cancellation_policy or CancellationPolicy()
        self.clock = clock or SystemClock()
        self.state_machine = state_machine or ReservationStateMachine()

    def process(self, order: Order) -> ProcessResult:
        """Отгрузка заказа.

        Args:
            order: заказ без shipment

        Returns:
            ProcessResult с новым экземпляром заказа при успехе,
            либо исходным заказом и кодом ошибки
        """
        # 1. Заказ уже отгружен
        if order.is_shipped:
            logger.warning("order %s rejected: %s", order.order_id, OrderError.ALREADY_SHIPPED.value)
            return ProcessResult(
                success=False,
                order=order,
                error=OrderError.ALREADY_SHIPPED,
                pricing_error=None,
                details=f"Order {order.order_id} is already shipped",
            )

        # 2. Расчёт стоимости
        quote = self.shipping_strategy.calculate(order)
        if not quote.is_priced:
            logger.warning(
                "order %s rejected: %s (%s)",
                order.order_id, OrderError.UNPRICEABLE_ORDER.value,
                quote.pricing_error.value if quote.pricing_error else "no_cost",
            )
            return ProcessResult(
                success=False,
                order=order,
                error=OrderError.UNPRICEABLE_ORDER,
                pricing_error=quote.pricing_error,
                details=f"Strategy {quote.strategy_name} cannot price order: {quote.details}",
            )

        # 3. PASS
        shipment = Shipment(
            cost=quote.cost,
            shipping_date=self.clock.today() + SHIPPING_LEAD_TIME,
        )
        shipped = order.with_shipment(shipment)
        logger.info(
            "order %s shipped: cost=%s shipping_date=%s strategy=%s",
            order.order_id, shipment.cost, shipment.shipping_date.isoformat(), quote.strategy_name,
        )
        return ProcessResult(
            success=True,
            order=shipped,
            error=None,
            pricing_error=None,
            details=f"PASS: cost={shipment.cost}, shipping_date={shipment.shipping_date.isoformat()}",
        )

    def cancel(self, reservation: Reservation) -> CancelResult:
        """Отмена бронирования.

        Повторная отмена уже отменённого бронирования — явная ошибка
        ALREADY_CANCELED, политика при этом не вызывается.

        Args:
            reservation: бронирование

        Returns:
            CancelResult с новым экземпляром бронирования при успехе,
            либо исходным бронированием и кодом ошибки
        """
        # 1. Машина состояний
        transition = self.state_machine.evaluate_transition(
            reservation.state, ReservationState.CANCELED
        )
        if not transition.allowed:
            logger.warning(
                "reservation %s rejected: %s",
                reservation.reservation_id, ReservationError.ALREADY_CANCELED.value,
            )
            return CancelResult(
                success=False,
                reservation=reservation,
                error=ReservationError.ALREADY_CANCELED,
                reason=None,
                tier=None,
                details=transition.details,
            )

        # 2. Политика отмены
        tier = self.cancellation_policy.classify(reservation.customer)
        decision = self.cancellation_policy.is_cancelable(
            tier, self.clock.now(), reservation.start_time
        )
        if not decision.allowed:
            logger.warning(
                "reservation %s rejected: %s (%s)",
                reservation.reservation_id, ReservationError.TOO_LATE_TO_CANCEL.value,
                decision.reason.value,
            )
            return CancelResult(
                success=False,
                reservation=reservation,
                error=ReservationError.TOO_LATE_TO_CANCEL,
                reason=decision.reason,
                tier=decision.tier,
                details=decision.details,
            )

        # 3. PASS
        logger.info(
            "reservation %s canceled: tier=%s hours_until_start=%.2f",
            reservation.reservation_id, tier.value, decision.hours_until_start,
        )
        return CancelResult(
            success=True,
            reservation=reservation.canceled(),
            error=None,
            reason=decision.reason,
            tier=decision.tier,
            details=decision.details,
        )
