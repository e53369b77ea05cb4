"""Cancellation policy — допуск отмены бронирования по классу клиента и времени.

Таблица правил (порядок фиксирован, первое запрещающее правило побеждает):

| # | Правило                                   | Причина отказа      |
|---|-------------------------------------------|---------------------|
| 1 | now > start_time                          | ALREADY_STARTED     |
| 2 | до начала меньше min notice класса клиента | INSUFFICIENT_NOTICE |
| - | иначе                                     | ALLOWED             |

Минимальное уведомление:
- GOLD (loyalty_points > 100): 24 часа
- REGULAR: 48 часов

Ровно min notice часов до начала — отмена разрешена.

Политика — чистая функция трёх аргументов: без I/O, без исключений
для бизнес-исходов (только для некорректных аргументов).
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Optional, Tuple

from src.core.domain.reservation import (
    GOLD_LOYALTY_THRESHOLD,
    Customer,
    CustomerTier,
    classify_customer,
)


logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CancellationPolicyConfig:
    """Конфигурация политики отмены."""

    gold_min_notice_hours: float = 24.0
    regular_min_notice_hours: float = 48.0
    gold_loyalty_threshold: int = GOLD_LOYALTY_THRESHOLD

    def __post_init__(self):
        if self.gold_min_notice_hours < 0 or self.regular_min_notice_hours < 0:
            raise ValueError("Minimum notice hours must be non-negative")
        if self.gold_loyalty_threshold < 0:
            raise ValueError(
                f"gold_loyalty_threshold must be non-negative, got {self.gold_loyalty_threshold}"
            )

    def min_notice_hours(self, tier: CustomerTier) -> float:
        if tier == CustomerTier.GOLD:
            return self.gold_min_notice_hours
        return self.regular_min_notice_hours


# =============================================================================
# RESULT
# =============================================================================


class CancellationReason(str, Enum):
    """Код причины решения (для диагностики)."""

    ALLOWED = "ALLOWED"
    ALREADY_STARTED = "ALREADY_STARTED"
    INSUFFICIENT_NOTICE = "INSUFFICIENT_NOTICE"


@dataclass(frozen=True)
class CancellationDecision:
    """Решение политики отмены."""

    allowed: bool
    reason: CancellationReason

    # Входные параметры для диагностики
    tier: CustomerTier
    hours_until_start: float
    required_notice_hours: float

    # Детали
    details: str


@dataclass(frozen=True)
class _RuleContext:
    tier: CustomerTier
    now: datetime
    start_time: datetime
    hours_until_start: float
    required_notice_hours: float


@dataclass(frozen=True)
class CancellationRule:
    """Правило таблицы: deny_when(ctx) == True → отказ с reason."""

    name: str
    reason: CancellationReason
    deny_when: Callable[[_RuleContext], bool]
    describe: Callable[[_RuleContext], str]


CANCELLATION_RULES: Tuple[CancellationRule, ...] = (
    CancellationRule(
        name="already_started",
        reason=CancellationReason.ALREADY_STARTED,
        deny_when=lambda ctx: ctx.now > ctx.start_time,
        describe=lambda ctx: (
            f"Reservation started {-ctx.hours_until_start:.2f}h ago"
        ),
    ),
    CancellationRule(
        name="min_notice_window",
        reason=CancellationReason.INSUFFICIENT_NOTICE,
        deny_when=lambda ctx: ctx.hours_until_start < ctx.required_notice_hours,
        describe=lambda ctx: (
            f"{ctx.tier.value} customer requires {ctx.required_notice_hours:.0f}h notice, "
            f"only {ctx.hours_until_start:.2f}h left"
        ),
    ),
)


# =============================================================================
# POLICY
# =============================================================================


class CancellationPolicy:
    """Политика отмены бронирования (упорядоченная таблица правил)."""

    def __init__(self, config: Optional[CancellationPolicyConfig] = None):
        self.config = config or CancellationPolicyConfig()
        self.rules = CANCELLATION_RULES

    def classify(self, customer: Customer) -> CustomerTier:
        """Класс клиента по порогу GOLD из конфигурации политики.

        Единственный источник классификации для движка и вызывающей стороны.
        """
        return classify_customer(customer, self.config.gold_loyalty_threshold)

    def is_cancelable(
        self,
        tier: CustomerTier,
        now: datetime,
        start_time: datetime,
    ) -> CancellationDecision:
        """Оценка допустимости отмены.

        Args:
            tier: класс клиента
            now: текущее время (timezone-aware)
            start_time: начало бронирования (timezone-aware)

        Returns:
            CancellationDecision с решением и кодом причины

        Raises:
            ValueError: Если now или start_time без timezone
        """
        _require_aware("now", now)
        _require_aware("start_time", start_time)

        hours_until_start = (start_time - now).total_seconds() / 3600.0
        ctx = _RuleContext(
            tier=tier,
            now=now,
            start_time=start_time,
            hours_until_start=hours_until_start,
            required_notice_hours=self.config.min_notice_hours(tier),
        )

        for rule in self.rules:
            denied = rule.deny_when(ctx)
            logger.debug(
                "cancellation rule %s: denied=%s tier=%s hours_until_start=%.2f",
                rule.name, denied, tier.value, hours_until_start,
            )
            if denied:
                return self._decision(ctx, allowed=False, reason=rule.reason, details=rule.describe(ctx))

        return self._decision(
            ctx,
            allowed=True,
            reason=CancellationReason.ALLOWED,
            details=(
                f"PASS: {tier.value}, {hours_until_start:.2f}h until start "
                f">= {ctx.required_notice_hours:.0f}h"
            ),
        )

    def _decision(
        self,
        ctx: _RuleContext,
        allowed: bool,
        reason: CancellationReason,
        details: str,
    ) -> CancellationDecision:
        return CancellationDecision(
            allowed=allowed,
            reason=reason,
            tier=ctx.tier,
            hours_until_start=ctx.hours_until_start,
            required_notice_hours=ctx.required_notice_hours,
            details=details,
        )


def _require_aware(name: str, value: datetime) -> None:
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError(f"{name} must be timezone-aware, got naive {value.isoformat()}")
