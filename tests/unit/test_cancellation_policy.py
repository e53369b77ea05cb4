"""Unit тесты для политики отмены бронирования.

Coverage:
- Таблица правил GOLD 24h / REGULAR 48h
- Приоритет ALREADY_STARTED над INSUFFICIENT_NOTICE
- Граничные значения (ровно min notice, now == start_time)
- Конфигурация и валидация аргументов
"""

from datetime import datetime, timedelta, timezone

import pytest

from src.core.domain import Customer, CustomerTier
from src.policy import (
    CANCELLATION_RULES,
    CancellationPolicy,
    CancellationPolicyConfig,
    CancellationReason,
)


NOW = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def policy():
    """Fixture для политики с конфигурацией по умолчанию."""
    return CancellationPolicy()


# =============================================================================
# RULE TABLE
# =============================================================================


@pytest.mark.parametrize(
    "tier,hours,allowed,reason",
    [
        (CustomerTier.GOLD, 23, False, CancellationReason.INSUFFICIENT_NOTICE),
        (CustomerTier.GOLD, 24, True, CancellationReason.ALLOWED),
        (CustomerTier.GOLD, 25, True, CancellationReason.ALLOWED),
        (CustomerTier.REGULAR, 25, False, CancellationReason.INSUFFICIENT_NOTICE),
        (CustomerTier.REGULAR, 47, False, CancellationReason.INSUFFICIENT_NOTICE),
        (CustomerTier.REGULAR, 48, True, CancellationReason.ALLOWED),
        (CustomerTier.REGULAR, 49, True, CancellationReason.ALLOWED),
    ],
)
def test_notice_window_by_tier(policy, tier, hours, allowed, reason):
    decision = policy.is_cancelable(tier, NOW, NOW + timedelta(hours=hours))

    assert decision.allowed is allowed
    assert decision.reason == reason
    assert decision.tier == tier
    assert decision.hours_until_start == pytest.approx(hours)


@pytest.mark.parametrize("tier", [CustomerTier.GOLD, CustomerTier.REGULAR])
def test_already_started_regardless_of_tier(policy, tier):
    decision = policy.is_cancelable(tier, NOW, NOW - timedelta(minutes=1))

    assert decision.allowed is False
    assert decision.reason == CancellationReason.ALREADY_STARTED
    assert "started" in decision.details


def test_already_started_takes_precedence(policy):
    """Оба правила запрещают — побеждает первое в таблице."""
    decision = policy.is_cancelable(CustomerTier.REGULAR, NOW, NOW - timedelta(hours=100))

    assert decision.reason == CancellationReason.ALREADY_STARTED


def test_start_time_equal_to_now_is_insufficient_notice(policy):
    """now == start_time: ещё не началось, но уведомление нулевое."""
    decision = policy.is_cancelable(CustomerTier.GOLD, NOW, NOW)

    assert decision.allowed is False
    assert decision.reason == CancellationReason.INSUFFICIENT_NOTICE


def test_required_notice_reported(policy):
    gold = policy.is_cancelable(CustomerTier.GOLD, NOW, NOW + timedelta(hours=1))
    regular = policy.is_cancelable(CustomerTier.REGULAR, NOW, NOW + timedelta(hours=1))

    assert gold.required_notice_hours == 24.0
    assert regular.required_notice_hours == 48.0
    assert "24h notice" in gold.details


def test_rule_order_is_fixed():
    assert [rule.reason for rule in CANCELLATION_RULES] == [
        CancellationReason.ALREADY_STARTED,
        CancellationReason.INSUFFICIENT_NOTICE,
    ]


def test_mixed_timezones_compare_instants(policy):
    """start_time в UTC+03:00 сравнивается по моменту времени."""
    tz = timezone(timedelta(hours=3))
    start = (NOW + timedelta(hours=25)).astimezone(tz)

    decision = policy.is_cancelable(CustomerTier.GOLD, NOW, start)

    assert decision.allowed is True
    assert decision.hours_until_start == pytest.approx(25)


# =============================================================================
# CONFIG / VALIDATION
# =============================================================================


def test_custom_config():
    policy = CancellationPolicy(
        CancellationPolicyConfig(gold_min_notice_hours=2, regular_min_notice_hours=6)
    )

    assert policy.is_cancelable(CustomerTier.GOLD, NOW, NOW + timedelta(hours=3)).allowed
    assert not policy.is_cancelable(CustomerTier.REGULAR, NOW, NOW + timedelta(hours=3)).allowed


def test_config_negative_notice_rejected():
    with pytest.raises(ValueError, match="non-negative"):
        CancellationPolicyConfig(gold_min_notice_hours=-1)


def test_naive_now_rejected(policy):
    with pytest.raises(ValueError, match="timezone-aware"):
        policy.is_cancelable(CustomerTier.GOLD, datetime(2026, 10, 18, 12, 0), NOW)


def test_naive_start_time_rejected(policy):
    with pytest.raises(ValueError, match="timezone-aware"):
        policy.is_cancelable(CustomerTier.GOLD, NOW, datetime(2026, 10, 20, 12, 0))


@pytest.mark.parametrize(
    "threshold,points,expected",
    [
        (100, 100, CustomerTier.REGULAR),
        (100, 101, CustomerTier.GOLD),
        (10, 50, CustomerTier.GOLD),
        (200, 150, CustomerTier.REGULAR),
    ],
)
def test_classify_uses_configured_threshold(threshold, points, expected):
    policy = CancellationPolicy(CancellationPolicyConfig(gold_loyalty_threshold=threshold))

    assert policy.classify(Customer(customer_id="c-1", loyalty_points=points)) == expected
