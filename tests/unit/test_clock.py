"""Тесты для Clock (SystemClock / FixedClock)."""

from datetime import date, datetime, timedelta, timezone

from src.core.clock import FixedClock, SystemClock


def test_fixed_clock_returns_fixed_time():
    t = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)
    clock = FixedClock(t)

    assert clock.now() == t
    assert clock.today() == date(2026, 10, 18)


def test_fixed_clock_naive_time_is_utc():
    clock = FixedClock(datetime(2026, 10, 18, 12, 0))

    assert clock.now().tzinfo == timezone.utc
    assert clock.now() == datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


def test_fixed_clock_today_uses_utc_date():
    """23:30 в UTC-05:00 — уже следующий день в UTC."""
    tz = timezone(timedelta(hours=-5))
    clock = FixedClock(datetime(2026, 10, 18, 23, 30, tzinfo=tz))

    assert clock.today() == date(2026, 10, 19)


def test_fixed_clock_advanced():
    clock = FixedClock(datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc))
    later = clock.advanced(timedelta(hours=25))

    assert later.now() == datetime(2026, 10, 19, 13, 0, tzinfo=timezone.utc)
    assert clock.now() == datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


def test_system_clock_is_timezone_aware():
    clock = SystemClock()
    now = clock.now()

    assert now.tzinfo is not None
    assert now.utcoffset() == timedelta(0)
    assert clock.today() in (now.date(), now.date() + timedelta(days=1))
