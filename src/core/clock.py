"""Clock — источник текущего времени для движка.

Код движка не обращается к системному времени напрямую: Clock передаётся
при конструировании, что даёт детерминированные тесты с фиксированным
моментом времени.

- now()   → timezone-aware datetime (UTC)
- today() → date в UTC
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Protocol


class Clock(Protocol):
    """Контракт источника времени."""

    def now(self) -> datetime:
        ...

    def today(self) -> date:
        ...


class SystemClock:
    """Системное время в UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def today(self) -> date:
        return self.now().date()


@dataclass(frozen=True)
class FixedClock:
    """Clock с фиксированным моментом времени (тесты, повторное воспроизведение).

    Наивный fixed_time интерпретируется как UTC.
    """

    fixed_time: datetime

    def now(self) -> datetime:
        if self.fixed_time.tzinfo is None:
            return self.fixed_time.replace(tzinfo=timezone.utc)
        return self.fixed_time.astimezone(timezone.utc)

    def today(self) -> date:
        return self.now().date()

    def advanced(self, delta: timedelta) -> "FixedClock":
        """Новый FixedClock, сдвинутый на delta."""
        return FixedClock(self.now() + delta)
