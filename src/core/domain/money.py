"""
Money — Централизованный модуль денежных величин

Единственный допустимый способ преобразования входных сумм (int/str/float/Decimal)
в денежное значение стоимости доставки.

Правила:
- Все суммы хранятся как Decimal с точностью до центов (MONEY_QUANT)
- Округление ROUND_HALF_UP
- Отрицательные суммы и NaN/Inf запрещены

ЗАПРЕЩЕНО передавать float в Shipment.cost без явного конвертера из этого модуля.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Final, Union


# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================
# Квант округления (центы)
MONEY_QUANT: Final[Decimal] = Decimal("0.01")

# Нулевая сумма
ZERO_MONEY: Final[Decimal] = Decimal("0.00")


MoneyLike = Union[Decimal, int, str, float]


# =============================================================================
# КОНВЕРТЕРЫ
# =============================================================================


def to_money(amount: MoneyLike) -> Decimal:
    """
    Конверсия произвольного числа → денежная сумма.

    float конвертируется через str(), чтобы избежать артефактов двоичного
    представления (0.1 → Decimal('0.1'), а не 0.1000000000000000055...).

    Args:
        amount: Сумма (Decimal, int, str или float)

    Returns:
        Decimal, округлённый до центов

    Raises:
        ValueError: Если сумма не является конечным числом или отрицательна
    """
    if isinstance(amount, bool):
        raise ValueError(f"Money amount must be a number, got bool {amount}")

    try:
        value = Decimal(str(amount)) if isinstance(amount, float) else Decimal(amount)
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f"Invalid money amount: {amount!r}") from e

    if not value.is_finite():
        raise ValueError(f"Money amount must be finite, got {amount!r}")

    if value < 0:
        raise ValueError(f"Money amount must be non-negative, got {value}")

    return value.quantize(MONEY_QUANT, rounding=ROUND_HALF_UP)


def add_money(*amounts: MoneyLike) -> Decimal:
    """
    Сумма нескольких денежных величин.

    Каждое слагаемое проходит через to_money(), итог округляется повторно.

    Returns:
        Decimal, округлённый до центов (ZERO_MONEY для пустого списка)
    """
    total = ZERO_MONEY
    for amount in amounts:
        total += to_money(amount)
    return total.quantize(MONEY_QUANT, rounding=ROUND_HALF_UP)


def multiply_money(amount: MoneyLike, factor: MoneyLike) -> Decimal:
    """
    Умножение суммы на неотрицательный коэффициент (например, тариф × вес).

    Коэффициент не квантуется до умножения, округляется только результат.

    Raises:
        ValueError: Если коэффициент отрицательный или не конечный
    """
    base = to_money(amount)
    try:
        k = Decimal(str(factor)) if isinstance(factor, float) else Decimal(factor)
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f"Invalid factor: {factor!r}") from e

    if not k.is_finite() or k < 0:
        raise ValueError(f"Factor must be a finite non-negative number, got {factor!r}")

    return (base * k).quantize(MONEY_QUANT, rounding=ROUND_HALF_UP)
