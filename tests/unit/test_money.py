"""
Sanity-тест для модуля Money

Проверяет:
1. Квантование до центов (ROUND_HALF_UP)
2. Конверсию float без артефактов двоичного представления
3. Отказ для отрицательных и не конечных сумм
4. Сложение и умножение сумм
"""

from decimal import Decimal

import pytest

from src.core.domain.money import (
    MONEY_QUANT,
    ZERO_MONEY,
    add_money,
    multiply_money,
    to_money,
)


class TestToMoney:
    """Тесты для to_money"""

    def test_int_quantized(self) -> None:
        """int → Decimal с двумя знаками"""
        assert to_money(1) == Decimal("1.00")
        assert str(to_money(1)) == "1.00"

    def test_float_without_binary_artifacts(self) -> None:
        """0.1 → 0.10, а не 0.1000000000000000055..."""
        assert to_money(0.1) == Decimal("0.10")

    def test_half_up_rounding(self) -> None:
        """0.005 округляется вверх"""
        assert to_money("0.005") == Decimal("0.01")
        assert to_money("2.675") == Decimal("2.68")

    def test_zero_allowed(self) -> None:
        assert to_money(0) == ZERO_MONEY

    def test_quant_is_cents(self) -> None:
        assert MONEY_QUANT == Decimal("0.01")

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            to_money(-1)

    @pytest.mark.parametrize("amount", ["NaN", "Infinity", float("inf")])
    def test_non_finite_rejected(self, amount) -> None:
        with pytest.raises(ValueError, match="finite"):
            to_money(amount)

    def test_garbage_rejected(self) -> None:
        with pytest.raises(ValueError, match="Invalid money amount"):
            to_money("abc")

    def test_bool_rejected(self) -> None:
        with pytest.raises(ValueError):
            to_money(True)


class TestArithmetic:
    """Тесты сложения и умножения"""

    def test_add_money(self) -> None:
        assert add_money("1.10", 2, 0.2) == Decimal("3.30")

    def test_add_money_empty(self) -> None:
        assert add_money() == ZERO_MONEY

    def test_multiply_money(self) -> None:
        """Тариф × вес, округление только результата"""
        assert multiply_money("1.50", 2.5) == Decimal("3.75")
        assert multiply_money("1.50", "0.333") == Decimal("0.50")

    def test_multiply_negative_factor_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            multiply_money("1.00", -2)
