"""
Тесты для модуля Adder

Проверяет:
1. Поразрядное сложение и распространение переноса
2. Рост результата на одну цифру
3. Коммутативность и нейтральность нуля
4. Неизменность операндов
5. Переполнение ёмкости (TRUNCATE / RAISE)
"""

import logging

import pytest

from src.core.math.adder import CapacityOverflowError, OverflowPolicy, add
from src.core.math.bigdecimal import BigDecimal
from src.core.math.renderer import render


def bd(text: str, capacity: int = 100) -> BigDecimal:
    return BigDecimal.from_digits(text, capacity=capacity)


# =============================================================================
# БАЗОВОЕ СЛОЖЕНИЕ
# =============================================================================


class TestAdd:
    """Тесты для add()"""

    @pytest.mark.parametrize(
        "x, y, expected",
        [
            ("0", "0", "0"),
            ("1", "1", "2"),
            ("2", "3", "5"),
            ("34", "21", "55"),
            ("4181", "2584", "6765"),
            ("5", "5", "10"),
            ("99", "1", "100"),
            ("999999999", "1", "1000000000"),
            ("12345", "9", "12354"),
        ],
    )
    def test_sum_values(self, x: str, y: str, expected: str) -> None:
        assert add(bd(x), bd(y)) == bd(expected)

    def test_carry_grows_result_by_one_digit(self) -> None:
        """Остаточный перенос записывается как новая старшая цифра"""
        result = add(bd("99", capacity=5), bd("99", capacity=5))

        assert result.cells == (None, None, 1, 9, 8)
        assert result.digit_count == 3

    def test_shorter_operand_carry_propagates(self) -> None:
        """Перенос проходит через позиции, где занят только длинный операнд"""
        assert add(bd("9999"), bd("1")) == bd("10000")

    def test_result_is_new_object(self) -> None:
        x = bd("7")
        y = BigDecimal.zero()

        result = add(x, y)

        assert result is not x
        assert result is not y

    def test_capacity_mismatch(self) -> None:
        with pytest.raises(ValueError, match="capacities differ"):
            add(BigDecimal.one(capacity=10), BigDecimal.one(capacity=11))

    def test_large_values_exact(self) -> None:
        """Точность далеко за пределами 64-битного целого"""
        a = 2**200
        b = 3**120

        result = add(bd(str(a)), bd(str(b)))

        assert int(result) == a + b


# =============================================================================
# АЛГЕБРАИЧЕСКИЕ СВОЙСТВА
# =============================================================================


class TestAddProperties:
    """Тесты коммутативности, нейтральности нуля и неизменности операндов"""

    PAIRS = [
        ("0", "1"),
        ("9", "1"),
        ("123", "98765"),
        ("500", "500"),
        ("354224848179261915075", "218922995834555169026"),
    ]

    @pytest.mark.parametrize("x, y", PAIRS)
    def test_commutative(self, x: str, y: str) -> None:
        assert add(bd(x), bd(y)) == add(bd(y), bd(x))

    @pytest.mark.parametrize("x", ["0", "1", "10", "6765", "354224848179261915075"])
    def test_zero_identity(self, x: str) -> None:
        value = bd(x)
        assert add(value, BigDecimal.zero()) == value
        assert add(BigDecimal.zero(), value) == value

    @pytest.mark.parametrize("x, y", PAIRS)
    def test_operands_not_mutated(self, x: str, y: str) -> None:
        left = bd(x)
        right = bd(y)
        left_before = left.copy()
        right_before = right.copy()

        add(left, right)

        assert left == left_before
        assert right == right_before

    def test_same_object_both_operands(self) -> None:
        value = bd("4")
        assert add(value, value) == bd("8")
        assert value == bd("4")

    def test_default_constructed_operands(self) -> None:
        """BigDecimal(capacity) это ноль, сумма двух нулей рендерится как 0"""
        total = add(BigDecimal(5), BigDecimal(5))

        assert total == BigDecimal.zero(capacity=5)
        assert render(total) == b"0"


# =============================================================================
# ПЕРЕПОЛНЕНИЕ ЁМКОСТИ
# =============================================================================


class TestOverflow:
    """Перенос за пределы позиции 0"""

    def test_fits_exactly_at_capacity(self) -> None:
        """Перенос в позицию 0 ещё помещается"""
        result = add(bd("99", capacity=3), bd("1", capacity=3), OverflowPolicy.RAISE)
        assert result.cells == (1, 0, 0)

    def test_truncate_drops_carry(self) -> None:
        """TRUNCATE: старший перенос теряется"""
        result = add(bd("99", capacity=2), bd("1", capacity=2), OverflowPolicy.TRUNCATE)

        assert result.cells == (0, 0)
        assert render(result) == b"00"

    def test_truncate_is_default(self) -> None:
        result = add(bd("5", capacity=1), bd("7", capacity=1))
        assert result.cells == (2,)

    def test_truncate_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="src.core.math.adder"):
            add(bd("9", capacity=1), bd("9", capacity=1))

        assert "Carry truncated" in caplog.text

    def test_raise_policy(self) -> None:
        with pytest.raises(CapacityOverflowError) as exc_info:
            add(bd("99", capacity=2), bd("1", capacity=2), OverflowPolicy.RAISE)

        assert exc_info.value.capacity == 2
        assert "more than 2 digits" in str(exc_info.value)

    def test_no_overflow_without_carry(self) -> None:
        """Полная ширина без переноса — не переполнение"""
        result = add(bd("45", capacity=2), bd("54", capacity=2), OverflowPolicy.RAISE)
        assert result == bd("99", capacity=2)

    def test_policy_from_string(self) -> None:
        assert OverflowPolicy("RAISE") is OverflowPolicy.RAISE
        assert OverflowPolicy.TRUNCATE == "TRUNCATE"
