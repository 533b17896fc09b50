"""
Adder — Digit-wise Addition of BigDecimal Values

Поразрядное сложение двух значений BigDecimal одинаковой ёмкости:
- Проход от младшей позиции (capacity - 1) к старшей (0)
- Перенос (carry) передаётся в следующую, более старшую позицию
- Остаточный перенос записывается как новая старшая цифра 1
- Операнды никогда не изменяются, результат: новое значение

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. add(x, y) == add(y, x)
2. add(x, zero) == x
3. Длина результата <= max(len(x), len(y)) + 1
4. Перенос за пределы позиции 0 обрабатывается согласно OverflowPolicy:
   TRUNCATE — перенос отбрасывается, RAISE — CapacityOverflowError

АЛГОРИТМ:
    pos = C - 1, carry = 0
    while x[pos] занята or y[pos] занята:
        total = digit(x, pos) + digit(y, pos) + carry
        result[pos] = total mod 10, carry = total div 10
        pos -= 1
    if carry:
        result[pos] = 1   (если pos >= 0, иначе overflow)
"""

import logging
from enum import Enum
from typing import Optional

from src.core.math.bigdecimal import BigDecimal

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class OverflowPolicy(str, Enum):
    """Поведение при переносе за пределы ёмкости буфера."""

    TRUNCATE = "TRUNCATE"
    RAISE = "RAISE"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CapacityOverflowError(Exception):
    """
    Сумма не помещается в буфер: перенос требуется записать левее позиции 0.

    Возникает только при OverflowPolicy.RAISE. При TRUNCATE тот же случай
    приводит к потере старшего переноса (результат неточен).
    """

    def __init__(self, capacity: int):
        self.capacity = capacity
        super().__init__(
            f"Carry overflow: sum needs more than {capacity} digits "
            f"(increase capacity or lower max_n)"
        )


# =============================================================================
# ADD
# =============================================================================


def add(
    x: BigDecimal,
    y: BigDecimal,
    overflow_policy: OverflowPolicy = OverflowPolicy.TRUNCATE,
) -> BigDecimal:
    """
    Сумма двух значений BigDecimal.

    Args:
        x: Первый операнд (read-only)
        y: Второй операнд (read-only)
        overflow_policy: Поведение при переполнении ёмкости
                         (default: TRUNCATE)

    Returns:
        Новое значение BigDecimal той же ёмкости

    Raises:
        ValueError: Если ёмкости операндов различаются
        CapacityOverflowError: Если перенос не помещается и policy=RAISE

    Examples:
        >>> int(add(BigDecimal.from_digits("99"), BigDecimal.one()))
        100
        >>> add(BigDecimal.zero(), BigDecimal.zero()) == BigDecimal.zero()
        True
    """
    if x.capacity != y.capacity:
        raise ValueError(
            f"operand capacities differ: {x.capacity} != {y.capacity}"
        )

    capacity = x.capacity
    cells: list[Optional[int]] = [None] * capacity
    carry = 0
    pos = capacity - 1

    while pos >= 0 and (x.is_occupied(pos) or y.is_occupied(pos)):
        total = x.digit_at(pos) + y.digit_at(pos) + carry
        if total >= 10:
            cells[pos] = total - 10
            carry = 1
        else:
            cells[pos] = total
            carry = 0
        pos -= 1

    if carry:
        if pos >= 0:
            cells[pos] = carry
        elif overflow_policy == OverflowPolicy.RAISE:
            raise CapacityOverflowError(capacity)
        else:
            # Перенос отброшен: старшая цифра результата потеряна
            logger.warning(
                "Carry truncated: sum exceeds capacity %d digits", capacity
            )

    return BigDecimal._from_cells(cells)
