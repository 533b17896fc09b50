"""
BigDecimal — Fixed-Capacity Decimal Big Integer

Представление неотрицательного целого числа как десятичной строки цифр
фиксированной ёмкости, выровненной по правому краю:
- Младшая цифра хранится в ячейке с индексом capacity - 1
- Пустые ячейки слева помечены sentinel-значением None
- Sentinel (None) никогда не совпадает с цифрой 0

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Занятые ячейки образуют ровно один непрерывный суффикс буфера
2. Ноль — это ровно одна занятая ячейка с цифрой 0 (не пустой буфер)
3. Ведущие нули запрещены (кроме одноразрядного нуля)
4. Ёмкость фиксирована на всё время жизни значения
"""

import math
from typing import Final, Iterable, Optional

# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Ёмкость буфера по умолчанию (количество десятичных ячеек)
BIGDECIMAL_CAPACITY_DEFAULT: Final[int] = 100

# log10 золотого сечения и log10(sqrt(5)) для оценки длины F(n) по Бине
LOG10_PHI: Final[float] = math.log10((1.0 + math.sqrt(5.0)) / 2.0)
LOG10_SQRT5: Final[float] = math.log10(math.sqrt(5.0))


# =============================================================================
# BIGDECIMAL
# =============================================================================


class BigDecimal:
    """
    Неотрицательное целое в буфере фиксированной ёмкости.

    Значения создаются конструкторами zero()/one()/from_digits() или
    сумматором (src.core.math.adder.add). После создания значение
    не изменяется публичным API.

    Examples:
        >>> BigDecimal.zero().digit_count
        1
        >>> int(BigDecimal.from_digits("6765"))
        6765
        >>> BigDecimal.one(capacity=4).cells
        (None, None, None, 1)
    """

    __slots__ = ("_cells",)

    def __init__(self, capacity: int = BIGDECIMAL_CAPACITY_DEFAULT):
        """
        Значение 0 заданной ёмкости (то же, что zero()).

        Пустой буфер без единой цифры не является валидным значением,
        поэтому публичный конструктор его не создаёт.

        Args:
            capacity: Количество ячеек буфера (>= 1)

        Raises:
            ValueError: Если capacity < 1
        """
        self._cells: list[Optional[int]] = [None] * _check_capacity(capacity)
        self._cells[-1] = 0

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def _empty(cls, capacity: int) -> "BigDecimal":
        """Внутренний пустой буфер (все ячейки sentinel) для заполнения."""
        value = cls.__new__(cls)
        value._cells = [None] * _check_capacity(capacity)
        return value

    @classmethod
    def zero(cls, capacity: int = BIGDECIMAL_CAPACITY_DEFAULT) -> "BigDecimal":
        """Значение 0: единственная занятая (крайняя правая) ячейка с цифрой 0."""
        value = cls._empty(capacity)
        value._cells[-1] = 0
        return value

    @classmethod
    def one(cls, capacity: int = BIGDECIMAL_CAPACITY_DEFAULT) -> "BigDecimal":
        """Значение 1: единственная занятая ячейка с цифрой 1."""
        value = cls._empty(capacity)
        value._cells[-1] = 1
        return value

    @classmethod
    def from_digits(
        cls,
        text: str,
        capacity: int = BIGDECIMAL_CAPACITY_DEFAULT,
    ) -> "BigDecimal":
        """
        Построение значения из канонической десятичной строки.

        Args:
            text: Десятичные цифры без знака и ведущих нулей ("0" допустим)
            capacity: Ёмкость буфера

        Returns:
            Новое значение BigDecimal

        Raises:
            ValueError: Пустая строка, не-цифры, ведущие нули или
                        количество цифр больше capacity

        Examples:
            >>> BigDecimal.from_digits("55", capacity=3).cells
            (None, 5, 5)
        """
        if not text:
            raise ValueError("digit string must not be empty")

        if not all("0" <= ch <= "9" for ch in text):
            raise ValueError(f"digit string must contain only 0-9, got {text!r}")

        if len(text) > 1 and text[0] == "0":
            raise ValueError(f"digit string must not have leading zeros, got {text!r}")

        value = cls._empty(capacity)
        if len(text) > capacity:
            raise ValueError(
                f"{len(text)} digits do not fit into capacity {capacity}"
            )

        offset = capacity - len(text)
        for i, ch in enumerate(text):
            value._cells[offset + i] = ord(ch) - ord("0")
        return value

    @classmethod
    def _from_cells(cls, cells: Iterable[Optional[int]]) -> "BigDecimal":
        """Внутренний конструктор для сумматора (ячейки уже проверены)."""
        value = cls._empty(1)
        value._cells = list(cells)
        return value

    # -------------------------------------------------------------------------
    # Доступ к ячейкам
    # -------------------------------------------------------------------------

    @property
    def capacity(self) -> int:
        """Ёмкость буфера C."""
        return len(self._cells)

    @property
    def cells(self) -> tuple[Optional[int], ...]:
        """Снимок ячеек буфера (None — sentinel)."""
        return tuple(self._cells)

    @property
    def first_occupied(self) -> int:
        """Индекс старшей занятой ячейки (capacity, если буфер пуст)."""
        for pos, cell in enumerate(self._cells):
            if cell is not None:
                return pos
        return len(self._cells)

    @property
    def digit_count(self) -> int:
        """Количество значащих цифр (длина занятого суффикса)."""
        return len(self._cells) - self.first_occupied

    def is_occupied(self, pos: int) -> bool:
        """True если ячейка pos содержит цифру."""
        return self._cells[self._check_pos(pos)] is not None

    def digit_at(self, pos: int) -> int:
        """
        Цифра в позиции pos; sentinel-ячейка читается как 0.

        Отсутствие цифры для арифметики эквивалентно нулю, поэтому
        для любых 0 <= pos < capacity операция не падает.

        Raises:
            IndexError: Если pos вне буфера
        """
        cell = self._cells[self._check_pos(pos)]
        return 0 if cell is None else cell

    def _check_pos(self, pos: int) -> int:
        if not 0 <= pos < len(self._cells):
            raise IndexError(
                f"position {pos} outside buffer of capacity {len(self._cells)}"
            )
        return pos

    # -------------------------------------------------------------------------
    # Копирование и сравнение
    # -------------------------------------------------------------------------

    def copy(self) -> "BigDecimal":
        """Независимая глубокая копия."""
        return BigDecimal._from_cells(self._cells)

    def __copy__(self) -> "BigDecimal":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "BigDecimal":
        return self.copy()

    def __eq__(self, other: object) -> bool:
        # Поразрядное равенство: одинаковая ёмкость и одинаковые ячейки
        if not isinstance(other, BigDecimal):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __int__(self) -> int:
        result = 0
        for cell in self._cells:
            if cell is not None:
                result = result * 10 + cell
        return result

    def __repr__(self) -> str:
        digits = "".join(str(c) for c in self._cells if c is not None)
        return f"BigDecimal({digits or '<empty>'!s}, capacity={self.capacity})"


# =============================================================================
# ОЦЕНКА ДЛИНЫ
# =============================================================================


def estimate_digit_length(n: int) -> int:
    """
    Оценка количества десятичных цифр F(n) по формуле Бине.

    digits(F(n)) = floor(n * log10(phi) - log10(sqrt(5))) + 1   для n >= 2

    Args:
        n: Индекс в последовательности (>= 0)

    Returns:
        Количество цифр F(n) (1 для n <= 1)

    Raises:
        ValueError: Если n < 0

    Examples:
        >>> estimate_digit_length(10)   # F(10) = 55
        2
        >>> estimate_digit_length(100)  # F(100) = 354224848179261915075
        21
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")

    if n <= 1:
        return 1

    return math.floor(n * LOG10_PHI - LOG10_SQRT5) + 1


def _check_capacity(capacity: int) -> int:
    if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity < 1:
        raise ValueError(f"capacity must be a positive int, got {capacity!r}")
    return capacity
