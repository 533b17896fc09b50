"""
Renderer — BigDecimal → printable digit bytes

Пропускает ведущие sentinel-ячейки и возвращает непрерывный суффикс
занятых ячеек в виде ASCII-цифр. Ноль отображается как b"0";
результат никогда не бывает пустым.
"""

from src.core.math.bigdecimal import BigDecimal

_ASCII_ZERO = ord("0")


def render(bn: BigDecimal) -> bytes:
    """
    Минимальное печатное представление значения.

    Args:
        bn: Значение BigDecimal

    Returns:
        ASCII-цифры от старшей занятой ячейки до конца буфера

    Raises:
        ValueError: Если буфер пуст (нарушен инвариант представления нуля)

    Examples:
        >>> render(BigDecimal.zero())
        b'0'
        >>> render(BigDecimal.from_digits("6765"))
        b'6765'
    """
    start = bn.first_occupied
    if start == bn.capacity:
        raise ValueError("cannot render an empty BigDecimal buffer")

    return bytes(_ASCII_ZERO + bn.digit_at(pos) for pos in range(start, bn.capacity))


def render_text(bn: BigDecimal) -> str:
    """render() как str."""
    return render(bn).decode("ascii")
