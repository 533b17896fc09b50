"""
Core math modules для Fibonacci engine

Десятичная арифметика фиксированной ёмкости с точным результатом.
"""

# BigDecimal representation
from src.core.math.bigdecimal import (
    BIGDECIMAL_CAPACITY_DEFAULT,
    BigDecimal,
    estimate_digit_length,
)

# Adder
from src.core.math.adder import (
    CapacityOverflowError,
    OverflowPolicy,
    add,
)

# Renderer
from src.core.math.renderer import (
    render,
    render_text,
)

__all__ = [
    # BigDecimal — Constants
    "BIGDECIMAL_CAPACITY_DEFAULT",
    # BigDecimal — Types
    "BigDecimal",
    # BigDecimal — Functions
    "estimate_digit_length",
    # Adder — Exceptions
    "CapacityOverflowError",
    # Adder — Types
    "OverflowPolicy",
    # Adder — Functions
    "add",
    # Renderer — Functions
    "render",
    "render_text",
]
