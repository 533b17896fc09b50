"""
Contract Validation Module

Модуль для валидации JSON контрактов Fibonacci device.
"""

from .validators import (
    ContractValidator,
    ReadResultValidator,
    SchemaLoader,
    validate_read_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ReadResultValidator",
    # Functions
    "validate_read_result",
]
