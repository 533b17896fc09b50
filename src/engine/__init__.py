"""Engine — вычисление членов последовательности Фибоначчи.

- Итеративная рекуррентность на BigDecimal
- Конфигурация ёмкости, MAX_N и политики переполнения
"""

from .sequence import (
    MAX_N_DEFAULT,
    EngineConfig,
    SequenceEngine,
)

__all__ = [
    "MAX_N_DEFAULT",
    "EngineConfig",
    "SequenceEngine",
]
