"""Sequence Engine — итеративное вычисление F(n) на BigDecimal.

- F(0) = 0, F(1) = 1, F(i) = F(i-1) + F(i-2)
- Двухслотовое скользящее состояние: O(1) рабочей памяти
- Домен n ∈ [0, max_n]; clamp выполняет access gateway
"""

import logging
from dataclasses import dataclass

from src.core.math.adder import OverflowPolicy, add
from src.core.math.bigdecimal import (
    BIGDECIMAL_CAPACITY_DEFAULT,
    BigDecimal,
    estimate_digit_length,
)

logger = logging.getLogger(__name__)

# Максимальный адресуемый индекс по умолчанию (MAX_N)
MAX_N_DEFAULT = 100


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class EngineConfig:
    """Конфигурация Sequence Engine.

    max_n задаёт предел безопасности на рост числа цифр (~0.209 цифры на шаг),
    а не ограничение представления. capacity должна превышать
    estimate_digit_length(max_n), иначе возможна потеря переноса.
    """

    max_n: int = MAX_N_DEFAULT
    capacity: int = BIGDECIMAL_CAPACITY_DEFAULT
    overflow_policy: OverflowPolicy = OverflowPolicy.RAISE

    def __post_init__(self):
        if isinstance(self.max_n, bool) or not isinstance(self.max_n, int) or self.max_n < 1:
            raise ValueError(f"max_n must be an int >= 1, got {self.max_n!r}")
        if isinstance(self.capacity, bool) or not isinstance(self.capacity, int) or self.capacity < 1:
            raise ValueError(f"capacity must be an int >= 1, got {self.capacity!r}")
        # Строковые значения ("RAISE") приводятся к enum
        object.__setattr__(self, "overflow_policy", OverflowPolicy(self.overflow_policy))

    @property
    def required_capacity(self) -> int:
        """Количество цифр F(max_n)."""
        return estimate_digit_length(self.max_n)


# =============================================================================
# ENGINE
# =============================================================================


class SequenceEngine:
    """Генератор F(n) через рекуррентное сложение.

    Каждый вызов compute() независим: движок не хранит состояния между
    вызовами и не использует блокировок.
    """

    def __init__(self, config: EngineConfig | None = None):
        """
        Args:
            config: конфигурация (default EngineConfig())
        """
        self.config = config or EngineConfig()

        if self.config.required_capacity > self.config.capacity:
            logger.warning(
                "capacity %d is below %d digits of F(%d): overflow policy %s applies",
                self.config.capacity,
                self.config.required_capacity,
                self.config.max_n,
                self.config.overflow_policy.value,
            )

    @property
    def max_n(self) -> int:
        return self.config.max_n

    def compute(self, n: int) -> BigDecimal:
        """Вычисление F(n).

        Args:
            n: индекс в [0, max_n]

        Returns:
            Новое значение BigDecimal, принадлежащее вызывающему

        Raises:
            ValueError: n не int или вне [0, max_n]
            CapacityOverflowError: при overflow_policy=RAISE и нехватке ёмкости
        """
        if isinstance(n, bool) or not isinstance(n, int):
            raise ValueError(f"n must be an int, got {n!r}")
        if not 0 <= n <= self.config.max_n:
            raise ValueError(f"n must be in [0, {self.config.max_n}], got {n}")

        capacity = self.config.capacity
        prev = BigDecimal.zero(capacity)
        if n == 0:
            return prev

        curr = BigDecimal.one(capacity)
        for _ in range(2, n + 1):
            prev, curr = curr, add(curr, prev, self.config.overflow_policy)

        logger.debug("computed F(%d): %d digits", n, curr.digit_count)
        return curr
