"""
ReadResult — Модель результата чтения из Fibonacci device

Immutable Pydantic модель, представляющая один ответ read():
индекс последовательности, цифры F(index) и количество байт.
Совместима с JSON Schema (src/core/contracts/schema/read_result.json).
"""

from enum import Enum, IntEnum
from typing import Any

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# ENUMS
# =============================================================================


class SeekMode(IntEnum):
    """
    Режим seek().

    Численно совпадает с os.SEEK_SET / os.SEEK_CUR / os.SEEK_END.
    """

    ABSOLUTE = 0
    RELATIVE_TO_CURRENT = 1
    FROM_END = 2


class SessionState(str, Enum):
    """Состояние сессии access gateway."""

    CLOSED = "CLOSED"
    OPEN = "OPEN"


# =============================================================================
# READ RESULT MODEL
# =============================================================================


class ReadResult(BaseModel):
    """
    Результат чтения F(index).

    Immutable модель (frozen=True):
    - index: индекс после clamp в [0, MAX_N]
    - digits: ASCII-цифры значения (никогда не пустые)
    - count: количество возвращённых байт (== len(digits))
    """

    schema_version: str = Field(
        "1", pattern="^1$", description="Версия схемы для tracking совместимости"
    )
    index: int = Field(..., ge=0, description="Индекс в последовательности Фибоначчи")
    digits: bytes = Field(..., min_length=1, description="Десятичные цифры F(index)")
    count: int = Field(..., ge=1, description="Количество байт в digits")

    model_config = {"frozen": True}

    @field_validator("digits")
    @classmethod
    def validate_digits(cls, v: bytes) -> bytes:
        """Только ASCII-цифры 0-9"""
        if not v.isdigit():
            raise ValueError(f"digits must contain only ASCII 0-9, got {v!r}")
        return v

    @field_validator("count")
    @classmethod
    def validate_count_matches_digits(cls, v: int, info) -> int:
        """count совпадает с длиной digits"""
        if "digits" in info.data and v != len(info.data["digits"]):
            raise ValueError(
                f"count must equal len(digits)={len(info.data['digits'])}, got {v}"
            )
        return v

    @property
    def text(self) -> str:
        """Цифры как str."""
        return self.digits.decode("ascii")

    def to_contract_dict(self) -> dict[str, Any]:
        """JSON-представление для валидации контракта read_result."""
        return {
            "schema_version": self.schema_version,
            "index": self.index,
            "digits": self.text,
            "count": self.count,
        }
