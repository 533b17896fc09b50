"""
Domain models and value objects.

Contains the read result model and the enums shared by the engine
and the access gateway.
"""

from src.core.domain.read_result import (
    ReadResult,
    SeekMode,
    SessionState,
)

__all__ = [
    "ReadResult",
    "SeekMode",
    "SessionState",
]
