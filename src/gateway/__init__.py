"""Gateway — доступ к Fibonacci engine как к виртуальному файлу.

- Эксклюзивная сессия (EBUSY при повторном открытии)
- seek/read/write с clamp индекса в [0, MAX_N]
"""

from .access_gateway import (
    WRITE_RESULT,
    AccessGateway,
    DeviceBusyError,
    SessionStateError,
)

__all__ = [
    "WRITE_RESULT",
    "AccessGateway",
    "DeviceBusyError",
    "SessionStateError",
]
