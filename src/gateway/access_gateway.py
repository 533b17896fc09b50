"""Access Gateway — виртуальный Fibonacci device с seek/read/write.

- Одна активная сессия на экземпляр (неблокирующий try-lock)
- seek() задаёт индекс последовательности, clamp в [0, MAX_N]
- read() возвращает цифры F(offset), offset при этом не сдвигается
- write() принимается без изменения состояния
"""

import errno
import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from src.core.domain.read_result import ReadResult, SeekMode, SessionState
from src.core.math.renderer import render
from src.engine.sequence import SequenceEngine

logger = logging.getLogger(__name__)

# Значение, которое возвращает write() для любых данных
WRITE_RESULT = 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DeviceBusyError(OSError):
    """Сессия уже открыта другим вызывающим (errno EBUSY)."""

    def __init__(self, message: str = "fibonacci device is in use"):
        super().__init__(errno.EBUSY, message)


class SessionStateError(Exception):
    """Операция требует открытой сессии (или закрытие без открытия)."""


# =============================================================================
# GATEWAY
# =============================================================================


class AccessGateway:
    """Fibonacci device: exclusivity + seek + read.

    Эксклюзивность хранится в поле экземпляра, а не в глобальном состоянии:
    независимые gateway (например, в тестах) не влияют друг на друга.

    Порядок работы:
    1. open_session() → DeviceBusyError если сессия уже активна
    2. seek() / read() / write()
    3. close_session()
    """

    def __init__(self, engine: Optional[SequenceEngine] = None):
        """
        Args:
            engine: движок вычислений (default SequenceEngine())
        """
        self.engine = engine or SequenceEngine()
        self._lock = threading.Lock()
        self._offset = 0

    # -------------------------------------------------------------------------
    # Session
    # -------------------------------------------------------------------------

    @property
    def max_n(self) -> int:
        return self.engine.max_n

    @property
    def offset(self) -> int:
        """Текущая позиция (индекс последовательности)."""
        return self._offset

    @property
    def is_session_active(self) -> bool:
        return self._lock.locked()

    @property
    def state(self) -> SessionState:
        return SessionState.OPEN if self.is_session_active else SessionState.CLOSED

    def open_session(self) -> None:
        """Открытие сессии без ожидания.

        Raises:
            DeviceBusyError: если сессия уже активна
        """
        if not self._lock.acquire(blocking=False):
            logger.warning("fibonacci device is in use")
            raise DeviceBusyError()

        self._offset = 0
        logger.info("session opened (max_n=%d)", self.max_n)

    def close_session(self) -> None:
        """Освобождение эксклюзивности.

        Raises:
            SessionStateError: если сессия не была открыта
        """
        if not self._lock.locked():
            raise SessionStateError("close_session() called without an active session")

        try:
            self._lock.release()
        except RuntimeError:
            # Сессию закрыли между проверкой и release
            raise SessionStateError(
                "close_session() called without an active session"
            ) from None
        logger.info("session closed")

    @contextmanager
    def session(self) -> Iterator["AccessGateway"]:
        """open_session() / close_session() как context manager."""
        self.open_session()
        try:
            yield self
        finally:
            self.close_session()

    def _require_session(self, operation: str) -> None:
        if not self._lock.locked():
            raise SessionStateError(f"{operation}() requires an active session")

    # -------------------------------------------------------------------------
    # Read / Write / Seek
    # -------------------------------------------------------------------------

    def clamp_index(self, index: int) -> int:
        """Clamp индекса в [0, MAX_N]."""
        return max(0, min(index, self.max_n))

    def read_at(self, index: int) -> ReadResult:
        """Цифры F(index) с clamp индекса в [0, MAX_N].

        Не требует сессии: это чистая функция индекса.
        """
        index = self.clamp_index(index)
        digits = render(self.engine.compute(index))
        logger.debug("read F(%d) = %s", index, digits.decode("ascii"))
        return ReadResult(index=index, digits=digits, count=len(digits))

    def read(self, size: Optional[int] = None) -> ReadResult:
        """Чтение F(offset). Позиция не сдвигается.

        Args:
            size: максимальное количество байт (None: всё значение)

        Raises:
            SessionStateError: если сессия не открыта
            ValueError: если size < 1
        """
        self._require_session("read")
        if size is not None and size < 1:
            raise ValueError(f"size must be >= 1, got {size}")

        result = self.read_at(self._offset)
        if size is None or size >= result.count:
            return result

        digits = result.digits[:size]
        return ReadResult(index=result.index, digits=digits, count=len(digits))

    def write(self, data: bytes) -> int:
        """Запись игнорируется; всегда возвращает WRITE_RESULT.

        Не требует сессии и не меняет состояния.
        """
        return WRITE_RESULT

    def seek(self, requested_offset: int, mode: SeekMode = SeekMode.ABSOLUTE) -> int:
        """Установка позиции.

        - ABSOLUTE: requested_offset
        - RELATIVE_TO_CURRENT: offset + requested_offset
        - FROM_END: MAX_N - requested_offset

        Результат ограничивается [0, MAX_N], сохраняется и возвращается.

        Raises:
            SessionStateError: если сессия не открыта
            ValueError: requested_offset не int или неизвестный mode
        """
        self._require_session("seek")
        if isinstance(requested_offset, bool) or not isinstance(requested_offset, int):
            raise ValueError(f"requested_offset must be an int, got {requested_offset!r}")
        try:
            mode = SeekMode(mode)
        except ValueError:
            raise ValueError(f"invalid seek mode: {mode!r}") from None

        if mode == SeekMode.ABSOLUTE:
            new_offset = requested_offset
        elif mode == SeekMode.RELATIVE_TO_CURRENT:
            new_offset = self._offset + requested_offset
        else:
            new_offset = self.max_n - requested_offset

        self._offset = self.clamp_index(new_offset)
        logger.debug(
            "seek(%d, %s) -> %d", requested_offset, mode.name, self._offset
        )
        return self._offset
