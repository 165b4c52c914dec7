"""Thread-safe counter for diagnostic statistics."""

import threading


class LineCounter:
    """Monotonically increasing counter shared by all workers."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value = 0

    def increment(self, amount: int = 1) -> int:
        with self._lock:
            self._value += amount
            return self._value

    @property
    def value(self) -> int:
        with self._lock:
            return self._value
