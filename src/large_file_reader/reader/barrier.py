"""One-shot completion barrier for a fixed number of workers."""

import enum
import logging
import threading
from collections.abc import Callable

logger = logging.getLogger(__name__)


class BarrierState(enum.Enum):
    IDLE = "idle"
    ARMED = "armed"
    TRIGGERED = "triggered"
    FINALIZED = "finalized"


class CompletionBarrier:
    """
    Run a finalize action exactly once after a fixed number of arrivals.

    Unlike threading.Barrier, arriving never blocks: each worker reports
    completion and moves on. The last arrival runs the finalize action
    synchronously before its ``arrive`` call returns.
    """

    def __init__(self, finalize: Callable[[], None]):
        self._finalize = finalize
        self._lock = threading.Lock()
        self._state = BarrierState.IDLE
        self._expected = 0
        self._arrived = 0

    @property
    def state(self) -> BarrierState:
        with self._lock:
            return self._state

    @property
    def arrived(self) -> int:
        with self._lock:
            return self._arrived

    def arm(self, expected: int) -> None:
        """Set the number of arrivals required to trigger finalize."""
        if expected < 1:
            raise ValueError(f"expected arrivals must be at least 1, got {expected}")
        with self._lock:
            if self._state is not BarrierState.IDLE:
                raise RuntimeError(f"Cannot arm barrier in state {self._state.value}")
            self._expected = expected
            self._state = BarrierState.ARMED

    def arrive(self) -> bool:
        """
        Record one completion.

        Returns True for the arrival that ran finalize. Errors raised by the
        finalize action propagate to that caller; the barrier still ends
        finalized.
        """
        with self._lock:
            if self._state is not BarrierState.ARMED:
                raise RuntimeError(f"Unexpected arrival in state {self._state.value}")
            self._arrived += 1
            if self._arrived < self._expected:
                return False
            self._state = BarrierState.TRIGGERED

        logger.debug("Barrier triggered after %d arrivals", self._expected)
        try:
            self._finalize()
        finally:
            with self._lock:
                self._state = BarrierState.FINALIZED
        return True
