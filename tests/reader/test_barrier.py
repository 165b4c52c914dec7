"""Tests for the completion barrier."""

import threading

import pytest

from large_file_reader.reader import BarrierState, CompletionBarrier


class TestCompletionBarrier:
    """Test cases for CompletionBarrier."""

    def test_finalize_runs_on_last_arrival(self) -> None:
        """Test that only the Nth arrival runs finalize."""
        calls: list[int] = []
        barrier = CompletionBarrier(lambda: calls.append(barrier.arrived))
        barrier.arm(3)

        assert barrier.arrive() is False
        assert barrier.arrive() is False
        assert calls == []
        assert barrier.arrive() is True
        assert calls == [3]
        assert barrier.state is BarrierState.FINALIZED

    def test_states(self) -> None:
        """Test the Idle -> Armed -> Finalized progression."""
        barrier = CompletionBarrier(lambda: None)
        assert barrier.state is BarrierState.IDLE
        barrier.arm(1)
        assert barrier.state is BarrierState.ARMED
        barrier.arrive()
        assert barrier.state is BarrierState.FINALIZED

    def test_finalize_sees_triggered_state(self) -> None:
        """Test that finalize runs while the barrier is triggered."""
        seen: list[BarrierState] = []
        barrier = CompletionBarrier(lambda: seen.append(barrier.state))
        barrier.arm(1)
        barrier.arrive()
        assert seen == [BarrierState.TRIGGERED]

    def test_extra_arrival_is_rejected(self) -> None:
        """Test that arriving after finalize raises."""
        barrier = CompletionBarrier(lambda: None)
        barrier.arm(1)
        barrier.arrive()
        with pytest.raises(RuntimeError):
            barrier.arrive()

    def test_arrival_before_arm_is_rejected(self) -> None:
        barrier = CompletionBarrier(lambda: None)
        with pytest.raises(RuntimeError):
            barrier.arrive()

    def test_arm_validation(self) -> None:
        barrier = CompletionBarrier(lambda: None)
        with pytest.raises(ValueError):
            barrier.arm(0)
        barrier.arm(2)
        with pytest.raises(RuntimeError):
            barrier.arm(2)

    def test_finalize_error_propagates_and_finalizes(self) -> None:
        """Test that a failing finalize still leaves the barrier finalized."""

        def boom() -> None:
            raise OSError("disk full")

        barrier = CompletionBarrier(boom)
        barrier.arm(2)
        barrier.arrive()
        with pytest.raises(OSError, match="disk full"):
            barrier.arrive()
        assert barrier.state is BarrierState.FINALIZED

    def test_concurrent_arrivals_finalize_once(self) -> None:
        """Test that many threads arriving together trigger finalize exactly once."""
        calls: list[str] = []
        lock = threading.Lock()

        def finalize() -> None:
            with lock:
                calls.append("done")

        workers = 32
        barrier = CompletionBarrier(finalize)
        barrier.arm(workers)
        start = threading.Barrier(workers)
        results: list[bool] = []

        def arrive() -> None:
            start.wait()
            triggered = barrier.arrive()
            with lock:
                results.append(triggered)

        threads = [threading.Thread(target=arrive) for _ in range(workers)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert calls == ["done"]
        assert results.count(True) == 1
        assert barrier.arrived == workers
