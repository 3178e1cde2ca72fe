"""Tests for the thread pool helper."""

import threading
import time

import pytest

from fontgarden.utils.parallel import parallel_map


class TestParallelMap:
    def test_results_in_input_order(self) -> None:
        """Test results line up with inputs even when tasks finish out of order."""

        def slow_for_small(n: int) -> int:
            time.sleep(0.01 * (5 - n))
            return n * n

        assert parallel_map(slow_for_small, range(5), max_workers=5) == [0, 1, 4, 9, 16]

    def test_empty_input(self) -> None:
        assert parallel_map(lambda n: n, []) == []

    def test_first_error_propagates(self) -> None:
        def fail_on_three(n: int) -> int:
            if n == 3:
                raise KeyError(n)
            return n

        with pytest.raises(KeyError):
            parallel_map(fail_on_three, range(10), max_workers=2)

    def test_pending_tasks_cancelled_after_error(self) -> None:
        """Test tasks still queued when a task fails never start."""
        started: list[int] = []
        lock = threading.Lock()

        def work(n: int) -> int:
            with lock:
                started.append(n)
            if n == 0:
                raise RuntimeError("boom")
            time.sleep(0.05)
            return n

        with pytest.raises(RuntimeError, match="boom"):
            parallel_map(work, range(50), max_workers=1)
        assert len(started) < 50
