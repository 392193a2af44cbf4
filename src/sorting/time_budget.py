import math
import time
from typing import Callable


class TimeBudget:
    """
    Wall-clock allowance for a sort before it is abandoned.

    The budget starts unbounded and is fixed exactly once, from the duration
    of the baseline linear search multiplied by a ratio. Every sort receives
    the same instance together with the time it started.

    Args:
        clock: Monotonic clock returning seconds, ``time.perf_counter`` by default
    """

    def __init__(self, clock: Callable[[], float] = time.perf_counter):
        self.clock = clock
        self.max_execution_ms = math.inf
        self._is_set = False

    @property
    def is_set(self) -> bool:
        return self._is_set

    def set_budget(self, elapsed_ms: float, ratio: float) -> float:
        """
        Fix the budget to elapsed_ms * ratio.

        Returns:
            The budget in milliseconds

        Raises:
            RuntimeError: If the budget was already set
            ValueError: If elapsed_ms or ratio is negative
        """
        if self._is_set:
            raise RuntimeError("Time budget can only be set once")
        if elapsed_ms < 0:
            raise ValueError("Elapsed time must be non-negative")
        if ratio < 0:
            raise ValueError("Sort to search ratio must be non-negative")

        self.max_execution_ms = elapsed_ms * ratio
        self._is_set = True
        return self.max_execution_ms

    def now(self) -> float:
        return self.clock()

    def elapsed_ms(self, start_time: float) -> float:
        """Milliseconds elapsed since start_time (a value returned by now())."""
        return (self.clock() - start_time) * 1000

    def is_over_budget(self, start_time: float) -> bool:
        return self.elapsed_ms(start_time) > self.max_execution_ms

    def __repr__(self) -> str:
        return f"TimeBudget(max_execution_ms={self.max_execution_ms})"
